"""Unit tests for Product and Catalog lookups."""

import dataclasses

import pytest

from retail.domain.model.catalog import Catalog
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.infrastructure.bootstrap import DEFAULT_PRODUCTS
from tests.fakes import HOODIE, TSHIRT


class TestProduct:

    def test_id_is_normalized_to_upper_case(self):
        p = Product(id=" abc ", name="Tshirt", price=Money.of(600))
        assert p.id == "ABC"

    def test_matches_is_case_insensitive(self):
        assert TSHIRT.matches("abc")
        assert TSHIRT.matches("AbC")
        assert not TSHIRT.matches("DEF")

    def test_product_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            TSHIRT.price = Money.of(1)  # type: ignore[misc]


class TestCatalogLookup:

    def test_lookup_known_id(self):
        catalog = Catalog([TSHIRT, HOODIE])
        assert catalog.lookup("DEF") is HOODIE

    def test_lookup_ignores_case_and_whitespace(self):
        catalog = Catalog([TSHIRT, HOODIE])
        assert catalog.lookup("  def ") is HOODIE

    def test_unknown_id_returns_none(self):
        catalog = Catalog([TSHIRT, HOODIE])
        assert catalog.lookup("XYZ") is None

    def test_list_all_preserves_order(self):
        catalog = Catalog([HOODIE, TSHIRT])
        assert [p.id for p in catalog.list_all()] == ["DEF", "ABC"]

    def test_list_all_returns_a_copy(self):
        catalog = Catalog([TSHIRT])
        catalog.list_all().clear()
        assert len(catalog) == 1


class TestDefaultCatalog:

    def test_contains_the_five_store_products(self):
        catalog = Catalog(DEFAULT_PRODUCTS)
        assert [p.id for p in catalog.list_all()] == ["ABC", "DEF", "GHI", "JKL", "MNO"]
        assert catalog.lookup("mno").price == Money.of(2000)
