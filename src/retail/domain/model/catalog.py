"""Catalog of purchasable products."""

from __future__ import annotations

from collections.abc import Iterable

from retail.domain.model.product import Product


class Catalog:
    """Fixed, ordered list of products.

    There are no mutation operations: the catalog is built once by the
    composition root. ``lookup`` reports a miss by returning ``None``;
    telling the user about it is the caller's job.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)

    def lookup(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.matches(product_id):
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)
