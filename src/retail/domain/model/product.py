"""Product entity.

Products are defined once, in the catalog, when the process starts and
never change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.model.value_objects import Money


def normalize_product_id(product_id: str) -> str:
    """Canonical form used for every product-id comparison."""
    return product_id.strip().upper()


@dataclass(frozen=True)
class Product:
    """A purchasable product.

    ``id`` is stored in canonical (upper-case) form so lookups typed in
    any case resolve to the same product.
    """

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", normalize_product_id(self.id))

    def matches(self, product_id: str) -> bool:
        return self.id == normalize_product_id(product_id)
