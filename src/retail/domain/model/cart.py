"""Shopping cart for the active session.

Exactly one Cart exists per session. It is created empty, grows through
``add_product`` and is emptied in one step after a successful checkout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    """One product in the cart together with how many units were picked.

    Mutable only via ``increment()``; the product reference never changes.
    """

    product: Product
    quantity: Quantity = Quantity(1)

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def increment(self) -> None:
        self.quantity = self.quantity.incremented()


class Cart:
    """Ordered collection of CartLines, at most one per product id.

    Invariant: ``total`` always equals the sum of ``price * quantity``
    over ``lines``.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    def add_product(self, product: Product) -> CartLine:
        """Add one unit of *product*, merging with an existing line."""
        line = self._find_line(product.id)
        if line is not None:
            line.increment()
            logger.debug("Cart: %s quantity now %s", product.id, line.quantity)
            return line

        line = CartLine(product=product)
        self._lines.append(line)
        logger.debug("Cart: added new line for %s", product.id)
        return line

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def clear(self) -> None:
        self._lines = []
        logger.debug("Cart cleared")

    def __len__(self) -> int:
        return len(self._lines)

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine | None:
        for line in self._lines:
            if line.product.matches(product_id):
                return line
        return None
