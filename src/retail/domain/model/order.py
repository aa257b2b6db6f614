"""Order: the immutable record of a completed checkout.

An Order is a snapshot. Its lines are copied out of the Cart at commit
time, so later cart activity can never reach back into it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from retail.domain.model.cart import CartLine
from retail.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """Captures a cart line's product data and quantity at checkout."""

    product_id: str
    product_name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLine:
        return OrderLine(
            product_id=line.product.id,
            product_name=line.product.name,
            unit_price=line.product.price,
            quantity=line.quantity,
        )


@dataclass(frozen=True)
class Order:
    """A committed checkout. Never mutated, never deleted."""

    id: int
    items: tuple[OrderLine, ...]
    payment_method_name: str
    total: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def snapshot(
        order_id: int,
        lines: Iterable[CartLine],
        payment_method_name: str,
        total: Money,
    ) -> Order:
        """Build an Order from cart lines, copying every line."""
        return Order(
            id=order_id,
            items=tuple(OrderLine.from_cart_line(line) for line in lines),
            payment_method_name=payment_method_name,
            total=total,
        )
