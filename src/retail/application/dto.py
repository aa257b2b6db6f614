"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from retail.domain.model.cart import CartLine
from retail.domain.model.order import Order
from retail.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(id=product.id, name=product.name, price=str(product.price))


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart line as displayed to the user."""

    product_id: str
    product_name: str
    unit_price: str  # formatted, e.g. "600.00"
    quantity: int
    line_total: str

    @staticmethod
    def from_domain(line: CartLine) -> CartLineDTO:
        return CartLineDTO(
            product_id=line.product.id,
            product_name=line.product.name,
            unit_price=str(line.product.price),
            quantity=line.quantity.value,
            line_total=str(line.line_total),
        )


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """A committed order as displayed in the order history."""

    id: int
    payment_method_name: str
    items: list[OrderLineDTO]
    total: str
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            payment_method_name=order.payment_method_name,
            items=[
                OrderLineDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    unit_price=str(item.unit_price),
                    quantity=item.quantity.value,
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


class CheckoutOutcome(Enum):
    COMPLETED = "COMPLETED"
    EMPTY_CART = "EMPTY_CART"


@dataclass(frozen=True)
class CheckoutResult:
    """Output of a checkout attempt.

    ``order`` and ``confirmation`` are only set for COMPLETED checkouts.
    ``audit_recorded`` is False when the audit sink could not be written.
    """

    outcome: CheckoutOutcome
    order: OrderDTO | None = None
    confirmation: str | None = None
    audit_recorded: bool = False
