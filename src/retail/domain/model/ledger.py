"""OrderLedger: append-only history of committed orders."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from retail.domain.model.cart import CartLine
from retail.domain.model.order import Order
from retail.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class OrderLedger:
    """Write-once audit trail of orders for the session.

    The only mutation is ``commit``, which appends the next order with
    ``id == len(ledger) + 1``. There is no update or delete.
    """

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def commit(
        self,
        lines: Iterable[CartLine],
        payment_method_name: str,
        total: Money,
    ) -> Order:
        order = Order.snapshot(
            order_id=len(self._orders) + 1,
            lines=lines,
            payment_method_name=payment_method_name,
            total=total,
        )
        self._orders.append(order)
        logger.info(
            "Committed order #%d (%s, total=%s)",
            order.id, payment_method_name, total,
        )
        return order

    def list_all(self) -> list[Order]:
        return list(self._orders)

    @property
    def is_empty(self) -> bool:
        return not self._orders

    def __len__(self) -> int:
        return len(self._orders)
