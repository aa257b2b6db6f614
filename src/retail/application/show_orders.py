"""Application service: Show Orders use case (query)."""

from __future__ import annotations

from retail.application.dto import OrderDTO
from retail.domain.model.ledger import OrderLedger


class ShowOrdersHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self) -> list[OrderDTO]:
        """Every committed order, oldest first."""
        return [OrderDTO.from_domain(order) for order in self._ledger.list_all()]
