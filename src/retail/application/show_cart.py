"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from retail.application.dto import CartDTO, CartLineDTO
from retail.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[CartLineDTO.from_domain(line) for line in self._cart.lines],
            total=str(self._cart.total),
        )
