"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from retail.application.dto import CartLineDTO
from retail.domain.model.cart import Cart
from retail.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: str) -> CartLineDTO | None:
        """Add one unit of a catalog product to the cart.

        Returns the updated line, or None when the id is not in the
        catalog. The cart is left untouched on a miss.
        """
        product = self._catalog.lookup(product_id)
        if product is None:
            logger.debug("Unknown product id %r", product_id)
            return None

        line = self._cart.add_product(product)
        return CartLineDTO.from_domain(line)
