"""Application service: Checkout use case.

Coordinates Cart -> PaymentMethod -> OrderLedger -> AuditLog. This is
the only place that touches all of them in a single operation.

The flow is a small state machine::

    IDLE -> AWAITING_PAYMENT_CHOICE -> CHARGING -> COMMITTING -> IDLE

Once CHARGING has been entered the checkout always runs to the end.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from retail.application.dto import CheckoutOutcome, CheckoutResult, OrderDTO
from retail.domain.model.cart import Cart
from retail.domain.model.ledger import OrderLedger
from retail.domain.model.order import Order
from retail.domain.model.payment import PaymentMethod, payment_method_for
from retail.domain.repository.audit_log import AuditLog

logger = logging.getLogger(__name__)

AUDIT_LINE_FORMAT = (
    "(LOG) -> Order ID: {order_id} has been successfully checked out "
    "and paid using {payment_method_name}."
)


def format_audit_line(order: Order) -> str:
    return AUDIT_LINE_FORMAT.format(
        order_id=order.id, payment_method_name=order.payment_method_name
    )


class CheckoutState(Enum):
    IDLE = "IDLE"
    AWAITING_PAYMENT_CHOICE = "AWAITING_PAYMENT_CHOICE"
    CHARGING = "CHARGING"
    COMMITTING = "COMMITTING"


class CheckoutHandler:

    def __init__(
        self,
        cart: Cart,
        ledger: OrderLedger,
        audit_log: AuditLog,
    ) -> None:
        self._cart = cart
        self._ledger = ledger
        self._audit_log = audit_log
        self.state = CheckoutState.IDLE

    def handle(
        self,
        select_payment: Callable[[], str],
        on_invalid_choice: Callable[[str], None] | None = None,
    ) -> CheckoutResult:
        """Check out the whole cart.

        Args:
            select_payment: Called repeatedly until it returns a valid
                payment menu key. Callers driving this from a script must
                end their input with a valid key or the loop never ends.
            on_invalid_choice: Notified with every rejected token.

        An empty cart yields ``CheckoutOutcome.EMPTY_CART`` and nothing
        else happens.
        """
        if self._cart.is_empty:
            logger.debug("Checkout requested with an empty cart")
            return CheckoutResult(outcome=CheckoutOutcome.EMPTY_CART)

        try:
            total = self._cart.total

            self._transition(CheckoutState.AWAITING_PAYMENT_CHOICE)
            payment = self._await_payment_choice(select_payment, on_invalid_choice)

            self._transition(CheckoutState.CHARGING)
            confirmation = payment.charge(total)

            self._transition(CheckoutState.COMMITTING)
            order = self._ledger.commit(
                self._cart.lines, payment.display_name, total
            )
            try:
                audit_recorded = self._write_audit_line(order)
            finally:
                # A committed order must never stay in the cart.
                self._cart.clear()
        finally:
            self._transition(CheckoutState.IDLE)

        return CheckoutResult(
            outcome=CheckoutOutcome.COMPLETED,
            order=OrderDTO.from_domain(order),
            confirmation=confirmation,
            audit_recorded=audit_recorded,
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _await_payment_choice(
        select_payment: Callable[[], str],
        on_invalid_choice: Callable[[str], None] | None,
    ) -> PaymentMethod:
        while True:
            token = select_payment()
            payment = payment_method_for(token)
            if payment is not None:
                return payment
            logger.debug("Rejected payment choice %r", token)
            if on_invalid_choice is not None:
                on_invalid_choice(token)

    def _write_audit_line(self, order: Order) -> bool:
        # Best-effort: a failed write does not undo the committed order.
        try:
            self._audit_log.record(format_audit_line(order))
        except OSError as exc:
            logger.warning("Could not write audit line for order #%d: %s", order.id, exc)
            return False
        return True

    def _transition(self, new_state: CheckoutState) -> None:
        logger.debug("Checkout: %s -> %s", self.state.value, new_state.value)
        self.state = new_state
