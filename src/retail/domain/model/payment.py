"""Payment methods.

Each variant knows how to present itself and how to "charge" an amount.
Charging is simulated: it logs the payment and hands back a
confirmation message, and it never fails.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from retail.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentMethod(ABC):

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Label shown to the user and stored on the Order."""

    def charge(self, amount: Money) -> str:
        """Charge *amount* and return the confirmation text."""
        logger.info("Charging %s via %s", amount, self.display_name)
        return f"Paid {amount} using {self.display_name}."

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CashPayment(PaymentMethod):

    @property
    def display_name(self) -> str:
        return "Cash"


class CardPayment(PaymentMethod):

    @property
    def display_name(self) -> str:
        return "Credit / Debit Card"


class DigitalWalletPayment(PaymentMethod):

    def __init__(self, wallet_name: str = "GCash") -> None:
        self._wallet_name = wallet_name

    @property
    def display_name(self) -> str:
        return self._wallet_name

    def __repr__(self) -> str:
        return f"DigitalWalletPayment({self._wallet_name!r})"


# Menu key -> factory. Keys are what the user types at the payment prompt.
_PAYMENT_FACTORIES = {
    "1": CashPayment,
    "2": CardPayment,
    "3": DigitalWalletPayment,
}

PAYMENT_OPTIONS: list[tuple[str, str]] = [
    (key, factory().display_name) for key, factory in _PAYMENT_FACTORIES.items()
]


def payment_method_for(choice: str) -> PaymentMethod | None:
    """Return a fresh PaymentMethod for a menu key, or None if unknown."""
    factory = _PAYMENT_FACTORIES.get(choice.strip())
    if factory is None:
        return None
    return factory()
