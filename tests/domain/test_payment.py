"""Unit tests for payment method variants and menu-key dispatch."""

import pytest

from retail.domain.model.payment import (
    PAYMENT_OPTIONS,
    CardPayment,
    CashPayment,
    DigitalWalletPayment,
    payment_method_for,
)
from retail.domain.model.value_objects import Money


class TestPaymentVariants:

    @pytest.mark.parametrize(
        "payment, name",
        [
            (CashPayment(), "Cash"),
            (CardPayment(), "Credit / Debit Card"),
            (DigitalWalletPayment(), "GCash"),
        ],
    )
    def test_display_name(self, payment, name):
        assert payment.display_name == name

    def test_charge_returns_confirmation(self):
        assert CashPayment().charge(Money.of(2400)) == "Paid 2400.00 using Cash."

    def test_wallet_name_is_configurable(self):
        wallet = DigitalWalletPayment("Maya")
        assert wallet.display_name == "Maya"
        assert wallet.charge(Money.of(5)) == "Paid 5.00 using Maya."


class TestPaymentDispatch:

    def test_known_keys(self):
        assert isinstance(payment_method_for("1"), CashPayment)
        assert isinstance(payment_method_for("2"), CardPayment)
        assert isinstance(payment_method_for(" 3 "), DigitalWalletPayment)

    @pytest.mark.parametrize("token", ["", "0", "4", "cash", "one"])
    def test_unknown_keys_return_none(self, token):
        assert payment_method_for(token) is None

    def test_each_choice_is_a_fresh_instance(self):
        assert payment_method_for("1") is not payment_method_for("1")

    def test_options_listing(self):
        assert PAYMENT_OPTIONS == [
            ("1", "Cash"),
            ("2", "Credit / Debit Card"),
            ("3", "GCash"),
        ]
