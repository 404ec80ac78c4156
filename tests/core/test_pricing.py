"""Unit tests for money helpers."""

from decimal import Decimal

import pytest

from preview_cart.common.pricing import format_price, to_money


class TestToMoney:

    def test_to_money_when_float_then_uses_decimal_repr(self):
        assert to_money(0.26) == Decimal("0.26")

    def test_to_money_when_not_numeric_then_raises_error(self):
        with pytest.raises(ValueError, match="Invalid price"):
            to_money("cheap")

    def test_to_money_when_bool_then_raises_error(self):
        with pytest.raises(ValueError):
            to_money(True)


class TestFormatPrice:

    @pytest.mark.parametrize("amount, expected", [
        (Decimal("0"), "$0.00"),
        (Decimal("0.78"), "$0.78"),
        (Decimal("1.3"), "$1.30"),
        (Decimal("5.69"), "$5.69"),
        ("39", "$39.00"),
        (Decimal("0.005"), "$0.01"),
    ])
    def test_format_price_when_amount_then_two_decimals(self, amount, expected):
        assert format_price(amount) == expected
