"""Unit tests for decimal helpers and amount formatting"""

import pytest
from decimal import Decimal
from fincalc_gateway.domain.exceptions import InvalidTermsError
from fincalc_gateway.utils.formatters import format_amount
from fincalc_gateway.utils.money import quantize_money, to_decimal


def test_to_decimal_float_uses_shortest_repr():
    assert to_decimal(0.1) == Decimal("0.1")


def test_to_decimal_passes_decimal_through():
    value = Decimal("123.456")
    assert to_decimal(value) is value


@pytest.mark.parametrize("value", ["abc", float("nan"), float("inf"), True, None])
def test_to_decimal_rejects_non_numbers(value):
    with pytest.raises(InvalidTermsError):
        to_decimal(value)


def test_quantize_money_rounds_half_up():
    assert quantize_money(Decimal("1.005")) == Decimal("1.01")
    assert quantize_money(Decimal("1.004")) == Decimal("1.00")


@pytest.mark.parametrize(
    "amount, currency, show_sign, expected",
    [
        (Decimal("45840.50"), "KZT", False, "45 840.5 ₸"),
        (Decimal("45840.00"), "KZT", False, "45 840 ₸"),
        (1200, "USD", False, "1 200 $"),
        (-1200, "USD", True, "-1 200 $"),
        (500, "KZT", True, "+500 ₸"),
        (Decimal("1234567.89"), "EUR", False, "1 234 567.89 €"),
        (Decimal("0.004"), "KZT", False, "0 ₸"),
        (1000, "GBP", False, "1 000 GBP"),
    ],
)
def test_format_amount(amount, currency, show_sign, expected):
    assert format_amount(amount, currency, show_sign=show_sign) == expected
