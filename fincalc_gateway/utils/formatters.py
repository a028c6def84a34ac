"""Display formatting for money amounts"""

from fincalc_gateway.utils.money import Numeric, quantize_money, to_decimal

CURRENCY_SYMBOLS = {
    "KZT": "₸",
    "USD": "$",
    "EUR": "€",
}


def format_amount(amount: Numeric, currency: str = "KZT", show_sign: bool = False) -> str:
    """
    Render an amount with space-grouped thousands and a currency symbol.

    Trailing zero fractions are dropped (at most two fraction digits).

    Example:
        format_amount(Decimal("45840.50")) -> "45 840.5 ₸"
        format_amount(-1200, "USD", show_sign=True) -> "-1 200 $"
    """
    value = quantize_money(to_decimal(amount, "amount"))

    text = f"{abs(value):,.2f}".rstrip("0").rstrip(".").replace(",", " ")
    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    if value < 0:
        sign = "-"
    elif show_sign:
        sign = "+"
    else:
        sign = ""

    return f"{sign}{text} {symbol}"
