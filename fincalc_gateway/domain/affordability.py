"""Income check shown on the loan application form"""

from decimal import Decimal

from fincalc_gateway.utils.money import Numeric, quantize_money, to_decimal

# Declared monthly income should be at least twice the installment
INCOME_TO_PAYMENT_RATIO = Decimal("2")


def required_monthly_income(
    monthly_payment: Numeric, ratio: Numeric = INCOME_TO_PAYMENT_RATIO
) -> Decimal:
    """Minimum monthly income for a given installment"""
    return quantize_money(to_decimal(monthly_payment, "monthly_payment") * to_decimal(ratio, "ratio"))


def is_affordable(
    monthly_income: Numeric,
    monthly_payment: Numeric,
    ratio: Numeric = INCOME_TO_PAYMENT_RATIO,
) -> bool:
    return to_decimal(monthly_income, "monthly_income") >= required_monthly_income(monthly_payment, ratio)
