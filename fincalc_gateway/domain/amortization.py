"""Annuity loan amortization schedule generation"""

from decimal import Decimal
from typing import List

from fincalc_gateway.domain.exceptions import InvalidTermsError
from fincalc_gateway.domain.models import AmortizationRow, AmortizationSchedule, LoanTerms
from fincalc_gateway.utils.money import (
    MINOR_UNIT,
    ZERO,
    calculation_context,
    quantize_money,
    to_decimal,
)

MONTHS_PER_YEAR = 12


def validate_term_months(term_months: int, allow_zero: bool = False) -> int:
    """Reject non-integer and out-of-range terms"""
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidTermsError(f"term_months must be an integer, got {term_months!r}")

    lowest = 0 if allow_zero else 1
    if term_months < lowest:
        raise InvalidTermsError(f"term_months must be >= {lowest}, got {term_months}")

    return term_months


def monthly_rate_from_annual(annual_rate_percent: Decimal) -> Decimal:
    """18 (% per year) -> 0.015 per month"""
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


def annuity_payment(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    """
    Unrounded fixed installment for an annuity loan.

    payment = P * r * (1 + r)^n / ((1 + r)^n - 1), or P / n when r == 0
    """
    if monthly_rate == 0:
        return principal / term_months

    growth = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * growth / (growth - 1)


def compute_schedule(terms: LoanTerms, minor_unit: Decimal = MINOR_UNIT) -> AmortizationSchedule:
    """
    Compute the monthly payment and full amortization schedule of a loan.

    Requirements:
    - Equal installments (annuity method), rounded to the minor unit
    - Interest of each row is charged on the running balance
    - Last installment pays off the exact remaining balance, so principal
      portions sum to the principal and the final balance is exactly 0

    Args:
        terms: Loan amount, nominal annual rate and number of installments
        minor_unit: Rounding unit for money amounts (default 0.01)

    Returns:
        AmortizationSchedule with monthly payment, rows and totals

    Raises:
        InvalidTermsError: principal <= 0, term_months <= 0 or negative rate

    Example:
        500000 at 18% over 12 months -> 45840.00 per month, about 50080 interest
    """
    principal = to_decimal(terms.principal, "principal")
    annual_rate = to_decimal(terms.annual_rate_percent, "annual_rate_percent")
    term_months = validate_term_months(terms.term_months)

    if principal <= 0:
        raise InvalidTermsError(f"principal must be positive, got {principal}")
    if annual_rate < 0:
        raise InvalidTermsError(f"annual_rate_percent must not be negative, got {annual_rate}")

    with calculation_context():
        monthly_rate = monthly_rate_from_annual(annual_rate)
        monthly_payment = quantize_money(
            annuity_payment(principal, monthly_rate, term_months), minor_unit
        )

        rows: List[AmortizationRow] = []
        remaining = principal

        for payment_number in range(1, term_months + 1):
            interest = quantize_money(remaining * monthly_rate, minor_unit)

            if payment_number == term_months:
                # Final installment absorbs accumulated rounding drift
                principal_portion = remaining
                remaining = ZERO
            else:
                principal_portion = min(monthly_payment - interest, remaining)
                remaining = max(ZERO, remaining - principal_portion)

            rows.append(
                AmortizationRow(
                    payment_number=payment_number,
                    principal_portion=principal_portion,
                    interest_portion=interest,
                    total_payment=principal_portion + interest,
                    remaining_balance=remaining,
                )
            )

        total_payment = sum((row.total_payment for row in rows), ZERO)

    return AmortizationSchedule(
        monthly_payment=monthly_payment,
        schedule=tuple(rows),
        total_payment=total_payment,
        total_interest=total_payment - principal,
    )
