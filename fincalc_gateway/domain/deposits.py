"""Deposit income projection with optional monthly capitalization"""

from decimal import Decimal

from fincalc_gateway.domain.amortization import (
    MONTHS_PER_YEAR,
    monthly_rate_from_annual,
    validate_term_months,
)
from fincalc_gateway.domain.exceptions import InvalidTermsError
from fincalc_gateway.domain.models import DepositProjection, DepositTerms
from fincalc_gateway.domain.rates import CAPITALIZATION_BONUS_PERCENT, compose_rate
from fincalc_gateway.utils.money import (
    MINOR_UNIT,
    Numeric,
    calculation_context,
    quantize_money,
    to_decimal,
)


def project_deposit(
    terms: DepositTerms,
    capitalization_bonus: Numeric = CAPITALIZATION_BONUS_PERCENT,
    minor_unit: Decimal = MINOR_UNIT,
) -> DepositProjection:
    """
    Project deposit income at the end of the term.

    Requirements:
    - Effective rate = base + term bonus + capitalization bonus
    - Capitalization on: interest compounds monthly,
      final = principal * (1 + rate/12)^months
    - Capitalization off: simple interest on the original principal,
      interest = principal * rate * months / 12
    - A zero-month term earns nothing in either mode

    Raises:
        InvalidTermsError: principal <= 0, negative term or negative rates

    Example:
        100000, base 12%, bonus 1%, capitalized, 12 months
        -> effective 13.5%, final balance about 114367.44
    """
    principal = to_decimal(terms.principal, "principal")
    base_rate = to_decimal(terms.base_annual_rate_percent, "base_annual_rate_percent")
    term_bonus = to_decimal(terms.term_bonus_percent, "term_bonus_percent")
    term_months = validate_term_months(terms.term_months, allow_zero=True)

    if principal <= 0:
        raise InvalidTermsError(f"principal must be positive, got {principal}")
    if base_rate < 0:
        raise InvalidTermsError(f"base_annual_rate_percent must not be negative, got {base_rate}")
    if term_bonus < 0:
        raise InvalidTermsError(f"term_bonus_percent must not be negative, got {term_bonus}")

    effective_rate = compose_rate(
        base_rate, term_bonus, terms.capitalization_enabled, capitalization_bonus
    )
    if effective_rate < 0:
        raise InvalidTermsError(f"effective rate must not be negative, got {effective_rate}")

    with calculation_context():
        if terms.capitalization_enabled:
            monthly_rate = monthly_rate_from_annual(effective_rate)
            interest = principal * (1 + monthly_rate) ** term_months - principal
        else:
            interest = principal * (effective_rate / 100) * term_months / MONTHS_PER_YEAR

        projected_interest = quantize_money(interest, minor_unit)

    return DepositProjection(
        effective_annual_rate_percent=effective_rate,
        projected_interest=projected_interest,
        projected_final_balance=principal + projected_interest,
    )
