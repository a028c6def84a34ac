"""Static product catalog: loan rates, deposit products and term tiers"""

from decimal import Decimal
from typing import Dict, List

from fincalc_gateway.domain.amortization import validate_term_months
from fincalc_gateway.domain.exceptions import InvalidTermsError, UnknownProductError
from fincalc_gateway.domain.models import DepositProduct, DepositTerms, LoanProduct, TermTier
from fincalc_gateway.utils.money import Numeric, ZERO, to_decimal

# Loan calculator slider bounds
LOAN_MIN_AMOUNT = Decimal("100000")
LOAN_MAX_AMOUNT = Decimal("10000000")
LOAN_MIN_TERM_MONTHS = 3
LOAN_MAX_TERM_MONTHS = 60

LOAN_PRODUCTS: Dict[str, LoanProduct] = {
    product.product_id: product
    for product in [
        LoanProduct("consumer", "Consumer loan", Decimal("18")),
        LoanProduct("car", "Car loan", Decimal("14")),
        LoanProduct("mortgage", "Mortgage", Decimal("12")),
        LoanProduct("refinance", "Refinancing", Decimal("16")),
        LoanProduct("business", "Business loan", Decimal("20")),
    ]
}

DEPOSIT_PRODUCTS: Dict[str, DepositProduct] = {
    product.product_id: product
    for product in [
        DepositProduct("fixed", "Fixed-term deposit", Decimal("14"), Decimal("50000"), False, False),
        DepositProduct("flexible", "Flexible deposit", Decimal("10"), Decimal("10000"), True, True),
        DepositProduct("savings", "Savings deposit", Decimal("12"), Decimal("5000"), False, True),
        DepositProduct("children", "Children's deposit", Decimal("13"), Decimal("10000"), False, True),
    ]
}

# Sorted by months ascending
TERM_TIERS: List[TermTier] = [
    TermTier(3, Decimal("0")),
    TermTier(6, Decimal("0.5")),
    TermTier(12, Decimal("1")),
    TermTier(24, Decimal("1.5")),
    TermTier(36, Decimal("2")),
]


def get_loan_product(product_id: str) -> LoanProduct:
    """
    Look up a loan product by id.

    Raises:
        UnknownProductError: If the id is not in the catalog
    """
    try:
        return LOAN_PRODUCTS[product_id]
    except KeyError:
        raise UnknownProductError(f"Unknown loan product: {product_id}") from None


def get_deposit_product(product_id: str) -> DepositProduct:
    """
    Look up a deposit product by id.

    Raises:
        UnknownProductError: If the id is not in the catalog
    """
    try:
        return DEPOSIT_PRODUCTS[product_id]
    except KeyError:
        raise UnknownProductError(f"Unknown deposit product: {product_id}") from None


def term_bonus_for(term_months: int) -> Decimal:
    """Bonus of the longest tier not exceeding term_months (0 below the shortest tier)"""
    validate_term_months(term_months, allow_zero=True)

    bonus = ZERO
    for tier in TERM_TIERS:
        if tier.months <= term_months:
            bonus = tier.bonus_percent
    return bonus


def deposit_terms_for(
    product_id: str,
    principal: Numeric,
    term_months: int,
    capitalization_enabled: bool,
) -> DepositTerms:
    """
    Build DepositTerms from a catalog product and the selected term.

    Raises:
        UnknownProductError: If the product id is not in the catalog
        InvalidTermsError: If principal is below the product minimum
    """
    product = get_deposit_product(product_id)
    amount = to_decimal(principal, "principal")

    if amount < product.min_amount:
        raise InvalidTermsError(
            f"Amount {amount} is below {product.product_id} minimum {product.min_amount}"
        )

    return DepositTerms(
        principal=amount,
        base_annual_rate_percent=product.base_annual_rate_percent,
        term_bonus_percent=term_bonus_for(term_months),
        capitalization_enabled=capitalization_enabled,
        term_months=term_months,
    )
