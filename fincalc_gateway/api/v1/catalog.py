"""GET /v1/catalog/* - Product rates and term tiers for calculator screens"""

from decimal import Decimal
from fastapi import APIRouter, Depends

from fincalc_gateway.api.v1.schemas import (
    DepositCatalogResponse,
    DepositProductSchema,
    LoanCatalogResponse,
    LoanProductSchema,
    TermTierSchema,
)
from fincalc_gateway.api.dependencies import get_capitalization_bonus
from fincalc_gateway.domain import catalog

router = APIRouter()


@router.get("/catalog/loans", response_model=LoanCatalogResponse)
def list_loan_products():
    """Loan products with calculator slider bounds"""
    return LoanCatalogResponse(
        products=[
            LoanProductSchema(
                product_id=product.product_id,
                label=product.label,
                annual_rate_percent=product.annual_rate_percent,
            )
            for product in catalog.LOAN_PRODUCTS.values()
        ],
        min_amount=catalog.LOAN_MIN_AMOUNT,
        max_amount=catalog.LOAN_MAX_AMOUNT,
        min_term_months=catalog.LOAN_MIN_TERM_MONTHS,
        max_term_months=catalog.LOAN_MAX_TERM_MONTHS,
    )


@router.get("/catalog/deposits", response_model=DepositCatalogResponse)
def list_deposit_products(capitalization_bonus: Decimal = Depends(get_capitalization_bonus)):
    """Deposit products, term tiers and the capitalization bonus"""
    return DepositCatalogResponse(
        products=[
            DepositProductSchema(
                product_id=product.product_id,
                name=product.name,
                base_annual_rate_percent=product.base_annual_rate_percent,
                min_amount=product.min_amount,
                can_withdraw=product.can_withdraw,
                can_replenish=product.can_replenish,
            )
            for product in catalog.DEPOSIT_PRODUCTS.values()
        ],
        term_tiers=[
            TermTierSchema(months=tier.months, bonus_percent=tier.bonus_percent)
            for tier in catalog.TERM_TIERS
        ],
        capitalization_bonus_percent=capitalization_bonus,
    )
