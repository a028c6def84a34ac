"""POST /v1/deposits/projection - Deposit income calculator endpoint"""

import time
import logging
from dataclasses import replace
from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException

from fincalc_gateway.api.v1.schemas import DepositProjectionRequest, DepositProjectionResponse
from fincalc_gateway.api.dependencies import get_capitalization_bonus, get_request_id
from fincalc_gateway.domain.catalog import deposit_terms_for, term_bonus_for
from fincalc_gateway.domain.deposits import project_deposit
from fincalc_gateway.domain.exceptions import InvalidTermsError, UnknownProductError
from fincalc_gateway.domain.models import DepositTerms
from fincalc_gateway.infrastructure.observability.logging import log_calculation
from fincalc_gateway.infrastructure.observability.metrics import record_calculation, record_rejection
from fincalc_gateway.utils.formatters import format_amount

router = APIRouter()


def _build_terms(request_body: DepositProjectionRequest) -> DepositTerms:
    """Resolve rate and bonus from the catalog unless given explicitly"""
    if request_body.product_id is not None:
        terms = deposit_terms_for(
            request_body.product_id,
            request_body.principal,
            request_body.term_months,
            request_body.capitalization_enabled,
        )
        if request_body.base_annual_rate_percent is not None:
            terms = replace(terms, base_annual_rate_percent=request_body.base_annual_rate_percent)
    else:
        terms = DepositTerms(
            principal=request_body.principal,
            base_annual_rate_percent=request_body.base_annual_rate_percent,
            term_bonus_percent=term_bonus_for(request_body.term_months),
            capitalization_enabled=request_body.capitalization_enabled,
            term_months=request_body.term_months,
        )

    if request_body.term_bonus_percent is not None:
        terms = replace(terms, term_bonus_percent=request_body.term_bonus_percent)

    return terms


@router.post("/deposits/projection", response_model=DepositProjectionResponse)
def calculate_deposit_projection(
    request_body: DepositProjectionRequest,
    request_id: str = Depends(get_request_id),
    capitalization_bonus: Decimal = Depends(get_capitalization_bonus),
):
    """
    Project deposit income for the selected product, term and capitalization.

    Returns:
        Effective rate, expected income and final balance
    """
    start_time = time.perf_counter()

    try:
        terms = _build_terms(request_body)
        projection = project_deposit(terms, capitalization_bonus=capitalization_bonus)

    except UnknownProductError as e:
        logging.warning(f"Unknown product: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidTermsError as e:
        record_rejection("deposit")
        logging.warning(f"Invalid deposit terms: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_calculation("deposit", terms.term_months)
    log_calculation(request_id, "deposit", terms.term_months, duration_ms)

    return DepositProjectionResponse(
        base_annual_rate_percent=terms.base_annual_rate_percent,
        term_bonus_percent=terms.term_bonus_percent,
        effective_annual_rate_percent=projection.effective_annual_rate_percent,
        projected_interest=projection.projected_interest,
        projected_final_balance=projection.projected_final_balance,
        projected_final_balance_display=format_amount(
            projection.projected_final_balance, request_body.currency
        ),
    )
