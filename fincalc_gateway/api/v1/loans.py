"""POST /v1/loans/schedule - Annuity loan calculator endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fincalc_gateway.api.v1.schemas import (
    AmortizationRowSchema,
    LoanScheduleRequest,
    LoanScheduleResponse,
)
from fincalc_gateway.api.dependencies import get_request_id
from fincalc_gateway.config import settings
from fincalc_gateway.domain.affordability import is_affordable, required_monthly_income
from fincalc_gateway.domain.amortization import compute_schedule
from fincalc_gateway.domain.catalog import get_loan_product
from fincalc_gateway.domain.exceptions import InvalidTermsError, UnknownProductError
from fincalc_gateway.domain.models import LoanTerms
from fincalc_gateway.infrastructure.observability.logging import log_calculation
from fincalc_gateway.infrastructure.observability.metrics import record_calculation, record_rejection
from fincalc_gateway.utils.formatters import format_amount

router = APIRouter()


@router.post("/loans/schedule", response_model=LoanScheduleResponse)
def calculate_loan_schedule(
    request_body: LoanScheduleRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Calculate monthly payment and amortization schedule.

    Flow:
    1. Resolve the annual rate (explicit rate wins over the product rate)
    2. Compute the annuity schedule
    3. Attach the income requirement and, if income was sent, affordability
    """
    start_time = time.perf_counter()

    try:
        annual_rate = request_body.annual_rate_percent
        if annual_rate is None:
            annual_rate = get_loan_product(request_body.product_id).annual_rate_percent

        result = compute_schedule(
            LoanTerms(
                principal=request_body.principal,
                annual_rate_percent=annual_rate,
                term_months=request_body.term_months,
            )
        )

    except UnknownProductError as e:
        logging.warning(f"Unknown product: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidTermsError as e:
        record_rejection("loan")
        logging.warning(f"Invalid loan terms: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    affordable = None
    if request_body.monthly_income is not None:
        affordable = is_affordable(request_body.monthly_income, result.monthly_payment)

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_calculation("loan", request_body.term_months)
    log_calculation(request_id, "loan", request_body.term_months, duration_ms)

    return LoanScheduleResponse(
        annual_rate_percent=annual_rate,
        term_months=request_body.term_months,
        monthly_payment=result.monthly_payment,
        monthly_payment_display=format_amount(result.monthly_payment, settings.default_currency),
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        required_monthly_income=required_monthly_income(result.monthly_payment),
        affordable=affordable,
        schedule=[
            AmortizationRowSchema(
                payment_number=row.payment_number,
                principal_portion=row.principal_portion,
                interest_portion=row.interest_portion,
                total_payment=row.total_payment,
                remaining_balance=row.remaining_balance,
            )
            for row in result.schedule
        ],
    )
