"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from fincalc_gateway.config import settings


class LoanScheduleRequest(BaseModel):
    """Request body for POST /v1/loans/schedule"""

    principal: Decimal = Field(..., gt=0, description="Loan amount")
    term_months: int = Field(..., gt=0, le=settings.max_term_months, description="Number of monthly installments")
    annual_rate_percent: Optional[Decimal] = Field(None, ge=0, description="Nominal annual rate, 18 = 18%")
    product_id: Optional[str] = Field(None, description="Catalog loan product, used when no rate is given")
    monthly_income: Optional[Decimal] = Field(None, ge=0, description="Declared income for the affordability check")

    @model_validator(mode="after")
    def check_rate_source(self) -> "LoanScheduleRequest":
        if self.annual_rate_percent is None and self.product_id is None:
            raise ValueError("Either annual_rate_percent or product_id is required")
        return self


class AmortizationRowSchema(BaseModel):
    """Single installment in an amortization schedule"""

    payment_number: int
    principal_portion: Decimal
    interest_portion: Decimal
    total_payment: Decimal
    remaining_balance: Decimal


class LoanScheduleResponse(BaseModel):
    """Response for POST /v1/loans/schedule"""

    annual_rate_percent: Decimal
    term_months: int
    monthly_payment: Decimal
    monthly_payment_display: str
    total_payment: Decimal
    total_interest: Decimal
    required_monthly_income: Decimal
    affordable: Optional[bool] = None
    schedule: List[AmortizationRowSchema]


class DepositProjectionRequest(BaseModel):
    """Request body for POST /v1/deposits/projection"""

    principal: Decimal = Field(..., gt=0, description="Deposit amount")
    term_months: int = Field(..., ge=0, le=settings.max_term_months, description="Deposit term in months")
    capitalization_enabled: bool = True
    product_id: Optional[str] = Field(None, description="Catalog deposit product")
    base_annual_rate_percent: Optional[Decimal] = Field(None, ge=0, description="Used when no product is given")
    term_bonus_percent: Optional[Decimal] = Field(None, ge=0, description="Defaults to the catalog term tier")
    currency: str = Field(default=settings.default_currency, min_length=3, max_length=3)

    @model_validator(mode="after")
    def check_rate_source(self) -> "DepositProjectionRequest":
        if self.base_annual_rate_percent is None and self.product_id is None:
            raise ValueError("Either base_annual_rate_percent or product_id is required")
        return self


class DepositProjectionResponse(BaseModel):
    """Response for POST /v1/deposits/projection"""

    base_annual_rate_percent: Decimal
    term_bonus_percent: Decimal
    effective_annual_rate_percent: Decimal
    projected_interest: Decimal
    projected_final_balance: Decimal
    projected_final_balance_display: str


class LoanProductSchema(BaseModel):
    """Loan product in the catalog"""

    product_id: str
    label: str
    annual_rate_percent: Decimal


class LoanCatalogResponse(BaseModel):
    """Response for GET /v1/catalog/loans"""

    products: List[LoanProductSchema]
    min_amount: Decimal
    max_amount: Decimal
    min_term_months: int
    max_term_months: int


class DepositProductSchema(BaseModel):
    """Deposit product in the catalog"""

    product_id: str
    name: str
    base_annual_rate_percent: Decimal
    min_amount: Decimal
    can_withdraw: bool
    can_replenish: bool


class TermTierSchema(BaseModel):
    """Deposit term tier"""

    months: int
    bonus_percent: Decimal


class DepositCatalogResponse(BaseModel):
    """Response for GET /v1/catalog/deposits"""

    products: List[DepositProductSchema]
    term_tiers: List[TermTierSchema]
    capitalization_bonus_percent: Decimal
