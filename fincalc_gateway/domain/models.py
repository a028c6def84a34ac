"""Domain models - immutable dataclasses passed in and out of the calculators"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class LoanTerms:
    """Annuity loan parameters"""

    principal: Decimal
    annual_rate_percent: Decimal  # 18 means 18% per year
    term_months: int


@dataclass(frozen=True)
class AmortizationRow:
    """Single installment in an amortization schedule"""

    payment_number: int
    principal_portion: Decimal
    interest_portion: Decimal
    total_payment: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    """Output of compute_schedule"""

    monthly_payment: Decimal
    schedule: Tuple[AmortizationRow, ...]
    total_payment: Decimal
    total_interest: Decimal


@dataclass(frozen=True)
class DepositTerms:
    """Deposit parameters as selected on the opening form"""

    principal: Decimal
    base_annual_rate_percent: Decimal
    term_bonus_percent: Decimal
    capitalization_enabled: bool
    term_months: int


@dataclass(frozen=True)
class DepositProjection:
    """Output of project_deposit"""

    effective_annual_rate_percent: Decimal
    projected_interest: Decimal
    projected_final_balance: Decimal


@dataclass(frozen=True)
class LoanProduct:
    """Catalog entry for a loan product"""

    product_id: str
    label: str
    annual_rate_percent: Decimal


@dataclass(frozen=True)
class DepositProduct:
    """Catalog entry for a deposit product"""

    product_id: str
    name: str
    base_annual_rate_percent: Decimal
    min_amount: Decimal
    can_withdraw: bool
    can_replenish: bool


@dataclass(frozen=True)
class TermTier:
    """Deposit term length and the rate bonus it earns"""

    months: int
    bonus_percent: Decimal
