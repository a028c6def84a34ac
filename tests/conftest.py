"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from fincalc_gateway.api.main import create_app
from fincalc_gateway.domain.models import DepositTerms, LoanTerms


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def consumer_loan() -> LoanTerms:
    """Default loan calculator state: 500 000 at 18% for 12 months"""
    return LoanTerms(
        principal=Decimal("500000"),
        annual_rate_percent=Decimal("18"),
        term_months=12,
    )


@pytest.fixture
def capitalized_deposit() -> DepositTerms:
    """Default deposit form state: 100 000, base 12%, 12-month tier, capitalization on"""
    return DepositTerms(
        principal=Decimal("100000"),
        base_annual_rate_percent=Decimal("12"),
        term_bonus_percent=Decimal("1"),
        capitalization_enabled=True,
        term_months=12,
    )
