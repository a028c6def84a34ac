"""Unit tests for deposit income projection"""

import pytest
from dataclasses import replace
from decimal import Decimal
from fincalc_gateway.domain.deposits import project_deposit
from fincalc_gateway.domain.exceptions import InvalidTermsError
from fincalc_gateway.domain.models import DepositTerms


def simple_terms(**overrides) -> DepositTerms:
    values = dict(
        principal=Decimal("100000"),
        base_annual_rate_percent=Decimal("12"),
        term_bonus_percent=Decimal("1"),
        capitalization_enabled=False,
        term_months=12,
    )
    values.update(overrides)
    return DepositTerms(**values)


def test_capitalized_deposit_scenario(capitalized_deposit: DepositTerms):
    """100 000 at 12% + 1% tier + 0.5% capitalization for a year"""
    projection = project_deposit(capitalized_deposit)

    assert projection.effective_annual_rate_percent == Decimal("13.5")
    # 100000 * (1 + 0.135 / 12) ** 12
    assert abs(projection.projected_final_balance - Decimal("114367.44")) < Decimal("0.5")
    assert projection.projected_final_balance == capitalized_deposit.principal + projection.projected_interest


def test_simple_interest_full_year():
    """No capitalization: 13% of the principal for 12 months"""
    projection = project_deposit(simple_terms())

    assert projection.effective_annual_rate_percent == Decimal("13")
    assert projection.projected_interest == Decimal("13000.00")
    assert projection.projected_final_balance == Decimal("113000.00")


def test_simple_interest_half_year():
    projection = project_deposit(
        simple_terms(base_annual_rate_percent=Decimal("10"), term_bonus_percent=Decimal("0.5"), term_months=6)
    )

    assert projection.projected_interest == Decimal("5250.00")


def test_single_month_modes_agree():
    """One month of compounding equals one month of simple interest at the same rate"""
    compound = project_deposit(simple_terms(capitalization_enabled=True, base_annual_rate_percent=Decimal("12"), term_months=1))
    simple = project_deposit(simple_terms(base_annual_rate_percent=Decimal("12.5"), term_months=1))

    assert compound.effective_annual_rate_percent == simple.effective_annual_rate_percent
    assert compound.projected_interest == simple.projected_interest == Decimal("1125.00")


@pytest.mark.parametrize("capitalization_enabled", [True, False])
def test_zero_term_earns_nothing(capitalization_enabled: bool):
    projection = project_deposit(simple_terms(capitalization_enabled=capitalization_enabled, term_months=0))

    assert projection.projected_interest == 0
    assert projection.projected_final_balance == Decimal("100000")


@pytest.mark.parametrize("months", [2, 3, 6, 12, 24, 36, 120])
def test_capitalization_dominates_simple_interest(months: int):
    """Same effective rate: compounding never pays less"""
    compound = project_deposit(simple_terms(capitalization_enabled=True, term_months=months))
    # Simple branch gets the capitalization bonus folded into its base rate
    simple = project_deposit(simple_terms(base_annual_rate_percent=Decimal("12.5"), term_months=months))

    assert compound.effective_annual_rate_percent == simple.effective_annual_rate_percent
    assert compound.projected_interest >= simple.projected_interest


@pytest.mark.parametrize("capitalization_enabled", [True, False])
def test_interest_increases_with_term(capitalization_enabled: bool):
    interests = [
        project_deposit(simple_terms(capitalization_enabled=capitalization_enabled, term_months=months)).projected_interest
        for months in range(0, 37)
    ]

    assert all(a < b for a, b in zip(interests, interests[1:]))


@pytest.mark.parametrize("capitalization_enabled", [True, False])
def test_interest_increases_with_rate(capitalization_enabled: bool):
    interests = [
        project_deposit(
            simple_terms(
                capitalization_enabled=capitalization_enabled,
                base_annual_rate_percent=Decimal(rate),
            )
        ).projected_interest
        for rate in ["0", "1", "5", "10", "14", "20"]
    ]

    assert all(a < b for a, b in zip(interests, interests[1:]))


def test_zero_effective_rate_earns_nothing():
    projection = project_deposit(simple_terms(base_annual_rate_percent=Decimal("0"), term_bonus_percent=Decimal("0")))

    assert projection.effective_annual_rate_percent == 0
    assert projection.projected_interest == 0


def test_capitalization_bonus_override(capitalized_deposit: DepositTerms):
    """Bonus policy can be changed per call"""
    projection = project_deposit(capitalized_deposit, capitalization_bonus=Decimal("1"))

    assert projection.effective_annual_rate_percent == Decimal("14")


def test_capitalization_bonus_ignored_when_disabled(capitalized_deposit: DepositTerms):
    projection = project_deposit(
        replace(capitalized_deposit, capitalization_enabled=False), capitalization_bonus=Decimal("3")
    )

    assert projection.effective_annual_rate_percent == Decimal("13")


def test_project_deposit_is_deterministic(capitalized_deposit: DepositTerms):
    assert project_deposit(capitalized_deposit) == project_deposit(capitalized_deposit)


@pytest.mark.parametrize(
    "overrides",
    [
        {"principal": Decimal("0")},
        {"principal": Decimal("-5000")},
        {"term_months": -1},
        {"base_annual_rate_percent": Decimal("-1")},
        {"term_bonus_percent": Decimal("-0.5")},
    ],
)
def test_invalid_terms_rejected(overrides):
    with pytest.raises(InvalidTermsError):
        project_deposit(simple_terms(**overrides))


def test_negative_capitalization_bonus_cannot_push_rate_below_zero():
    terms = simple_terms(
        capitalization_enabled=True,
        base_annual_rate_percent=Decimal("0"),
        term_bonus_percent=Decimal("0"),
    )

    with pytest.raises(InvalidTermsError):
        project_deposit(terms, capitalization_bonus=Decimal("-1"))
