"""Canonical test fixtures used across all engine tests.

Fixture: $100K line, $50K drawn in month 1, 9.75% (7.25% prime + 2.5% margin),
2-year interest-only draw period, 5-year monthly repayment, no fees.
"""

from dataclasses import replace

import pytest

from src.models.credit_line import (
    CreditLineConfig,
    InterestMethod,
    PaymentPolicy,
    RepaymentCadence,
)
from src.models.scenario import ScenarioInputs


@pytest.fixture
def canonical_config() -> CreditLineConfig:
    """$50K single draw against a $100K line, all fees zero."""
    return CreditLineConfig(
        draw_schedule=(50000.0,) + (0.0,) * 23,
        initial_draw_amount=0.0,
        borrow_limit=100000.0,
        annual_rate=9.75,
        term_in_years=5,
        rate_changes=(),
        origination_fee_percent=0.0,
        annual_fee=0.0,
        draw_fee=0.0,
        inactivity_fee=0.0,
        monthly_maintenance_fee=0.0,
        repayment_cadence=RepaymentCadence.MONTHLY,
        payment_policy=PaymentPolicy.INTEREST_ONLY,
        balance_payment_percent=1.0,
        principal_floor_amount=500.0,
        interest_calculation_method=InterestMethod.END_OF_PERIOD,
    )


@pytest.fixture
def weekly_config(canonical_config) -> CreditLineConfig:
    """Same line on a weekly cadence."""
    return replace(canonical_config, repayment_cadence=RepaymentCadence.WEEKLY)


@pytest.fixture
def canonical_scenario() -> ScenarioInputs:
    """Default scenario with a $50K first-month draw."""
    return ScenarioInputs(draw_schedule=(50000.0,) + (0.0,) * 35)


@pytest.fixture
def costly_scenario() -> ScenarioInputs:
    """Higher margin and every fee switched on."""
    return ScenarioInputs(
        name="Costly",
        draw_schedule=(50000.0,) + (0.0,) * 35,
        margin=4.0,
        annual_fee=150.0,
        draw_fee=50.0,
        inactivity_fee=25.0,
        monthly_maintenance_fee=10.0,
    )
