"""Tests for caller-side scenario inputs."""

from src.models.credit_line import (
    InterestMethod,
    PaymentPolicy,
    RateChange,
    RepaymentCadence,
)
from src.models.scenario import DrawPreset, ScenarioInputs, draw_schedule_preset


class TestScenarioDefaults:
    def test_default_values(self):
        s = ScenarioInputs()
        assert s.name == "Scenario A"
        assert s.borrow_limit == 100000.0
        assert s.draw_schedule == (0.0,) * 36
        assert s.repayment_term == 5
        assert s.origination_fee == 1.0
        assert s.payment_policy == PaymentPolicy.INTEREST_ONLY

    def test_total_apr(self):
        assert ScenarioInputs().total_apr == 9.75


class TestToConfig:
    def test_maps_fields(self):
        s = ScenarioInputs(
            prime_rate=8.0,
            margin=1.5,
            repayment_term=3,
            origination_fee=2.0,
            rate_changes=(RateChange(30, 10.0),),
            repayment_cadence=RepaymentCadence.WEEKLY,
            interest_calculation_method=InterestMethod.ADB,
        )
        config = s.to_config()
        assert config.annual_rate == 9.5
        assert config.term_in_years == 3
        assert config.origination_fee_percent == 2.0
        assert config.rate_changes == (RateChange(30, 10.0),)
        assert config.periods_per_year == 52
        assert config.draw_periods == 104
        assert config.days_in_period == 7

    def test_monthly_derived_values(self):
        config = ScenarioInputs().to_config()
        assert config.periods_per_year == 12
        assert config.draw_periods == 24
        assert config.periods_per_month == 1.0
        assert config.days_in_period == 365.25 / 12


class TestCopyAs:
    def test_copy_renames_only(self):
        a = ScenarioInputs(margin=3.0)
        b = a.copy_as("Scenario B")
        assert b.name == "Scenario B"
        assert b.margin == 3.0
        assert a.name == "Scenario A"


class TestDrawPresets:
    def test_adhoc_is_empty(self):
        assert draw_schedule_preset(DrawPreset.ADHOC, 100000.0) == (0.0,) * 36

    def test_inventory(self):
        schedule = draw_schedule_preset(DrawPreset.INVENTORY, 100000.0)
        assert len(schedule) == 36
        assert schedule[0] == 50000.0
        assert sum(schedule) == 50000.0

    def test_seasonal(self):
        schedule = draw_schedule_preset(DrawPreset.SEASONAL, 100000.0)
        peaks = {i: v for i, v in enumerate(schedule) if v}
        assert peaks == {4: 15000.0, 5: 25000.0, 6: 15000.0, 10: 20000.0, 11: 30000.0}

    def test_payroll_every_other_month_of_draw_period(self):
        schedule = draw_schedule_preset(DrawPreset.PAYROLL, 100000.0)
        assert [i for i, v in enumerate(schedule) if v] == list(range(1, 24, 2))
        assert set(v for v in schedule if v) == {10000.0}

    def test_each_draw_capped_at_limit(self):
        assert draw_schedule_preset(DrawPreset.INVENTORY, 30000.0)[0] == 30000.0
        seasonal = draw_schedule_preset(DrawPreset.SEASONAL, 18000.0)
        assert (seasonal[4], seasonal[5], seasonal[11]) == (15000.0, 18000.0, 18000.0)
        assert max(draw_schedule_preset(DrawPreset.PAYROLL, 4000.0)) == 4000.0

    def test_with_draw_preset_uses_scenario_limit(self):
        s = ScenarioInputs(borrow_limit=25000.0, margin=3.0).with_draw_preset(DrawPreset.INVENTORY)
        assert s.draw_schedule[0] == 25000.0
        assert s.margin == 3.0
