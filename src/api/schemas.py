"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from src.models.credit_line import (
    InterestMethod,
    PaymentPolicy,
    RateChange,
    RepaymentCadence,
)
from src.models.scenario import DrawPreset, ScenarioInputs


# ---- Request schemas ----

class RateChangeRequest(BaseModel):
    period: int = Field(..., description="Global period the new rate takes effect in")
    new_total_apr: float = Field(..., description="New total APR, percent")


class ScenarioRequest(BaseModel):
    """Scenario inputs. Omitted fields take the scenario defaults."""
    name: str | None = None

    borrow_limit: float | None = None
    initial_draw_amount: float | None = None
    draw_schedule: list[float] | None = Field(None, description="Requested draw per month")
    draw_preset: DrawPreset | None = Field(None, description="Preset draw pattern, used when draw_schedule is omitted")

    prime_rate: float | None = Field(None, description="Base rate, percent")
    margin: float | None = Field(None, description="Margin over base, percent")
    rate_changes: list[RateChangeRequest] | None = None

    repayment_term: float | None = Field(None, description="Repayment period in years")

    origination_fee: float | None = Field(None, description="Percent of each draw")
    annual_fee: float | None = None
    draw_fee: float | None = None
    inactivity_fee: float | None = None
    monthly_maintenance_fee: float | None = None

    repayment_cadence: RepaymentCadence | None = None
    interest_calculation_method: InterestMethod | None = None
    payment_policy: PaymentPolicy | None = None
    balance_payment_percent: float | None = None
    principal_floor_amount: float | None = None

    def to_scenario(self) -> ScenarioInputs:
        overrides = {
            k: v for k, v in self
            if v is not None and k not in ("draw_schedule", "draw_preset", "rate_changes")
        }
        if self.draw_schedule is not None:
            overrides["draw_schedule"] = tuple(self.draw_schedule)
        if self.rate_changes is not None:
            overrides["rate_changes"] = tuple(
                RateChange(period=rc.period, new_total_apr=rc.new_total_apr)
                for rc in self.rate_changes
            )
        scenario = ScenarioInputs(**overrides)
        if self.draw_preset is not None and self.draw_schedule is None:
            scenario = scenario.with_draw_preset(self.draw_preset)
        return scenario


class ComparisonRequest(BaseModel):
    scenario_a: ScenarioRequest
    scenario_b: ScenarioRequest


# ---- Response schemas ----

class PeriodEntryResponse(BaseModel):
    period: int
    beginning_balance: float
    draw_amount: float
    payment: float
    interest: float
    principal: float
    fees_this_period: float
    total_payment_this_period: float
    remaining_balance: float
    available_credit: float


class DrawMetricsResponse(BaseModel):
    total_draws: float
    max_draw: float
    average_draw: float
    draw_count: int


class YearlySummaryResponse(BaseModel):
    year: int
    draws: float
    payment: float
    principal: float
    interest: float
    fees: float
    total_payment: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    name: str
    total_apr: float
    principal_and_interest_payment: float
    peak_balance: float
    total_interest: float
    total_payment: float
    total_fees: float
    effective_apr: float
    total_draws: float
    draw_metrics: DrawMetricsResponse
    yearly_summary: list[YearlySummaryResponse] = []
    schedule: list[PeriodEntryResponse] = []


class ComparisonRowResponse(BaseModel):
    label: str
    value_a: float
    value_b: float
    difference: float
    better: str | None = None


class ComparisonResponse(BaseModel):
    name_a: str
    name_b: str
    financial_summary: list[ComparisonRowResponse] = []
    draw_analysis: list[ComparisonRowResponse] = []
