from dataclasses import dataclass, field, replace
from enum import Enum

from src.models.credit_line import (
    DRAW_PERIOD_YEARS,
    CreditLineConfig,
    InterestMethod,
    PaymentPolicy,
    RateChange,
    RepaymentCadence,
)

DRAW_SCHEDULE_MONTHS = 36
DRAW_PERIOD_MONTHS = DRAW_PERIOD_YEARS * 12


class DrawPreset(Enum):
    ADHOC = "adhoc"
    INVENTORY = "inventory"  # One upfront purchase
    SEASONAL = "seasonal"  # Summer and holiday peaks
    PAYROLL = "payroll"  # Every other month through the draw period


def draw_schedule_preset(preset: DrawPreset, borrow_limit: float) -> tuple[float, ...]:
    """Typical monthly draw pattern for a business profile, each draw capped at the limit."""
    schedule = [0.0] * DRAW_SCHEDULE_MONTHS
    if preset == DrawPreset.INVENTORY:
        schedule[0] = min(50000.0, borrow_limit)
    elif preset == DrawPreset.SEASONAL:
        for month, amount in ((4, 15000.0), (5, 25000.0), (6, 15000.0), (10, 20000.0), (11, 30000.0)):
            schedule[month] = min(amount, borrow_limit)
    elif preset == DrawPreset.PAYROLL:
        for month in range(1, DRAW_PERIOD_MONTHS, 2):
            schedule[month] = min(10000.0, borrow_limit)
    return tuple(schedule)


@dataclass(frozen=True)
class ScenarioInputs:
    """Caller-side scenario with defaults, converted to a CreditLineConfig per run."""
    name: str = "Scenario A"

    # Draws
    borrow_limit: float = 100000.0
    initial_draw_amount: float = 0.0
    draw_schedule: tuple[float, ...] = field(
        default_factory=lambda: (0.0,) * DRAW_SCHEDULE_MONTHS
    )

    # Rate
    prime_rate: float = 7.25  # Base rate, percent
    margin: float = 2.5  # Spread over base, percent
    rate_changes: tuple[RateChange, ...] = ()

    repayment_term: float = 5  # Years

    # Fees
    origination_fee: float = 1.0  # % of each draw
    annual_fee: float = 0.0
    draw_fee: float = 0.0
    inactivity_fee: float = 0.0
    monthly_maintenance_fee: float = 0.0

    # Policy
    repayment_cadence: RepaymentCadence = RepaymentCadence.MONTHLY
    interest_calculation_method: InterestMethod = InterestMethod.END_OF_PERIOD
    payment_policy: PaymentPolicy = PaymentPolicy.INTEREST_ONLY
    balance_payment_percent: float = 1.0
    principal_floor_amount: float = 500.0

    @property
    def total_apr(self) -> float:
        return self.prime_rate + self.margin

    def to_config(self) -> CreditLineConfig:
        return CreditLineConfig(
            draw_schedule=tuple(self.draw_schedule),
            initial_draw_amount=self.initial_draw_amount,
            borrow_limit=self.borrow_limit,
            annual_rate=self.total_apr,
            term_in_years=self.repayment_term,
            rate_changes=tuple(self.rate_changes),
            origination_fee_percent=self.origination_fee,
            annual_fee=self.annual_fee,
            draw_fee=self.draw_fee,
            inactivity_fee=self.inactivity_fee,
            monthly_maintenance_fee=self.monthly_maintenance_fee,
            repayment_cadence=self.repayment_cadence,
            payment_policy=self.payment_policy,
            balance_payment_percent=self.balance_payment_percent,
            principal_floor_amount=self.principal_floor_amount,
            interest_calculation_method=self.interest_calculation_method,
        )

    def copy_as(self, name: str) -> "ScenarioInputs":
        return replace(self, name=name)

    def with_draw_preset(self, preset: DrawPreset) -> "ScenarioInputs":
        return replace(self, draw_schedule=draw_schedule_preset(preset, self.borrow_limit))
