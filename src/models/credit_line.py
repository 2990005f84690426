from dataclasses import dataclass
from enum import Enum

DRAW_PERIOD_YEARS = 2


class RepaymentCadence(Enum):
    MONTHLY = "monthly"
    WEEKLY = "weekly"


class PaymentPolicy(Enum):
    INTEREST_ONLY = "interestOnly"
    PERCENT_OF_BALANCE = "percentOfBalance"
    INTEREST_PLUS_PRINCIPAL_FLOOR = "interestPlusPrincipalFloor"


class InterestMethod(Enum):
    END_OF_PERIOD = "endOfPeriod"
    ADB = "adb"  # Average daily balance


@dataclass(frozen=True)
class RateChange:
    period: int  # Global period number, shared by draw and repayment phases
    new_total_apr: float  # Percent, e.g. 8.5


@dataclass(frozen=True)
class CreditLineConfig:
    """Everything one schedule computation needs.

    All fields are required. Defaults belong to the caller
    (see src.models.scenario.ScenarioInputs).
    """
    # Draws
    draw_schedule: tuple[float, ...]  # Requested draw per month of the draw period
    initial_draw_amount: float  # Drawn at time zero, before period 1
    borrow_limit: float

    # Pricing
    annual_rate: float  # Percent, base + margin
    term_in_years: float  # Repayment phase length
    rate_changes: tuple[RateChange, ...]

    # Fees
    origination_fee_percent: float  # % of each draw
    annual_fee: float
    draw_fee: float  # Flat, per nonzero draw
    inactivity_fee: float  # Draw-period period with no draw
    monthly_maintenance_fee: float

    # Policy
    repayment_cadence: RepaymentCadence
    payment_policy: PaymentPolicy  # Draw period only
    balance_payment_percent: float
    principal_floor_amount: float
    interest_calculation_method: InterestMethod

    @property
    def periods_per_year(self) -> int:
        return 12 if self.repayment_cadence == RepaymentCadence.MONTHLY else 52

    @property
    def draw_periods(self) -> int:
        return DRAW_PERIOD_YEARS * self.periods_per_year

    @property
    def periods_per_month(self) -> float:
        """Fractional for weekly cadence (52 / 12)."""
        return self.periods_per_year / 12

    @property
    def days_in_period(self) -> float:
        return 365.25 / 12 if self.repayment_cadence == RepaymentCadence.MONTHLY else 7
