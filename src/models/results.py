from dataclasses import dataclass, field


@dataclass
class PeriodEntry:
    period: int

    beginning_balance: float = 0.0  # Before this period's draw and payment
    draw_amount: float = 0.0

    # Payment breakdown
    payment: float = 0.0  # Principal + interest
    interest: float = 0.0
    principal: float = 0.0
    fees_this_period: float = 0.0
    total_payment_this_period: float = 0.0  # Payment + fees

    remaining_balance: float = 0.0  # Ending balance
    available_credit: float = 0.0  # Borrow limit - ending balance


@dataclass
class ScheduleResult:
    principal_and_interest_payment: float = 0.0  # Last repayment level payment
    peak_balance: float = 0.0
    total_interest: float = 0.0
    total_payment: float = 0.0  # Draws + interest + fees
    total_fees: float = 0.0
    effective_apr: float = 0.0  # Percent
    total_draws: float = 0.0  # Includes the initial draw
    schedule: list[PeriodEntry] = field(default_factory=list)


@dataclass
class DrawMetrics:
    total_draws: float = 0.0
    max_draw: float = 0.0
    average_draw: float = 0.0
    draw_count: int = 0


@dataclass
class YearSummary:
    year: int  # Loan year, 1-based
    draws: float = 0.0
    payment: float = 0.0
    principal: float = 0.0
    interest: float = 0.0
    fees: float = 0.0
    total_payment: float = 0.0
    ending_balance: float = 0.0


@dataclass
class ComparisonRow:
    label: str
    value_a: float
    value_b: float
    difference: float  # B - A
    lower_is_better: bool = True

    @property
    def better(self) -> str | None:
        """'A', 'B', or None when the values tie."""
        if self.value_a == self.value_b:
            return None
        a_wins = self.value_a < self.value_b if self.lower_is_better else self.value_a > self.value_b
        return "A" if a_wins else "B"


@dataclass
class ScenarioComparison:
    """Side-by-side comparison of two credit line scenarios."""

    name_a: str
    name_b: str
    financial_summary: list[ComparisonRow] = field(default_factory=list)
    draw_analysis: list[ComparisonRow] = field(default_factory=list)

    @property
    def rows(self) -> list[ComparisonRow]:
        return self.financial_summary + self.draw_analysis
