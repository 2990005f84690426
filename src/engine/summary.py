"""Draw analysis and yearly roll-ups of a computed schedule.

Pure functions. No I/O.
"""

from src.models.credit_line import CreditLineConfig
from src.models.results import DrawMetrics, ScheduleResult, YearSummary


def draw_metrics(config: CreditLineConfig, result: ScheduleResult) -> DrawMetrics:
    """Total, largest and average draw, counting the initial draw as one event."""
    if not result.schedule:
        return DrawMetrics()

    draws = [e.draw_amount for e in result.schedule if e.draw_amount > 0]
    if config.initial_draw_amount > 0:
        initial = max(0.0, min(config.initial_draw_amount, config.borrow_limit))
        if initial > 0:
            draws.insert(0, initial)

    if not draws:
        return DrawMetrics()

    total = sum(draws)
    return DrawMetrics(
        total_draws=total,
        max_draw=max(draws),
        average_draw=total / len(draws),
        draw_count=len(draws),
    )


def yearly_summary(result: ScheduleResult, periods_per_year: int) -> list[YearSummary]:
    """Aggregate a schedule by loan year (draw and repayment periods alike).

    A final partial year gets its own row.
    """
    yearly: list[YearSummary] = []
    current: YearSummary | None = None

    for entry in result.schedule:
        if current is None:
            current = YearSummary(year=(entry.period - 1) // periods_per_year + 1)
        current.draws += entry.draw_amount
        current.payment += entry.payment
        current.principal += entry.principal
        current.interest += entry.interest
        current.fees += entry.fees_this_period
        current.total_payment += entry.total_payment_this_period

        if entry.period % periods_per_year == 0 or entry is result.schedule[-1]:
            current.ending_balance = entry.remaining_balance
            yearly.append(current)
            current = None

    return yearly
