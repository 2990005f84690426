"""Credit line amortization: draw period followed by a fully amortizing repayment period.

Pure functions: CreditLineConfig in, ScheduleResult out. No I/O.
Arithmetic stays in float so results match other double-precision
implementations of the same formulas; rounding is left to display code.
"""

import logging
import math
from dataclasses import dataclass, field

from src.engine.fees import add_draw_fees, is_first_period_of_month, periodic_fees
from src.models.credit_line import (
    CreditLineConfig,
    InterestMethod,
    PaymentPolicy,
    RateChange,
)
from src.models.results import PeriodEntry, ScheduleResult

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


class RateChangeCursor:
    """Walks rate changes in period order as the simulation advances.

    Periods must be queried in increasing order. When several changes share a
    period, the first one in sorted order wins.
    """

    def __init__(self, rate_changes: tuple[RateChange, ...] | list[RateChange]):
        self._events = sorted(rate_changes, key=lambda rc: rc.period)
        self._pos = 0

    def advance(self, period: int) -> RateChange | None:
        events = self._events
        while self._pos < len(events) and events[self._pos].period < period:
            self._pos += 1
        if self._pos >= len(events) or events[self._pos].period != period:
            return None
        match = events[self._pos]
        while self._pos < len(events) and events[self._pos].period == period:
            self._pos += 1
        return match


@dataclass
class SimulationContext:
    """Running state shared by the draw and repayment phases of one computation."""
    current_annual_rate: float
    rate_cursor: RateChangeCursor
    remaining_balance: float = 0.0
    peak_balance: float = 0.0
    total_interest: float = 0.0
    total_draws: float = 0.0
    total_fees: float = 0.0
    level_payment: float = 0.0  # Latest repayment-phase P&I payment

    @classmethod
    def start(cls, config: CreditLineConfig) -> "SimulationContext":
        return cls(
            current_annual_rate=config.annual_rate,
            rate_cursor=RateChangeCursor(config.rate_changes),
        )

    def apply_rate_change(self, period: int) -> bool:
        change = self.rate_cursor.advance(period)
        if change is None:
            return False
        logger.debug(
            "Rate change at period %d: %.4f%% -> %.4f%%",
            period, self.current_annual_rate, change.new_total_apr,
        )
        self.current_annual_rate = change.new_total_apr
        return True


def level_payment(principal: float, periodic_rate: float, n_periods: float) -> float:
    """Level payment that retires `principal` over `n_periods`.

    Straight-line when the rate is not positive, 0 when there are no periods.
    """
    if n_periods <= 0:
        return 0.0
    if periodic_rate <= 0:
        return principal / n_periods
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        factor = (1 + periodic_rate) ** n_periods
    except OverflowError:
        # Limit as n grows without bound: interest-only
        return principal * periodic_rate
    if factor == 1:
        # Rate too small to register in 1 + r
        return principal / n_periods
    return principal * periodic_rate * factor / (factor - 1)


def period_interest(config: CreditLineConfig, balance: float, annual_rate: float) -> float:
    """Interest accrued on `balance` over one period at `annual_rate` percent."""
    if config.interest_calculation_method == InterestMethod.ADB:
        daily_rate = annual_rate / 100 / DAYS_PER_YEAR
        return balance * daily_rate * config.days_in_period
    return balance * (annual_rate / 100 / config.periods_per_year)


def apply_initial_draw(config: CreditLineConfig, ctx: SimulationContext) -> SimulationContext:
    """Draw at time zero. Its fees go to the running total, not to a period."""
    if config.initial_draw_amount > 0:
        drawn = max(0.0, min(config.initial_draw_amount, config.borrow_limit))
        ctx.remaining_balance += drawn
        ctx.total_draws += drawn
        # Flat fee applies even if the borrow limit clamps the draw to zero
        ctx.total_fees += drawn * (config.origination_fee_percent / 100)
        ctx.total_fees += config.draw_fee
    ctx.peak_balance = ctx.remaining_balance
    return ctx


def _scheduled_draw(config: CreditLineConfig, period: int, balance: float) -> float:
    """Requested draw for the month this period opens, clamped to available credit."""
    if not is_first_period_of_month(config, period):
        return 0.0
    month_index = math.floor((period - 1) / config.periods_per_month)
    if month_index >= len(config.draw_schedule):
        return 0.0
    requested = float(config.draw_schedule[month_index] or 0.0)
    available = config.borrow_limit - balance
    drawn = max(0.0, min(requested, available))
    if drawn < requested:
        logger.debug(
            "Draw at period %d clamped from %.2f to %.2f (available credit %.2f)",
            period, requested, drawn, available,
        )
    return drawn


def _draw_period_payment(config: CreditLineConfig, balance: float, interest: float) -> tuple[float, float]:
    """(payment, principal) for one draw-period period under the payment policy."""
    if config.payment_policy == PaymentPolicy.PERCENT_OF_BALANCE:
        percent_payment = balance * (config.balance_payment_percent / 100)
        payment = max(interest, percent_payment)  # Never below interest
        principal = payment - interest
    elif config.payment_policy == PaymentPolicy.INTEREST_PLUS_PRINCIPAL_FLOOR:
        principal = config.principal_floor_amount
        payment = interest + principal
    else:
        payment = interest
        principal = 0.0

    if principal > balance:
        principal = balance
        payment = principal + interest
    return payment, principal


def run_draw_phase(
    config: CreditLineConfig, ctx: SimulationContext
) -> tuple[SimulationContext, list[PeriodEntry]]:
    """Simulate periods 1..draw_periods: draws, fees, interest and policy payments."""
    entries: list[PeriodEntry] = []

    for period in range(1, config.draw_periods + 1):
        beginning_balance = ctx.remaining_balance
        ctx.apply_rate_change(period)

        fees = periodic_fees(config, period)

        drawn = _scheduled_draw(config, period, ctx.remaining_balance)
        if drawn > 0:
            fees = add_draw_fees(config, drawn, fees)
        elif period > 1 or config.initial_draw_amount <= 0:
            # Period 1 is not idle when it follows an initial draw
            fees += config.inactivity_fee

        ctx.total_fees += fees
        ctx.remaining_balance += drawn
        ctx.total_draws += drawn
        if ctx.remaining_balance > ctx.peak_balance:
            ctx.peak_balance = ctx.remaining_balance

        interest = period_interest(config, ctx.remaining_balance, ctx.current_annual_rate)
        ctx.total_interest += interest

        payment, principal = _draw_period_payment(config, ctx.remaining_balance, interest)
        ctx.remaining_balance -= principal

        entries.append(PeriodEntry(
            period=period,
            beginning_balance=beginning_balance,
            draw_amount=drawn,
            payment=payment,
            interest=interest,
            principal=principal,
            fees_this_period=fees,
            total_payment_this_period=payment + fees,
            remaining_balance=ctx.remaining_balance,
            available_credit=config.borrow_limit - ctx.remaining_balance,
        ))

    return ctx, entries


def run_repayment_phase(
    config: CreditLineConfig, ctx: SimulationContext
) -> tuple[SimulationContext, list[PeriodEntry]]:
    """Fully amortize the post-draw balance, re-amortizing on each rate change.

    Skipped entirely when nothing is owed after the draw period.
    """
    entries: list[PeriodEntry] = []
    if ctx.remaining_balance <= 0:
        return ctx, entries

    n_periods = config.term_in_years * config.periods_per_year
    periodic_rate = ctx.current_annual_rate / 100 / config.periods_per_year
    ctx.level_payment = level_payment(ctx.remaining_balance, periodic_rate, n_periods)

    for i in range(1, math.floor(n_periods) + 1):
        period = config.draw_periods + i
        beginning_balance = ctx.remaining_balance

        if ctx.apply_rate_change(period):
            periodic_rate = ctx.current_annual_rate / 100 / config.periods_per_year
            periods_left = n_periods - (i - 1)
            if ctx.remaining_balance > 0 and periods_left > 0:
                ctx.level_payment = level_payment(ctx.remaining_balance, periodic_rate, periods_left)
                logger.debug(
                    "Re-amortized at period %d: %.2f over %s periods -> %.2f",
                    period, ctx.remaining_balance, periods_left, ctx.level_payment,
                )

        fees = periodic_fees(config, period)
        ctx.total_fees += fees

        interest = period_interest(config, ctx.remaining_balance, ctx.current_annual_rate)
        ctx.total_interest += interest

        principal = ctx.level_payment - interest
        # Final payoff: cap principal, but keep reporting the level payment
        if ctx.remaining_balance - principal < 0:
            principal = ctx.remaining_balance
        ctx.remaining_balance -= principal

        entries.append(PeriodEntry(
            period=period,
            beginning_balance=beginning_balance,
            draw_amount=0.0,
            payment=ctx.level_payment,
            interest=interest,
            principal=principal,
            fees_this_period=fees,
            total_payment_this_period=ctx.level_payment + fees,
            remaining_balance=max(ctx.remaining_balance, 0.0),
            available_credit=config.borrow_limit - ctx.remaining_balance,
        ))

    return ctx, entries


def compute_schedule(config: CreditLineConfig) -> ScheduleResult:
    """Full period ledger and summary metrics for one credit line configuration.

    A negative rate or non-positive term yields an all-zero result with an
    empty schedule instead of an error.
    """
    if config.annual_rate < 0 or config.term_in_years <= 0:
        logger.debug(
            "Degenerate inputs (rate=%s, term=%s), returning empty schedule",
            config.annual_rate, config.term_in_years,
        )
        return ScheduleResult()

    ctx = apply_initial_draw(config, SimulationContext.start(config))
    ctx, draw_entries = run_draw_phase(config, ctx)
    ctx, repayment_entries = run_repayment_phase(config, ctx)
    schedule = draw_entries + repayment_entries

    total_payment = ctx.total_draws + ctx.total_interest + ctx.total_fees
    duration_years = len(schedule) / config.periods_per_year
    if ctx.total_draws > 0 and duration_years > 0:
        effective_apr = (ctx.total_interest + ctx.total_fees) / ctx.total_draws / duration_years * 100
    else:
        effective_apr = 0.0

    return ScheduleResult(
        principal_and_interest_payment=ctx.level_payment,
        peak_balance=ctx.peak_balance,
        total_interest=ctx.total_interest,
        total_payment=total_payment,
        total_fees=ctx.total_fees,
        effective_apr=effective_apr,
        total_draws=ctx.total_draws,
        schedule=schedule,
    )
