"""Credit line fee rules.

Pure functions: config + period in, float out. No I/O.
"""

from src.models.credit_line import CreditLineConfig


def is_first_period_of_month(config: CreditLineConfig, period: int) -> bool:
    """True when a period opens a calendar month.

    Weekly cadence uses a fractional 52/12 periods per month, so only
    period 1 lines up exactly.
    """
    return (period - 1) % config.periods_per_month == 0


def is_first_period_of_year(config: CreditLineConfig, period: int) -> bool:
    return (period - 1) % config.periods_per_year == 0


def periodic_fees(config: CreditLineConfig, period: int) -> float:
    """Flat maintenance and annual fees due in a global period. Both can land together."""
    fees = 0.0
    if is_first_period_of_month(config, period):
        fees += config.monthly_maintenance_fee
    if is_first_period_of_year(config, period):
        fees += config.annual_fee
    return fees


def add_draw_fees(config: CreditLineConfig, amount: float, fees: float = 0.0) -> float:
    """Add the origination percentage, then the flat draw fee, onto `fees`.

    Returns `fees` unchanged when nothing was drawn.
    """
    if amount <= 0:
        return fees
    return fees + amount * (config.origination_fee_percent / 100) + config.draw_fee
