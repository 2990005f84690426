"""CSV export of schedules and scenario comparisons.

Pure functions: results in, CSV text out. No I/O.
The layout matches files exported by the browser calculator, so values
are formatted the way JavaScript's Number.toFixed(2) prints them.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP

from src.models.credit_line import RepaymentCadence
from src.models.results import ScenarioComparison, ScheduleResult

TWO_PLACES = Decimal("0.01")

SCHEDULE_COLUMNS = [
    "Beginning Balance",
    "Draw",
    "Total Payment",
    "Principal",
    "Interest",
    "Fees",
    "Ending Balance",
    "Available Credit",
]


def to_fixed(value: float) -> str:
    """Two-decimal string, rounding the exact binary value half away from zero."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0.00"  # Drop the sign of -0.0
    return str(Decimal(value).quantize(TWO_PLACES, ROUND_HALF_UP))


def comparison_filename(name_a: str, name_b: str) -> str:
    """Download name for a comparison export, e.g. scenario_comparison_scenario_a_vs_costly.csv"""
    return f"scenario_comparison_{_safe_name(name_a)}_vs_{_safe_name(name_b)}.csv"


def _safe_name(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "_", name, flags=re.IGNORECASE | re.ASCII).lower()


def period_label(cadence: RepaymentCadence) -> str:
    return "Month" if cadence == RepaymentCadence.MONTHLY else "Week"


def schedule_csv(result: ScheduleResult, cadence: RepaymentCadence) -> str:
    """One row per period. Empty string when there is no schedule."""
    if not result.schedule:
        return ""

    lines = [",".join([period_label(cadence), *SCHEDULE_COLUMNS])]
    for row in result.schedule:
        lines.append(",".join([
            str(row.period),
            to_fixed(row.beginning_balance),
            to_fixed(row.draw_amount),
            to_fixed(row.total_payment_this_period),
            to_fixed(row.principal),
            to_fixed(row.interest),
            to_fixed(row.fees_this_period),
            to_fixed(row.remaining_balance),
            to_fixed(row.available_credit),
        ]))
    return "\n".join(lines)


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def comparison_csv(comparison: ScenarioComparison) -> str:
    """Metric, scenario A, scenario B, difference (B - A)."""
    lines = [",".join([
        _quote("Metric"),
        _quote(comparison.name_a),
        _quote(comparison.name_b),
        _quote("Difference"),
    ])]
    for row in comparison.rows:
        lines.append(",".join([
            _quote(row.label),
            to_fixed(row.value_a),
            to_fixed(row.value_b),
            to_fixed(row.difference),
        ]))
    return "\n".join(lines)
