"""CLI for running credit line scenarios locally and printing a terminal report.

Usage:
    python -m src.cli scenario.json
    python -m src.cli scenario.json --all --csv amortization-schedule.csv
    python -m src.cli scenario.json --compare other.json --csv comparison.csv
    python -m src.cli --preset seasonal       # default scenario, seasonal draws
    python -m src.cli                        # default scenario

Scenario files are JSON objects using the API request fields, e.g.
    {"borrow_limit": 100000, "draw_schedule": [50000], "prime_rate": 7.25, "margin": 2.5}
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from src.api.schemas import ScenarioRequest
from src.config import settings
from src.engine.amortization import compute_schedule
from src.engine.comparison import run_comparison
from src.engine.export import comparison_csv, period_label, schedule_csv
from src.engine.summary import draw_metrics, yearly_summary
from src.models.results import ScenarioComparison, ScheduleResult
from src.models.scenario import DrawPreset, ScenarioInputs

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v: float) -> str:
    return f"{v:.2f}%"


def _dollar(v: float) -> str:
    return f"${v:,.0f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def load_scenario(path: str, default_name: str = "Scenario A") -> ScenarioInputs:
    """Read a JSON scenario file. Missing fields take scenario defaults."""
    req = ScenarioRequest.model_validate_json(Path(path).read_text())
    scenario = req.to_scenario()
    if req.name is None:
        scenario = scenario.copy_as(default_name)
    return scenario


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(scenario: ScenarioInputs, result: ScheduleResult) -> None:
    _header(f"Summary: {scenario.name}")
    print(f"  Total APR:            {_pct(scenario.total_apr)}  ({scenario.prime_rate:.2f}% + {scenario.margin:.2f}%)")
    print(f"  Peak Balance:         {_dollar(result.peak_balance)}")
    print(f"  Term Payment:         {_dollar(result.principal_and_interest_payment)}")
    print(f"  Effective APR:        {_pct(result.effective_apr)}")
    print(f"  Total Interest:       {_dollar(result.total_interest)}")
    print(f"  Total Fees:           {_dollar(result.total_fees)}")
    print(f"  Total Repayment:      {_dollar(result.total_payment)}")

    metrics = draw_metrics(scenario.to_config(), result)
    _header("Draw Analysis")
    print(f"  Total Draws:          {_dollar(metrics.total_draws)}")
    print(f"  Maximum Draw:         {_dollar(metrics.max_draw)}")
    print(f"  Average Draw:         {_dollar(metrics.average_draw)}")
    print(f"  Draw Events:          {metrics.draw_count}")


def print_yearly(scenario: ScenarioInputs, result: ScheduleResult) -> None:
    yearly = yearly_summary(result, scenario.to_config().periods_per_year)
    if not yearly:
        return
    _header("Yearly Summary")
    print(f"  {'Year':>4}  {'Draws':>10}  {'Payments':>10}  {'Interest':>10}  {'Fees':>8}  {'End Bal':>10}")
    for y in yearly:
        print(
            f"  {y.year:>4}  {_dollar(y.draws):>10}  {_dollar(y.total_payment):>10}"
            f"  {_dollar(y.interest):>10}  {_dollar(y.fees):>8}  {_dollar(y.ending_balance):>10}"
        )


def print_schedule(scenario: ScenarioInputs, result: ScheduleResult, show_all: bool) -> None:
    rows = result.schedule if show_all else result.schedule[:settings.preview_periods]
    if not rows:
        return
    label = period_label(scenario.repayment_cadence)
    _header("Amortization Schedule")
    print(f"  {label:>5}  {'Begin':>10}  {'Draw':>9}  {'Payment':>9}  {'Interest':>9}  {'Fees':>7}  {'End':>10}")
    for e in rows:
        print(
            f"  {e.period:>5}  {_dollar(e.beginning_balance):>10}  {_dollar(e.draw_amount):>9}"
            f"  {_dollar(e.total_payment_this_period):>9}  {_dollar(e.interest):>9}"
            f"  {_dollar(e.fees_this_period):>7}  {_dollar(e.remaining_balance):>10}"
        )
    if not show_all and len(result.schedule) > len(rows):
        print(f"  ... {len(result.schedule) - len(rows)} more periods (use --all)")


def print_comparison(comparison: ScenarioComparison) -> None:
    _header(f"Scenario Comparison: {comparison.name_a} vs {comparison.name_b}")
    for row in comparison.rows:
        fmt = _pct if "APR" in row.label else _dollar
        diff = "-" if row.difference == 0 else f"{'+' if row.difference > 0 else ''}{fmt(row.difference)}"
        better = f"  ({row.better} better)" if row.better else ""
        print(f"  {row.label:<22} {fmt(row.value_a):>12} {fmt(row.value_b):>12} {diff:>12}{better}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Business line of credit amortization CLI")
    parser.add_argument("scenario", nargs="?", help="Scenario JSON file (default scenario if omitted)")
    parser.add_argument(
        "--preset", choices=[p.value for p in DrawPreset],
        help="Replace the first scenario's draw schedule with a preset pattern",
    )
    parser.add_argument("--compare", metavar="FILE", help="Second scenario JSON file to compare against")
    parser.add_argument("--csv", metavar="PATH", help="Write schedule (or comparison) CSV to PATH")
    parser.add_argument("--all", action="store_true", help="Print every period, not just the first few")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        scenario_a = load_scenario(args.scenario) if args.scenario else ScenarioInputs()
        scenario_b = load_scenario(args.compare, default_name="Scenario B") if args.compare else None
    except OSError as e:
        parser.error(f"cannot read scenario file: {e}")
    except ValidationError as e:
        parser.error(f"invalid scenario: {e}")

    if args.preset:
        scenario_a = scenario_a.with_draw_preset(DrawPreset(args.preset))

    if scenario_b is not None:
        comparison, result_a, result_b = run_comparison(scenario_a, scenario_b)
        print_summary(scenario_a, result_a)
        print_summary(scenario_b, result_b)
        print_comparison(comparison)
        csv_text = comparison_csv(comparison)
    else:
        result_a = compute_schedule(scenario_a.to_config())
        print_summary(scenario_a, result_a)
        print_yearly(scenario_a, result_a)
        print_schedule(scenario_a, result_a, args.all)
        csv_text = schedule_csv(result_a, scenario_a.repayment_cadence)

    if args.csv:
        if not csv_text:
            logger.warning("Empty schedule, nothing written to %s", args.csv)
            return 1
        Path(args.csv).write_text(csv_text)
        logger.info("Wrote %s", args.csv)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
