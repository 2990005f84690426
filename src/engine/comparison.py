"""Side-by-side comparison of two credit line scenarios.

Pure computation. No I/O. ScenarioInputs in, ScenarioComparison out.
"""

from src.engine.amortization import compute_schedule
from src.engine.summary import draw_metrics
from src.models.results import ComparisonRow, DrawMetrics, ScenarioComparison, ScheduleResult
from src.models.scenario import ScenarioInputs


def _row(label: str, value_a: float, value_b: float) -> ComparisonRow:
    return ComparisonRow(label=label, value_a=value_a, value_b=value_b, difference=value_b - value_a)


def compare_scenarios(
    name_a: str,
    result_a: ScheduleResult,
    draws_a: DrawMetrics,
    name_b: str,
    result_b: ScheduleResult,
    draws_b: DrawMetrics,
) -> ScenarioComparison:
    """Build comparison rows. Lower is better for every metric."""
    financial = [
        _row("Peak Balance", result_a.peak_balance, result_b.peak_balance),
        _row("Term Payment", result_a.principal_and_interest_payment, result_b.principal_and_interest_payment),
        _row("Effective APR (%)", result_a.effective_apr, result_b.effective_apr),
        _row("Total Interest Paid", result_a.total_interest, result_b.total_interest),
        _row("Total Fees Paid", result_a.total_fees, result_b.total_fees),
        _row("Total Repayment", result_a.total_payment, result_b.total_payment),
    ]
    draws = [
        _row("Total Draws", draws_a.total_draws, draws_b.total_draws),
        _row("Maximum Draw", draws_a.max_draw, draws_b.max_draw),
        _row("Average Draw", draws_a.average_draw, draws_b.average_draw),
    ]
    return ScenarioComparison(
        name_a=name_a,
        name_b=name_b,
        financial_summary=financial,
        draw_analysis=draws,
    )


def run_comparison(
    scenario_a: ScenarioInputs, scenario_b: ScenarioInputs
) -> tuple[ScenarioComparison, ScheduleResult, ScheduleResult]:
    """Run both scenarios through the engine and compare them.

    Returns (comparison, result_a, result_b).
    """
    config_a = scenario_a.to_config()
    config_b = scenario_b.to_config()
    result_a = compute_schedule(config_a)
    result_b = compute_schedule(config_b)

    comparison = compare_scenarios(
        scenario_a.name, result_a, draw_metrics(config_a, result_a),
        scenario_b.name, result_b, draw_metrics(config_b, result_b),
    )
    return comparison, result_a, result_b
