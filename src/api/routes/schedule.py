"""Schedule routes: the primary API entry point."""

from fastapi import APIRouter, HTTPException, Response

from src.api.schemas import (
    DrawMetricsResponse,
    PeriodEntryResponse,
    ScenarioRequest,
    ScheduleResponse,
    YearlySummaryResponse,
)
from src.config import settings
from src.engine.amortization import compute_schedule
from src.engine.export import schedule_csv
from src.engine.summary import draw_metrics, yearly_summary
from src.models.results import ScheduleResult
from src.models.scenario import ScenarioInputs

router = APIRouter(prefix="/api/v1/schedule", tags=["schedule"])


def _result_to_response(scenario: ScenarioInputs, result: ScheduleResult) -> ScheduleResponse:
    """Convert engine ScheduleResult to API response."""
    config = scenario.to_config()
    metrics = draw_metrics(config, result)

    yearly = [
        YearlySummaryResponse(
            year=y.year,
            draws=y.draws,
            payment=y.payment,
            principal=y.principal,
            interest=y.interest,
            fees=y.fees,
            total_payment=y.total_payment,
            ending_balance=y.ending_balance,
        )
        for y in yearly_summary(result, config.periods_per_year)
    ]

    schedule = [
        PeriodEntryResponse(
            period=e.period,
            beginning_balance=e.beginning_balance,
            draw_amount=e.draw_amount,
            payment=e.payment,
            interest=e.interest,
            principal=e.principal,
            fees_this_period=e.fees_this_period,
            total_payment_this_period=e.total_payment_this_period,
            remaining_balance=e.remaining_balance,
            available_credit=e.available_credit,
        )
        for e in result.schedule
    ]

    return ScheduleResponse(
        name=scenario.name,
        total_apr=scenario.total_apr,
        principal_and_interest_payment=result.principal_and_interest_payment,
        peak_balance=result.peak_balance,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        total_fees=result.total_fees,
        effective_apr=result.effective_apr,
        total_draws=result.total_draws,
        draw_metrics=DrawMetricsResponse(
            total_draws=metrics.total_draws,
            max_draw=metrics.max_draw,
            average_draw=metrics.average_draw,
            draw_count=metrics.draw_count,
        ),
        yearly_summary=yearly,
        schedule=schedule,
    )


@router.post("", response_model=ScheduleResponse)
async def run_schedule(req: ScenarioRequest):
    """Scenario in, full period ledger and summary metrics out.

    Degenerate inputs (negative rate, non-positive term) return zeros and an
    empty schedule rather than an error.
    """
    scenario = req.to_scenario()
    result = compute_schedule(scenario.to_config())
    return _result_to_response(scenario, result)


@router.post("/csv")
async def export_schedule_csv(req: ScenarioRequest):
    """Scenario in, schedule CSV attachment out."""
    scenario = req.to_scenario()
    result = compute_schedule(scenario.to_config())
    if not result.schedule:
        raise HTTPException(status_code=422, detail="Scenario produces an empty schedule")

    return Response(
        content=schedule_csv(result, scenario.repayment_cadence),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.schedule_csv_filename}"'},
    )
