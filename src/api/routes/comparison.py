"""Scenario A vs scenario B comparison routes."""

from fastapi import APIRouter, Response

from src.api.schemas import ComparisonRequest, ComparisonResponse, ComparisonRowResponse
from src.engine.comparison import run_comparison
from src.engine.export import comparison_csv, comparison_filename
from src.models.results import ComparisonRow
from src.models.scenario import ScenarioInputs

router = APIRouter(prefix="/api/v1/comparison", tags=["comparison"])


def _scenarios(req: ComparisonRequest) -> tuple[ScenarioInputs, ScenarioInputs]:
    scenario_a = req.scenario_a.to_scenario()
    scenario_b = req.scenario_b.to_scenario()
    if req.scenario_b.name is None:
        scenario_b = scenario_b.copy_as("Scenario B")
    return scenario_a, scenario_b


def _row_to_response(row: ComparisonRow) -> ComparisonRowResponse:
    return ComparisonRowResponse(
        label=row.label,
        value_a=row.value_a,
        value_b=row.value_b,
        difference=row.difference,
        better=row.better,
    )


@router.post("", response_model=ComparisonResponse)
async def compare(req: ComparisonRequest):
    """Run both scenarios and compare summary and draw metrics."""
    comparison, _, _ = run_comparison(*_scenarios(req))
    return ComparisonResponse(
        name_a=comparison.name_a,
        name_b=comparison.name_b,
        financial_summary=[_row_to_response(r) for r in comparison.financial_summary],
        draw_analysis=[_row_to_response(r) for r in comparison.draw_analysis],
    )


@router.post("/csv")
async def export_comparison_csv(req: ComparisonRequest):
    comparison, _, _ = run_comparison(*_scenarios(req))
    filename = comparison_filename(comparison.name_a, comparison.name_b)
    return Response(
        content=comparison_csv(comparison),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
