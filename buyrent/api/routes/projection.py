"""Projection routes: the primary API entry point."""

from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from buyrent.api.deps import get_projector
from buyrent.api.schemas import (
    MonthlyIncomeErrorResponse,
    ProjectionRequest,
    ProjectionResponse,
    UpfrontCapitalErrorResponse,
    YearlySnapshotResponse,
)
from buyrent.engine.summary import break_even_year
from buyrent.models.inputs import ProjectionInputs
from buyrent.models.results import (
    InsufficientMonthlyIncome,
    InsufficientUpfrontCapital,
    Projection,
    ProjectionResult,
)

router = APIRouter(prefix="/api/v1", tags=["projection"])

ProjectionResultResponse = (
    ProjectionResponse | UpfrontCapitalErrorResponse | MonthlyIncomeErrorResponse
)


def build_inputs(req: ProjectionRequest) -> ProjectionInputs:
    try:
        return req.to_inputs()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def result_to_response(result: ProjectionResult) -> ProjectionResultResponse:
    """Convert an engine result to the matching API variant."""
    if isinstance(result, InsufficientUpfrontCapital):
        return UpfrontCapitalErrorResponse.from_error(result)
    if isinstance(result, InsufficientMonthlyIncome):
        return MonthlyIncomeErrorResponse.from_error(result)
    if isinstance(result, Projection):
        return ProjectionResponse(
            break_even_year=break_even_year(result.snapshots),
            snapshots=[YearlySnapshotResponse.from_snapshot(s) for s in result.snapshots],
        )
    raise TypeError(f"Unexpected projection result: {type(result).__name__}")


@router.post("/projection", response_model=ProjectionResultResponse)
async def run_projection(
    req: ProjectionRequest,
    projector: Callable[[ProjectionInputs], ProjectionResult] = Depends(get_projector),
):
    """Project yearly net worth for buying vs renting.

    Infeasible configurations are a normal response with ``status: infeasible``.
    """
    return result_to_response(projector(build_inputs(req)))
