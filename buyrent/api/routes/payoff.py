"""Mortgage payoff optimizer routes."""

from fastapi import APIRouter, HTTPException

from buyrent.api.routes.projection import build_inputs
from buyrent.api.schemas import (
    PayoffRequest,
    PayoffResponse,
    PayoffScenarioResponse,
    RecommendationResponse,
)
from buyrent.engine.payoff import compare_payoff_strategies, payoff_recommendation

router = APIRouter(prefix="/api/v1", tags=["payoff"])


@router.post("/payoff", response_model=PayoffResponse)
async def run_payoff(req: PayoffRequest):
    """Rank extra-payment strategies by buying net worth at the horizon."""
    inputs = build_inputs(req)
    try:
        comparison = compare_payoff_strategies(
            inputs,
            ladder=req.extra_payments,
            horizon_years=req.optimization_horizon,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return PayoffResponse(
        scenarios=[PayoffScenarioResponse.from_scenario(s) for s in comparison.scenarios],
        skipped_extra_payments=comparison.skipped,
        recommendation=RecommendationResponse.from_recommendation(payoff_recommendation(inputs)),
    )
