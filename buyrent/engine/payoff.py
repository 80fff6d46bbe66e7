"""Mortgage payoff vs. invest comparison over a ladder of extra payments.

Each rung is an independent full projection, so rungs may run concurrently.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal, ROUND_HALF_UP

from buyrent.config import settings
from buyrent.engine.amortization import MONTHS_PER_YEAR, payoff_month
from buyrent.engine.projection import project
from buyrent.engine.summary import snapshot_at
from buyrent.models.inputs import ProjectionInputs, pct
from buyrent.models.results import (
    PayoffComparison,
    PayoffDecision,
    PayoffRecommendation,
    PayoffScenario,
    Projection,
)

logger = logging.getLogger(__name__)

ONE_PLACE = Decimal("0.1")

# Spread thresholds (percentage points) between investment return and
# after-tax mortgage rate
INVEST_SPREAD = Decimal("2")
PAY_OFF_SPREAD = Decimal("-1")


def default_ladder() -> list[Decimal]:
    return [Decimal(p) for p in settings.payoff_extra_payments]


def scenario_name(extra_monthly_payment: Decimal) -> str:
    if extra_monthly_payment == 0:
        return "Standard Payment"
    return f"+${extra_monthly_payment:,.0f}/month"


def evaluate_scenario(
    inputs: ProjectionInputs,
    extra_monthly_payment: Decimal,
    horizon_years: int | None = None,
) -> PayoffScenario | None:
    """Project with ``extra_monthly_payment`` added to every mortgage payment.

    Returns None when the accelerated schedule is unaffordable.
    """
    result = project(inputs.with_extra_payment(extra_monthly_payment))
    if not isinstance(result, Projection):
        logger.info(
            "Skipping extra payment %s: %s", extra_monthly_payment, result.kind.value
        )
        return None

    horizon = inputs.x_axis_years if horizon_years is None else horizon_years
    final = snapshot_at(result.snapshots, horizon)
    paid = result.snapshots[:final.year]

    month = payoff_month(
        inputs.loan_amount,
        inputs.effective_mortgage_rate,
        inputs.mortgage_years,
        extra_monthly_payment,
    )
    if month is None:
        payoff_year = None
        payoff_years = None
    else:
        payoff_year = -(-month // MONTHS_PER_YEAR)
        payoff_years = (Decimal(month) / MONTHS_PER_YEAR).quantize(ONE_PLACE, ROUND_HALF_UP)

    return PayoffScenario(
        name=scenario_name(extra_monthly_payment),
        extra_monthly_payment=extra_monthly_payment,
        final_net_worth=final.buying,
        payoff_year=payoff_year,
        payoff_years=payoff_years,
        total_interest_paid=sum((s.yearly_interest_paid for s in paid), Decimal("0")),
        total_tax_savings=sum((s.yearly_tax_savings for s in paid), Decimal("0")),
    )


def compare_payoff_strategies(
    inputs: ProjectionInputs,
    ladder: list[Decimal] | None = None,
    horizon_years: int | None = None,
    max_workers: int | None = None,
) -> PayoffComparison:
    """Evaluate every rung of the ladder and rank by buying net worth at the horizon.

    Args:
        inputs: Base assumptions; their own extra payment is replaced per rung
        ladder: Extra monthly payments to try (defaults to settings)
        horizon_years: Year whose net worth is compared (defaults to x_axis_years)
        max_workers: Evaluate rungs on a thread pool when greater than 1
    """
    rungs = default_ladder() if ladder is None else ladder
    workers = settings.payoff_max_workers if max_workers is None else max_workers

    def run(extra: Decimal) -> PayoffScenario | None:
        return evaluate_scenario(inputs, extra, horizon_years)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(run, rungs))
    else:
        outcomes = [run(extra) for extra in rungs]

    comparison = PayoffComparison()
    for extra, outcome in zip(rungs, outcomes):
        if outcome is None:
            comparison.skipped.append(extra)
        else:
            comparison.scenarios.append(outcome)
    comparison.scenarios.sort(key=lambda s: s.final_net_worth, reverse=True)
    return comparison


def payoff_recommendation(inputs: ProjectionInputs) -> PayoffRecommendation:
    """Rule of thumb: invest when expected returns beat the after-tax mortgage cost."""
    after_tax_rate = inputs.effective_mortgage_rate * (1 - pct(inputs.combined_income_tax_rate))
    spread = inputs.investment_return - after_tax_rate

    if spread > INVEST_SPREAD:
        decision = PayoffDecision.INVEST
        reason = (
            f"Investment returns ({inputs.investment_return}%) significantly exceed "
            f"after-tax mortgage cost ({after_tax_rate:.1f}%). "
            "Focus on minimum payments and invest extra cash."
        )
    elif spread < PAY_OFF_SPREAD:
        decision = PayoffDecision.PAY_OFF
        reason = (
            f"After-tax mortgage cost ({after_tax_rate:.1f}%) exceeds expected "
            f"investment returns ({inputs.investment_return}%). "
            "Prioritize extra mortgage payments."
        )
    else:
        decision = PayoffDecision.BALANCED
        reason = (
            "Investment returns and after-tax mortgage costs are similar. "
            "Consider a balanced approach based on risk tolerance."
        )

    return PayoffRecommendation(
        decision=decision,
        after_tax_mortgage_rate=after_tax_rate,
        spread=spread,
        reason=reason,
    )
