"""CLI for running a buy-vs-rent projection from the terminal.

Usage:
    python -m buyrent.cli
    python -m buyrent.cli --home-price 700000 --salary 350000 --rent 2000 --years 30
    python -m buyrent.cli --payoff
    python -m buyrent.cli --json
"""

import argparse
import json
import logging
from dataclasses import asdict
from decimal import Decimal

from buyrent.config import settings
from buyrent.engine.payoff import compare_payoff_strategies, payoff_recommendation
from buyrent.engine.projection import project
from buyrent.engine.summary import break_even_year
from buyrent.models.inputs import ProjectionInputs, default_inputs
from buyrent.models.results import (
    InsufficientMonthlyIncome,
    InsufficientUpfrontCapital,
    PayoffComparison,
    Projection,
)

# CLI flag -> ProjectionInputs field
OVERRIDES = {
    "salary": "annual_salary_before_tax",
    "tax_rate": "effective_tax_rate",
    "initial_investment": "initial_investment",
    "home_price": "home_price",
    "down_payment": "down_payment_percent",
    "mortgage_rate": "effective_mortgage_rate",
    "rent": "monthly_rent",
    "appreciation": "home_appreciation",
    "investment_return": "investment_return",
    "rent_increase": "rent_increase",
    "extra_payment": "extra_monthly_payment",
}


def print_projection(result: Projection) -> None:
    print(f"\n{'=' * 72}")
    print("  Net Worth: Buying vs Renting")
    print(f"{'=' * 72}")
    print(f"  {'Year':>4}  {'Buying':>14}  {'Renting':>14}  {'Home Equity':>14}  {'Loan':>12}")
    for s in result.snapshots:
        print(
            f"  {s.year:>4}  ${s.buying:>13,.0f}  ${s.renting:>13,.0f}"
            f"  ${s.home_equity:>13,.0f}  ${s.remaining_loan:>11,.0f}"
        )
    year = break_even_year(result.snapshots)
    print()
    print(f"  Break-even year:  {year if year is not None else 'never'}")
    print()


def print_infeasible(result: InsufficientUpfrontCapital | InsufficientMonthlyIncome) -> None:
    print(f"\n{'=' * 72}")
    print(f"  Not affordable: {result.message}")
    print(f"{'=' * 72}")
    for name, value in asdict(result).items():
        print(f"  {name.replace('_', ' ').capitalize():<24} ${value:>13,.0f}")
    print()


def print_payoff(comparison: PayoffComparison, inputs: ProjectionInputs) -> None:
    print(f"\n{'=' * 72}")
    print("  Mortgage Payoff vs Investment")
    print(f"{'=' * 72}")
    for s in comparison.scenarios:
        payoff = f"{s.payoff_years} yrs" if s.payoff_years is not None else "beyond term"
        print(f"  {s.name:<20}  ${s.final_net_worth:>14,.0f}  payoff {payoff}")
    if comparison.skipped:
        skipped = ", ".join(f"${p:,.0f}" for p in comparison.skipped)
        print(f"  Unaffordable:       {skipped}")
    rec = payoff_recommendation(inputs)
    print()
    print(f"  Recommendation:   {rec.decision.value}")
    print(f"                    {rec.reason}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Buy vs rent net worth projection")
    parser.add_argument("--salary", type=Decimal, help="Annual salary before tax")
    parser.add_argument("--tax-rate", type=Decimal, help="Effective tax rate (percent)")
    parser.add_argument("--initial-investment", type=Decimal, help="Cash available today")
    parser.add_argument("--home-price", type=Decimal, help="Purchase price")
    parser.add_argument("--down-payment", type=Decimal, help="Down payment (percent)")
    parser.add_argument("--mortgage-rate", type=Decimal, help="Mortgage rate (percent)")
    parser.add_argument("--mortgage-years", type=int, help="Mortgage term in years")
    parser.add_argument("--rent", type=Decimal, help="Monthly rent")
    parser.add_argument("--appreciation", type=Decimal, help="Home appreciation (percent/yr)")
    parser.add_argument("--investment-return", type=Decimal, help="Investment return (percent/yr)")
    parser.add_argument("--rent-increase", type=Decimal, help="Rent increase (percent/yr)")
    parser.add_argument("--extra-payment", type=Decimal, help="Extra monthly principal")
    parser.add_argument("--years", type=int, help="Display horizon in years")
    parser.add_argument("--payoff", action="store_true", help="Rank extra-payment strategies")
    parser.add_argument("--json", action="store_true", help="Print snapshots as JSON")
    return parser


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    parser = build_parser()
    args = parser.parse_args()

    overrides = {
        field: getattr(args, flag)
        for flag, field in OVERRIDES.items()
        if getattr(args, flag) is not None
    }
    if args.mortgage_years is not None:
        overrides["mortgage_years"] = args.mortgage_years
    if args.years is not None:
        overrides["x_axis_years"] = args.years

    try:
        inputs = default_inputs(**overrides)
    except ValueError as e:
        parser.error(str(e))

    if args.payoff:
        print_payoff(compare_payoff_strategies(inputs), inputs)
        return

    result = project(inputs)
    if not isinstance(result, Projection):
        print_infeasible(result)
        return

    if args.json:
        print(json.dumps([asdict(s) for s in result.snapshots], indent=2, default=str))
    else:
        print_projection(result)


if __name__ == "__main__":
    main()
