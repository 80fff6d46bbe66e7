"""Projection orchestrator: folds the yearly step over the full horizon.

Pure computation. No I/O. ProjectionInputs in, ProjectionResult out.
"""

import logging
from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP

from buyrent.engine.affordability import check_affordability
from buyrent.engine.amortization import amortize_year, monthly_payment, monthly_rate
from buyrent.engine.cashflow import (
    annual_contribution,
    homeowner_costs,
    monthly_surplus,
    renter_monthly_costs,
    yearly_property_tax,
    yearly_secondary_tax,
)
from buyrent.engine.compounding import compound_year
from buyrent.engine.growth import advance_state
from buyrent.engine.tax import monthly_take_home, yearly_tax_savings
from buyrent.models.inputs import ProjectionInputs, pct
from buyrent.models.results import Projection, ProjectionResult, YearlySnapshot
from buyrent.models.state import ProjectionState, initial_state

logger = logging.getLogger(__name__)

WHOLE = Decimal("1")
ZERO = Decimal("0")


def to_whole(value: Decimal) -> Decimal:
    """Round half away from zero to whole currency units."""
    return value.quantize(WHOLE, ROUND_HALF_UP)


def scheduled_payment(inputs: ProjectionInputs) -> Decimal:
    """Monthly mortgage payment including any voluntary extra principal."""
    if inputs.loan_amount <= 0:
        return ZERO
    base = monthly_payment(inputs.loan_amount, inputs.effective_mortgage_rate, inputs.mortgage_years)
    return base + inputs.extra_monthly_payment


def step(
    state: ProjectionState,
    inputs: ProjectionInputs,
    payment: Decimal,
    rate: Decimal,
) -> tuple[YearlySnapshot, ProjectionState]:
    """Emit the snapshot for ``state``'s year and return the next year's state.

    Costs, taxes and PMI are computed from the pre-advance state; growth and
    compounding are applied afterwards for the following year.
    """
    amort = amortize_year(state.loan_balance, payment, rate)

    # Taxes
    property_tax = yearly_property_tax(inputs, state.assessed_value)
    secondary_tax = yearly_secondary_tax(inputs, state.assessed_value)
    tax = yearly_tax_savings(
        mortgage_interest=amort.interest_paid,
        property_tax=property_tax,
        secondary_tax=secondary_tax,
        standard_deduction=state.standard_deduction,
        deduction_cap=inputs.mortgage_interest_deduction_cap,
        home_price=inputs.home_price,
        tax_rate=inputs.effective_tax_rate,
        loan_balance=state.loan_balance,
        state_income_tax=state.salary * pct(inputs.effective_state_income_tax_rate),
        salt_cap=inputs.salt_cap,
        cap_basis=inputs.interest_cap_basis,
    )

    # Monthly cash flow
    costs = homeowner_costs(inputs, state, amort.total_paid / 12)
    net_homeowner = costs.total - state.monthly_rental_income
    renter = renter_monthly_costs(inputs, state)
    take_home = monthly_take_home(state.salary, inputs.combined_income_tax_rate)
    buyer_surplus = monthly_surplus(take_home, net_homeowner, state.monthly_misc_expenses)
    renter_surplus = monthly_surplus(take_home, renter, state.monthly_misc_expenses)

    # Quality of life is credited for display only, never invested
    quality_of_life = inputs.monthly_quality_of_life * 12 if state.year > 0 else ZERO

    home_value = to_whole(state.home_value)
    remaining_loan = to_whole(state.loan_balance)
    snapshot = YearlySnapshot(
        year=state.year,
        buying=to_whole(state.investments_buying + state.home_equity + quality_of_life),
        renting=to_whole(state.investments_renting),
        salary=to_whole(state.salary),
        home_value=home_value,
        remaining_loan=remaining_loan,
        home_equity=home_value - remaining_loan,
        yearly_principal_paid=to_whole(amort.principal_paid),
        yearly_interest_paid=to_whole(amort.interest_paid),
        monthly_pmi=to_whole(costs.pmi),
        monthly_payment=to_whole(net_homeowner),
        monthly_rental_income=to_whole(state.monthly_rental_income),
        investments_buying=to_whole(state.investments_buying),
        investments_renting=to_whole(state.investments_renting),
        available_monthly_investment=to_whole(buyer_surplus),
        monthly_rent=to_whole(state.monthly_rent),
        annual_rent_costs=to_whole(renter * 12),
        yearly_tax_savings=to_whole(tax.savings),
        total_itemized_deductions=to_whole(tax.itemized_deductions),
        monthly_misc_expenses=to_whole(state.monthly_misc_expenses),
    )

    # Tax refunds arrive as a lump sum at year end
    investments_buying = compound_year(
        state.investments_buying, annual_contribution(buyer_surplus), inputs.investment_return
    ) + tax.savings
    investments_renting = compound_year(
        state.investments_renting, annual_contribution(renter_surplus), inputs.investment_return
    )

    next_state = replace(
        advance_state(state, inputs, amort.ending_balance),
        investments_buying=investments_buying,
        investments_renting=investments_renting,
    )
    return snapshot, next_state


def project(inputs: ProjectionInputs) -> ProjectionResult:
    """Run the full buy-vs-rent projection.

    Returns the affordability rejection if the purchase is infeasible,
    otherwise a Projection with snapshots for years 0..horizon_years.
    """
    rejection = check_affordability(inputs)
    if rejection is not None:
        return rejection

    payment = scheduled_payment(inputs)
    rate = monthly_rate(inputs.effective_mortgage_rate)

    state = initial_state(inputs)
    snapshots: list[YearlySnapshot] = []
    for _ in range(inputs.horizon_years + 1):
        snapshot, state = step(state, inputs, payment, rate)
        snapshots.append(snapshot)

    logger.debug(
        "Projected %d years: buying %s, renting %s",
        inputs.horizon_years, snapshots[-1].buying, snapshots[-1].renting,
    )
    return Projection(snapshots=tuple(snapshots))
