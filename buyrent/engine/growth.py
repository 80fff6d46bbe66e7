"""Year-over-year growth of income, prices, and inflation-linked costs."""

from dataclasses import replace
from decimal import Decimal

from buyrent.models.inputs import ProjectionInputs, pct
from buyrent.models.state import ProjectionState


def growth_factor(rate_pct: Decimal) -> Decimal:
    return 1 + pct(rate_pct)


def advance_state(
    state: ProjectionState,
    inputs: ProjectionInputs,
    ending_loan_balance: Decimal,
) -> ProjectionState:
    """Grow everything by one year and retire the year's principal.

    Investment balances are left untouched; compounding is applied separately.
    """
    rent = growth_factor(inputs.rent_increase)
    inflation = growth_factor(inputs.inflation_rate)

    return replace(
        state,
        year=state.year + 1,
        salary=state.salary * growth_factor(inputs.salary_growth_rate),
        monthly_rent=state.monthly_rent * rent,
        monthly_rental_income=state.monthly_rental_income * rent,
        home_value=state.home_value * growth_factor(inputs.home_appreciation),
        assessed_value=state.assessed_value * growth_factor(inputs.property_tax_assessment_cap),
        loan_balance=ending_loan_balance,
        monthly_misc_expenses=state.monthly_misc_expenses * inflation,
        monthly_hoa_fee=state.monthly_hoa_fee * inflation,
        monthly_home_insurance=state.monthly_home_insurance * inflation,
        monthly_property_utilities=state.monthly_property_utilities * inflation,
        monthly_rent_utilities=state.monthly_rent_utilities * inflation,
        standard_deduction=state.standard_deduction * inflation,
    )
