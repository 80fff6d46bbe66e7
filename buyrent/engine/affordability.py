"""Pre-projection affordability check.

Validates upfront cash and year-one monthly cash flow using unescalated
figures. Later years are simulated but never re-validated.
"""

import logging

from buyrent.engine.amortization import monthly_payment
from buyrent.engine.cashflow import homeowner_costs
from buyrent.engine.tax import monthly_take_home
from buyrent.models.inputs import ProjectionInputs
from buyrent.models.results import InsufficientMonthlyIncome, InsufficientUpfrontCapital
from buyrent.models.state import initial_state

logger = logging.getLogger(__name__)


def check_affordability(
    inputs: ProjectionInputs,
) -> InsufficientUpfrontCapital | InsufficientMonthlyIncome | None:
    """Return the reason the purchase is unaffordable, or None if it is affordable."""
    required = inputs.upfront_cash_required
    if required > inputs.initial_investment:
        logger.info(
            "Upfront cash %s exceeds available investment %s",
            required, inputs.initial_investment,
        )
        return InsufficientUpfrontCapital(
            required_upfront=required,
            available_investment=inputs.initial_investment,
        )

    take_home = monthly_take_home(
        inputs.annual_salary_before_tax, inputs.combined_income_tax_rate
    )
    payment = monthly_payment(
        inputs.loan_amount, inputs.effective_mortgage_rate, inputs.mortgage_years
    )
    if inputs.loan_amount > 0:
        payment += inputs.extra_monthly_payment

    housing = homeowner_costs(inputs, initial_state(inputs), payment).total
    if housing + inputs.monthly_misc_expenses > take_home:
        logger.info(
            "Year-one housing %s plus living expenses %s exceed take-home %s",
            housing, inputs.monthly_misc_expenses, take_home,
        )
        return InsufficientMonthlyIncome(
            monthly_housing_costs=housing,
            monthly_misc_expenses=inputs.monthly_misc_expenses,
            monthly_take_home=take_home,
        )

    return None
