from dataclasses import dataclass
from decimal import Decimal

from buyrent.models.inputs import ProjectionInputs


@dataclass(frozen=True)
class ProjectionState:
    """Unrounded start-of-year state threaded through the yearly fold."""

    year: int

    salary: Decimal
    monthly_rent: Decimal
    monthly_rental_income: Decimal

    home_value: Decimal
    assessed_value: Decimal  # Grows at the assessment cap, not market rate
    loan_balance: Decimal

    investments_buying: Decimal
    investments_renting: Decimal

    # Inflation-linked
    monthly_misc_expenses: Decimal
    monthly_hoa_fee: Decimal
    monthly_home_insurance: Decimal
    monthly_property_utilities: Decimal
    monthly_rent_utilities: Decimal
    standard_deduction: Decimal

    @property
    def home_equity(self) -> Decimal:
        return self.home_value - self.loan_balance


def initial_state(inputs: ProjectionInputs) -> ProjectionState:
    """Year-0 state: nothing has grown yet, upfront costs are paid."""
    return ProjectionState(
        year=0,
        salary=inputs.annual_salary_before_tax,
        monthly_rent=inputs.monthly_rent,
        monthly_rental_income=inputs.monthly_rental_income,
        home_value=inputs.home_price,
        assessed_value=inputs.home_price,
        loan_balance=inputs.loan_amount,
        investments_buying=inputs.initial_investment - inputs.upfront_cash_required,
        investments_renting=(
            inputs.initial_investment - inputs.rent_deposit - inputs.moving_cost_renting
        ),
        monthly_misc_expenses=inputs.monthly_misc_expenses,
        monthly_hoa_fee=inputs.monthly_hoa_fee,
        monthly_home_insurance=inputs.monthly_home_insurance,
        monthly_property_utilities=inputs.monthly_property_utilities,
        monthly_rent_utilities=inputs.monthly_rent_utilities,
        standard_deduction=inputs.standard_deduction,
    )
