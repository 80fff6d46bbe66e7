"""Monthly cost and surplus figures for both strategies.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from buyrent.models.inputs import PMIBasis, ProjectionInputs, pct
from buyrent.models.state import ProjectionState

ZERO = Decimal("0")

# PMI is dropped once the loan is at or below 80% of the basis value
PMI_LTV_THRESHOLD = Decimal("0.80")


@dataclass(frozen=True)
class HomeownerCosts:
    """Gross monthly cost of owning, before rental income."""
    mortgage: Decimal
    property_tax: Decimal
    secondary_tax: Decimal
    insurance: Decimal
    maintenance: Decimal
    pmi: Decimal
    utilities: Decimal
    hoa: Decimal

    @property
    def total(self) -> Decimal:
        return (
            self.mortgage + self.property_tax + self.secondary_tax + self.insurance
            + self.maintenance + self.pmi + self.utilities + self.hoa
        )


def monthly_pmi(inputs: ProjectionInputs, loan_balance: Decimal, home_value: Decimal) -> Decimal:
    """PMI premium for the month, charged on the original loan amount.

    The loan-to-value test uses the original purchase price by default, so
    appreciation alone never removes PMI. ``PMIBasis.CURRENT_VALUE`` tests
    against the appreciated value instead.
    """
    if inputs.pmi_rate <= 0 or loan_balance <= 0:
        return ZERO
    basis = inputs.home_price if inputs.pmi_basis is PMIBasis.ORIGINAL_PRICE else home_value
    if basis <= 0:
        return ZERO
    if loan_balance / basis <= PMI_LTV_THRESHOLD:
        return ZERO
    return inputs.loan_amount * pct(inputs.pmi_rate) / 12


def yearly_property_tax(inputs: ProjectionInputs, assessed_value: Decimal) -> Decimal:
    return assessed_value * pct(inputs.property_tax_rate)


def yearly_secondary_tax(inputs: ProjectionInputs, assessed_value: Decimal) -> Decimal:
    return assessed_value * pct(inputs.mello_roos_tax_rate)


def homeowner_costs(
    inputs: ProjectionInputs,
    state: ProjectionState,
    mortgage_outlay: Decimal,
) -> HomeownerCosts:
    """Itemized monthly homeowner costs for the year starting at ``state``."""
    return HomeownerCosts(
        mortgage=mortgage_outlay,
        property_tax=yearly_property_tax(inputs, state.assessed_value) / 12,
        secondary_tax=yearly_secondary_tax(inputs, state.assessed_value) / 12,
        insurance=state.monthly_home_insurance,
        maintenance=state.home_value * pct(inputs.annual_maintenance_rate) / 12,
        pmi=monthly_pmi(inputs, state.loan_balance, state.home_value),
        utilities=state.monthly_property_utilities,
        hoa=state.monthly_hoa_fee,
    )


def renter_monthly_costs(inputs: ProjectionInputs, state: ProjectionState) -> Decimal:
    """Rent + renter's insurance + utilities."""
    return state.monthly_rent + inputs.monthly_renter_insurance + state.monthly_rent_utilities


def monthly_surplus(take_home: Decimal, housing_cost: Decimal, misc_expenses: Decimal) -> Decimal:
    """Income left after housing and living costs. Negative means a shortfall."""
    return take_home - housing_cost - misc_expenses


def annual_contribution(surplus: Decimal) -> Decimal:
    """Yearly amount invested from a monthly surplus; shortfalls invest nothing."""
    return max(ZERO, surplus) * 12
