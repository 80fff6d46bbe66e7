from dataclasses import dataclass, fields, replace
from decimal import Decimal
from enum import Enum

HUNDRED = Decimal("100")


def pct(rate: Decimal) -> Decimal:
    """Whole-number percent (6.5) to fraction (0.065)."""
    return rate / HUNDRED


class PMIBasis(Enum):
    """Value the loan balance is measured against when testing for PMI removal."""
    ORIGINAL_PRICE = "original_price"
    CURRENT_VALUE = "current_value"


class InterestCapBasis(Enum):
    """How deductible mortgage interest is scaled down above the debt cap."""
    HOME_PRICE = "home_price"  # interest * min(1, cap / purchase price)
    LOAN_BALANCE = "loan_balance"  # interest * min(balance, cap) / balance


# Fields that must never go below zero
_NON_NEGATIVE = (
    "annual_salary_before_tax",
    "standard_deduction",
    "initial_investment",
    "monthly_misc_expenses",
    "home_price",
    "monthly_hoa_fee",
    "monthly_home_insurance",
    "monthly_rent",
    "monthly_rental_income",
    "rent_deposit",
    "moving_cost_buying",
    "moving_cost_renting",
    "monthly_renter_insurance",
    "monthly_rent_utilities",
    "monthly_property_utilities",
    "monthly_quality_of_life",
    "mortgage_interest_deduction_cap",
    "extra_monthly_payment",
)


@dataclass(frozen=True)
class ProjectionInputs:
    """Every assumption behind one buy-vs-rent projection.

    Rates are whole-number percents (6.5 means 6.5%) and are converted with
    ``pct`` where they are used. Monetary values are in currency units.
    """

    # Income & taxes
    annual_salary_before_tax: Decimal
    effective_tax_rate: Decimal  # Federal effective rate, percent
    standard_deduction: Decimal
    initial_investment: Decimal
    monthly_misc_expenses: Decimal

    # Property
    home_price: Decimal
    down_payment_percent: Decimal
    effective_mortgage_rate: Decimal
    mortgage_years: int
    pmi_rate: Decimal = Decimal("0")  # Annual, percent of original loan
    property_tax_rate: Decimal = Decimal("0")
    mello_roos_tax_rate: Decimal = Decimal("0")  # Secondary assessment
    closing_cost_percent: Decimal = Decimal("0")
    annual_maintenance_rate: Decimal = Decimal("0")  # Percent of home value
    monthly_hoa_fee: Decimal = Decimal("0")
    monthly_home_insurance: Decimal = Decimal("0")
    monthly_property_utilities: Decimal = Decimal("0")
    monthly_rental_income: Decimal = Decimal("0")
    moving_cost_buying: Decimal = Decimal("0")

    # Renting
    monthly_rent: Decimal = Decimal("0")
    rent_deposit: Decimal = Decimal("0")
    monthly_renter_insurance: Decimal = Decimal("0")
    monthly_rent_utilities: Decimal = Decimal("0")
    moving_cost_renting: Decimal = Decimal("0")

    # Ownership benefit not captured by net worth
    monthly_quality_of_life: Decimal = Decimal("0")

    # Growth
    home_appreciation: Decimal = Decimal("0")
    investment_return: Decimal = Decimal("0")
    rent_increase: Decimal = Decimal("0")
    salary_growth_rate: Decimal = Decimal("0")
    inflation_rate: Decimal = Decimal("0")
    property_tax_assessment_cap: Decimal = Decimal("0")

    # Deduction limits
    mortgage_interest_deduction_cap: Decimal = Decimal("750000")
    salt_cap: Decimal | None = None  # None = uncapped
    effective_state_income_tax_rate: Decimal = Decimal("0")

    # Display
    x_axis_years: int = 30

    # Payoff strategy & policies
    extra_monthly_payment: Decimal = Decimal("0")
    pmi_basis: PMIBasis = PMIBasis.ORIGINAL_PRICE
    interest_cap_basis: InterestCapBasis = InterestCapBasis.HOME_PRICE

    def __post_init__(self) -> None:
        if self.mortgage_years <= 0:
            raise ValueError("mortgage_years must be positive")
        if self.x_axis_years <= 0:
            raise ValueError("x_axis_years must be positive")
        if not 0 <= self.down_payment_percent <= 100:
            raise ValueError("down_payment_percent must be between 0 and 100")
        for name in _NON_NEGATIVE:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.salt_cap is not None and self.salt_cap < 0:
            raise ValueError("salt_cap must not be negative")

    @property
    def down_payment(self) -> Decimal:
        return self.home_price * pct(self.down_payment_percent)

    @property
    def loan_amount(self) -> Decimal:
        return self.home_price - self.down_payment

    @property
    def closing_costs(self) -> Decimal:
        return self.home_price * pct(self.closing_cost_percent)

    @property
    def upfront_cash_required(self) -> Decimal:
        """Cash needed on day one to buy: down payment + closing + moving."""
        return self.down_payment + self.closing_costs + self.moving_cost_buying

    @property
    def combined_income_tax_rate(self) -> Decimal:
        return self.effective_tax_rate + self.effective_state_income_tax_rate

    @property
    def horizon_years(self) -> int:
        """Last simulated year; snapshots run 0..horizon_years inclusive."""
        return max(self.mortgage_years, self.x_axis_years)

    def with_extra_payment(self, extra_monthly_payment: Decimal) -> "ProjectionInputs":
        return replace(self, extra_monthly_payment=extra_monthly_payment)


# Out-of-the-box assumptions for a typical first-time buyer
_DEFAULTS: dict[str, Decimal | int] = {
    "annual_salary_before_tax": Decimal("120000"),
    "effective_tax_rate": Decimal("35"),
    "standard_deduction": Decimal("20550"),
    "initial_investment": Decimal("250000"),
    "monthly_misc_expenses": Decimal("1000"),
    "home_price": Decimal("400000"),
    "down_payment_percent": Decimal("20"),
    "effective_mortgage_rate": Decimal("6.8"),
    "mortgage_years": 30,
    "pmi_rate": Decimal("0.8"),
    "property_tax_rate": Decimal("1.15"),
    "mello_roos_tax_rate": Decimal("0"),
    "closing_cost_percent": Decimal("2.5"),
    "annual_maintenance_rate": Decimal("0.5"),
    "monthly_hoa_fee": Decimal("150"),
    "monthly_home_insurance": Decimal("200"),
    "monthly_rent": Decimal("2600"),
    "monthly_rental_income": Decimal("0"),
    "rent_deposit": Decimal("2600"),
    "moving_cost_buying": Decimal("3500"),
    "moving_cost_renting": Decimal("2000"),
    "monthly_renter_insurance": Decimal("25"),
    "monthly_rent_utilities": Decimal("120"),
    "monthly_property_utilities": Decimal("220"),
    "monthly_quality_of_life": Decimal("800"),
    "home_appreciation": Decimal("4.5"),
    "investment_return": Decimal("8.5"),
    "rent_increase": Decimal("4.5"),
    "salary_growth_rate": Decimal("3.5"),
    "inflation_rate": Decimal("3.0"),
    "property_tax_assessment_cap": Decimal("2"),
    "x_axis_years": 30,
    "mortgage_interest_deduction_cap": Decimal("750000"),
}


def default_inputs(**overrides) -> ProjectionInputs:
    """Default assumptions with keyword overrides (e.g. ``home_price=Decimal("500000")``)."""
    known = {f.name for f in fields(ProjectionInputs)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown input fields: {', '.join(sorted(unknown))}")
    return ProjectionInputs(**{**_DEFAULTS, **overrides})
