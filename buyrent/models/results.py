from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class YearlySnapshot:
    """One year of both strategies. Currency values are rounded to whole units."""

    year: int

    # Net worth
    buying: Decimal = Decimal("0")
    renting: Decimal = Decimal("0")

    # Income
    salary: Decimal = Decimal("0")

    # Ownership
    home_value: Decimal = Decimal("0")
    remaining_loan: Decimal = Decimal("0")
    home_equity: Decimal = Decimal("0")  # Value - loan balance
    yearly_principal_paid: Decimal = Decimal("0")
    yearly_interest_paid: Decimal = Decimal("0")
    monthly_pmi: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")  # Net of rental income
    monthly_rental_income: Decimal = Decimal("0")

    # Investments
    investments_buying: Decimal = Decimal("0")
    investments_renting: Decimal = Decimal("0")
    available_monthly_investment: Decimal = Decimal("0")  # Buyer's surplus

    # Renting
    monthly_rent: Decimal = Decimal("0")
    annual_rent_costs: Decimal = Decimal("0")

    # Tax
    yearly_tax_savings: Decimal = Decimal("0")
    total_itemized_deductions: Decimal = Decimal("0")

    monthly_misc_expenses: Decimal = Decimal("0")


@dataclass(frozen=True)
class Projection:
    """A feasible run: snapshots for years 0..horizon."""
    snapshots: tuple[YearlySnapshot, ...] = ()

    @property
    def final(self) -> YearlySnapshot:
        return self.snapshots[-1]


class InfeasibilityKind(Enum):
    INSUFFICIENT_UPFRONT_CAPITAL = "InsufficientUpfrontCapital"
    INSUFFICIENT_MONTHLY_INCOME = "InsufficientMonthlyIncome"


@dataclass(frozen=True)
class Infeasibility:
    """Base for runs rejected before any snapshot is produced.

    Each variant carries its own quantities plus ``kind`` and ``message``.
    """


@dataclass(frozen=True)
class InsufficientUpfrontCapital(Infeasibility):
    required_upfront: Decimal = Decimal("0")  # Down payment + closing + moving
    available_investment: Decimal = Decimal("0")

    @property
    def kind(self) -> InfeasibilityKind:
        return InfeasibilityKind.INSUFFICIENT_UPFRONT_CAPITAL

    @property
    def shortfall(self) -> Decimal:
        return self.required_upfront - self.available_investment

    @property
    def message(self) -> str:
        return "Insufficient initial investment for down payment and closing costs"


@dataclass(frozen=True)
class InsufficientMonthlyIncome(Infeasibility):
    monthly_housing_costs: Decimal = Decimal("0")
    monthly_misc_expenses: Decimal = Decimal("0")
    monthly_take_home: Decimal = Decimal("0")

    @property
    def kind(self) -> InfeasibilityKind:
        return InfeasibilityKind.INSUFFICIENT_MONTHLY_INCOME

    @property
    def shortfall(self) -> Decimal:
        return self.monthly_housing_costs + self.monthly_misc_expenses - self.monthly_take_home

    @property
    def message(self) -> str:
        return "Monthly housing costs and living expenses exceed monthly take-home pay"


ProjectionResult = Projection | InsufficientUpfrontCapital | InsufficientMonthlyIncome


@dataclass(frozen=True)
class PayoffScenario:
    """Outcome of one extra-payment strategy in the payoff ladder."""
    name: str
    extra_monthly_payment: Decimal
    final_net_worth: Decimal  # Buying net worth at the comparison horizon
    payoff_year: int | None  # First snapshot year showing a zero balance
    payoff_years: Decimal | None  # Payoff time in years, one decimal place
    total_interest_paid: Decimal
    total_tax_savings: Decimal


class PayoffDecision(Enum):
    INVEST = "INVEST"
    PAY_OFF = "PAY_OFF"
    BALANCED = "BALANCED"


@dataclass(frozen=True)
class PayoffRecommendation:
    decision: PayoffDecision
    after_tax_mortgage_rate: Decimal  # Percent
    spread: Decimal  # Investment return minus after-tax mortgage rate, points
    reason: str


@dataclass
class PayoffComparison:
    scenarios: list[PayoffScenario] = field(default_factory=list)  # Best first
    skipped: list[Decimal] = field(default_factory=list)  # Infeasible extra payments

    @property
    def optimal(self) -> PayoffScenario | None:
        return self.scenarios[0] if self.scenarios else None

    @property
    def standard(self) -> PayoffScenario | None:
        for s in self.scenarios:
            if s.extra_monthly_payment == 0:
                return s
        return self.optimal
