"""Pydantic schemas for API request/response models.

Field names are snake_case in Python and camelCase on the wire.
"""

from dataclasses import asdict
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from buyrent.models.inputs import InterestCapBasis, PMIBasis, ProjectionInputs
from buyrent.models.results import (
    InsufficientMonthlyIncome,
    InsufficientUpfrontCapital,
    PayoffRecommendation,
    PayoffScenario,
    YearlySnapshot,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class ProjectionRequest(CamelModel):
    # Income & taxes
    annual_salary_before_tax: Decimal = Field(..., ge=0)
    effective_tax_rate: Decimal = Field(..., description="Effective federal rate, percent")
    standard_deduction: Decimal = Field(Decimal("0"), ge=0)
    initial_investment: Decimal = Field(..., ge=0)
    monthly_misc_expenses: Decimal = Field(Decimal("0"), ge=0)
    effective_state_income_tax_rate: Decimal = Decimal("0")
    salt_cap: Decimal | None = Field(None, ge=0, description="None for uncapped")

    # Property
    home_price: Decimal = Field(..., ge=0)
    down_payment_percent: Decimal = Field(..., ge=0, le=100)
    effective_mortgage_rate: Decimal
    mortgage_years: int = Field(..., gt=0)
    pmi_rate: Decimal = Field(Decimal("0"), alias="PMIRate")
    property_tax_rate: Decimal = Decimal("0")
    mello_roos_tax_rate: Decimal = Decimal("0")
    closing_cost_percent: Decimal = Decimal("0")
    annual_maintenance_rate: Decimal = Decimal("0")
    monthly_hoa_fee: Decimal = Field(Decimal("0"), alias="monthlyHOAFee", ge=0)
    monthly_home_insurance: Decimal = Field(Decimal("0"), ge=0)
    monthly_property_utilities: Decimal = Field(Decimal("0"), ge=0)
    monthly_rental_income: Decimal = Field(Decimal("0"), ge=0)
    moving_cost_buying: Decimal = Field(Decimal("0"), ge=0)

    # Renting
    monthly_rent: Decimal = Field(Decimal("0"), ge=0)
    rent_deposit: Decimal = Field(Decimal("0"), ge=0)
    monthly_renter_insurance: Decimal = Field(Decimal("0"), ge=0)
    monthly_rent_utilities: Decimal = Field(Decimal("0"), ge=0)
    moving_cost_renting: Decimal = Field(Decimal("0"), ge=0)

    monthly_quality_of_life: Decimal = Field(Decimal("0"), ge=0)

    # Growth, percent per year
    home_appreciation: Decimal = Decimal("0")
    investment_return: Decimal = Decimal("0")
    rent_increase: Decimal = Decimal("0")
    salary_growth_rate: Decimal = Decimal("0")
    inflation_rate: Decimal = Decimal("0")
    property_tax_assessment_cap: Decimal = Decimal("0")

    mortgage_interest_deduction_cap: Decimal = Field(Decimal("750000"), ge=0)
    x_axis_years: int = Field(30, gt=0)

    extra_monthly_payment: Decimal = Field(Decimal("0"), ge=0)
    pmi_basis: PMIBasis = PMIBasis.ORIGINAL_PRICE
    interest_cap_basis: InterestCapBasis = InterestCapBasis.HOME_PRICE

    def to_inputs(self) -> ProjectionInputs:
        return ProjectionInputs(**self.model_dump())


class PayoffRequest(ProjectionRequest):
    extra_payments: list[Annotated[Decimal, Field(ge=0)]] | None = Field(
        None, description="Extra monthly payments to try; defaults to the standard ladder"
    )
    optimization_horizon: int | None = Field(None, gt=0)

    def to_inputs(self) -> ProjectionInputs:
        return ProjectionInputs(
            **self.model_dump(exclude={"extra_payments", "optimization_horizon"})
        )


# ---- Response schemas ----

class YearlySnapshotResponse(CamelModel):
    year: int
    buying: Decimal
    renting: Decimal
    salary: Decimal
    home_equity: Decimal
    investments_buying: Decimal
    investments_renting: Decimal
    home_value: Decimal
    remaining_loan: Decimal
    yearly_principal_paid: Decimal
    yearly_interest_paid: Decimal
    monthly_payment: Decimal
    monthly_pmi: Decimal
    available_monthly_investment: Decimal
    monthly_rent: Decimal
    annual_rent_costs: Decimal
    monthly_rental_income: Decimal
    yearly_tax_savings: Decimal
    total_itemized_deductions: Decimal
    monthly_misc_expenses: Decimal

    @classmethod
    def from_snapshot(cls, s: YearlySnapshot) -> "YearlySnapshotResponse":
        return cls(**asdict(s))


class ProjectionResponse(CamelModel):
    status: Literal["ok"] = "ok"
    break_even_year: int | None = None
    snapshots: list[YearlySnapshotResponse]


class UpfrontCapitalErrorResponse(CamelModel):
    status: Literal["infeasible"] = "infeasible"
    kind: Literal["InsufficientUpfrontCapital"] = "InsufficientUpfrontCapital"
    message: str
    required_upfront: Decimal
    available_investment: Decimal

    @classmethod
    def from_error(cls, e: InsufficientUpfrontCapital) -> "UpfrontCapitalErrorResponse":
        return cls(
            message=e.message,
            required_upfront=e.required_upfront,
            available_investment=e.available_investment,
        )


class MonthlyIncomeErrorResponse(CamelModel):
    status: Literal["infeasible"] = "infeasible"
    kind: Literal["InsufficientMonthlyIncome"] = "InsufficientMonthlyIncome"
    message: str
    monthly_housing_costs: Decimal
    monthly_misc_expenses: Decimal
    monthly_take_home: Decimal

    @classmethod
    def from_error(cls, e: InsufficientMonthlyIncome) -> "MonthlyIncomeErrorResponse":
        return cls(
            message=e.message,
            monthly_housing_costs=e.monthly_housing_costs,
            monthly_misc_expenses=e.monthly_misc_expenses,
            monthly_take_home=e.monthly_take_home,
        )


class PayoffScenarioResponse(CamelModel):
    name: str
    extra_monthly_payment: Decimal
    final_net_worth: Decimal
    payoff_year: int | None
    payoff_years: Decimal | None
    total_interest_paid: Decimal
    total_tax_savings: Decimal

    @classmethod
    def from_scenario(cls, s: PayoffScenario) -> "PayoffScenarioResponse":
        return cls(**asdict(s))


class RecommendationResponse(CamelModel):
    decision: str
    after_tax_mortgage_rate: Decimal
    spread: Decimal
    reason: str

    @classmethod
    def from_recommendation(cls, r: PayoffRecommendation) -> "RecommendationResponse":
        return cls(
            decision=r.decision.value,
            after_tax_mortgage_rate=r.after_tax_mortgage_rate,
            spread=r.spread,
            reason=r.reason,
        )


class PayoffResponse(CamelModel):
    scenarios: list[PayoffScenarioResponse]  # Best first
    skipped_extra_payments: list[Decimal] = Field(default_factory=list)
    recommendation: RecommendationResponse
