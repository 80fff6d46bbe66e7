"""Canonical test fixtures used across all engine tests.

Fixture: $700K home, 20% down, 6.5% rate, 30yr fixed, vs $2,000/mo rent.
Household: $350K salary, 40% effective tax, $1M available to invest.
"""

import pytest
from decimal import Decimal

from buyrent.models.inputs import ProjectionInputs, default_inputs


@pytest.fixture
def canonical_inputs() -> ProjectionInputs:
    """High-income household with ample savings; no PMI, no extras."""
    return ProjectionInputs(
        annual_salary_before_tax=Decimal("350000"),
        effective_tax_rate=Decimal("40"),
        standard_deduction=Decimal("29200"),
        initial_investment=Decimal("1000000"),
        monthly_misc_expenses=Decimal("1000"),
        home_price=Decimal("700000"),
        down_payment_percent=Decimal("20"),
        effective_mortgage_rate=Decimal("6.5"),
        mortgage_years=30,
        property_tax_rate=Decimal("1.2"),
        monthly_rent=Decimal("2000"),
        home_appreciation=Decimal("4.5"),
        investment_return=Decimal("8"),
        rent_increase=Decimal("3"),
        x_axis_years=30,
    )


@pytest.fixture
def low_down_payment_inputs() -> ProjectionInputs:
    """10% down with PMI; PMI should fall away as the loan amortizes."""
    return default_inputs(
        down_payment_percent=Decimal("10"),
        pmi_rate=Decimal("0.8"),
        annual_salary_before_tax=Decimal("200000"),
    )


@pytest.fixture
def typical_inputs() -> ProjectionInputs:
    """The calculator's out-of-the-box assumptions."""
    return default_inputs()
