from dataclasses import fields, replace
from decimal import Decimal

import pytest

from buyrent.engine.amortization import monthly_rate
from buyrent.engine.projection import project, scheduled_payment, step, to_whole
from buyrent.models.inputs import default_inputs
from buyrent.models.results import (
    InsufficientMonthlyIncome,
    InsufficientUpfrontCapital,
    Projection,
    YearlySnapshot,
)
from buyrent.models.state import initial_state

CURRENCY_FIELDS = [f.name for f in fields(YearlySnapshot) if f.name != "year"]


@pytest.fixture
def canonical_result(canonical_inputs) -> Projection:
    result = project(canonical_inputs)
    assert isinstance(result, Projection)
    return result


class TestToWhole:
    def test_half_rounds_away_from_zero(self):
        assert to_whole(Decimal("2.5")) == Decimal("3")
        assert to_whole(Decimal("-2.5")) == Decimal("-3")

    def test_idempotent(self):
        once = to_whole(Decimal("1234.5678"))
        assert to_whole(once) == once


class TestCanonicalProjection:
    def test_snapshot_count(self, canonical_result):
        assert len(canonical_result.snapshots) == 31
        assert [s.year for s in canonical_result.snapshots] == list(range(31))

    def test_year_zero(self, canonical_result):
        """$1M saved, $140K down: buying starts at $860K invested + $140K equity."""
        s = canonical_result.snapshots[0]
        assert s.home_value == Decimal("700000")
        assert s.remaining_loan == Decimal("560000")
        assert s.home_equity == Decimal("140000")
        assert s.investments_buying == Decimal("860000")
        assert s.buying == Decimal("1000000")
        assert s.renting == Decimal("1000000")
        assert s.annual_rent_costs == Decimal("24000")

    def test_year_one_loan_reduced(self, canonical_result):
        """Some principal is retired, but less than a straight-line 1/30 of the loan."""
        s = canonical_result.snapshots[1]
        floor = Decimal("560000") * (1 - Decimal(1) / 30)
        assert floor < s.remaining_loan < Decimal("560000")
        assert s.home_value == Decimal("731500")  # 4.5% appreciation
        assert s.monthly_rent == Decimal("2060")  # 3% increase

    def test_loan_never_increases(self, canonical_result):
        loans = [s.remaining_loan for s in canonical_result.snapshots]
        for i in range(1, len(loans)):
            assert loans[i] <= loans[i - 1]

    def test_paid_off_at_term(self, canonical_result):
        assert canonical_result.snapshots[29].remaining_loan > 0
        assert canonical_result.final.remaining_loan == Decimal("0")
        assert canonical_result.final.home_equity == canonical_result.final.home_value

    def test_equity_identity(self, canonical_result):
        for s in canonical_result.snapshots:
            assert s.home_equity == s.home_value - s.remaining_loan

    def test_whole_currency_units(self, canonical_result):
        for s in canonical_result.snapshots:
            for name in CURRENCY_FIELDS:
                value = getattr(s, name)
                assert value == to_whole(value), f"year {s.year} {name}={value}"

    def test_deterministic(self, canonical_inputs, canonical_result):
        assert project(canonical_inputs) == canonical_result

    def test_itemizing_saves_tax_early(self, canonical_result):
        """~$36K interest + $8.4K property tax clears the $29.2K standard deduction."""
        s = canonical_result.snapshots[0]
        assert s.total_itemized_deductions > Decimal("29200")
        assert s.yearly_tax_savings > 0

    def test_no_tax_savings_after_payoff(self, canonical_inputs):
        result = project(replace(canonical_inputs, x_axis_years=35))
        for s in result.snapshots[31:]:
            assert s.yearly_tax_savings == Decimal("0")

    def test_no_pmi_at_twenty_percent(self, canonical_result):
        assert all(s.monthly_pmi == 0 for s in canonical_result.snapshots)


class TestHorizon:
    def test_display_horizon_beyond_term(self, canonical_inputs):
        result = project(replace(canonical_inputs, x_axis_years=35))
        assert len(result.snapshots) == 36
        for s in result.snapshots[30:]:
            assert s.remaining_loan == Decimal("0")
            assert s.yearly_interest_paid == Decimal("0")
            assert s.yearly_principal_paid == Decimal("0")

    def test_short_display_still_runs_full_term(self, canonical_inputs):
        result = project(replace(canonical_inputs, x_axis_years=10))
        assert len(result.snapshots) == 31


class TestPMI:
    def test_pmi_falls_away(self, low_down_payment_inputs):
        result = project(low_down_payment_inputs)
        pmi = [s.monthly_pmi for s in result.snapshots]

        assert pmi[0] == Decimal("240")  # 360000 * 0.8% / 12
        assert pmi[-1] == Decimal("0")
        first_zero = pmi.index(Decimal("0"))
        assert all(p == 0 for p in pmi[first_zero:])


class TestQualityOfLife:
    def test_credited_from_year_one(self, canonical_inputs):
        base = project(canonical_inputs)
        with_qol = project(replace(canonical_inputs, monthly_quality_of_life=Decimal("800")))

        assert with_qol.snapshots[0].buying == base.snapshots[0].buying
        for a, b in zip(with_qol.snapshots[1:], base.snapshots[1:]):
            assert a.buying - b.buying == Decimal("9600")
            assert a.investments_buying == b.investments_buying


class TestEdgeCases:
    def test_zero_rate_linear_amortization(self, canonical_inputs):
        """$560K over 360 months at 0% retires $18,666.67 a year."""
        result = project(replace(canonical_inputs, effective_mortgage_rate=Decimal("0")))
        assert result.snapshots[1].remaining_loan == Decimal("541333")
        assert all(s.yearly_interest_paid == 0 for s in result.snapshots)
        assert result.final.remaining_loan == Decimal("0")

    def test_all_cash_purchase(self, canonical_inputs):
        inputs = replace(canonical_inputs, down_payment_percent=Decimal("100"))
        result = project(inputs)

        assert scheduled_payment(inputs) == Decimal("0")
        for s in result.snapshots:
            assert s.remaining_loan == Decimal("0")
            assert s.yearly_interest_paid == Decimal("0")
            assert s.home_equity == s.home_value
        assert result.snapshots[0].investments_buying == Decimal("300000")

    def test_extra_payment_retires_loan_sooner(self, canonical_inputs):
        result = project(canonical_inputs.with_extra_payment(Decimal("2000")))
        assert result.snapshots[20].remaining_loan == Decimal("0")

    def test_upfront_rejection(self):
        result = project(default_inputs(initial_investment=Decimal("1000")))
        assert isinstance(result, InsufficientUpfrontCapital)

    def test_income_rejection(self):
        result = project(default_inputs(annual_salary_before_tax=Decimal("30000")))
        assert isinstance(result, InsufficientMonthlyIncome)


class TestStep:
    def test_advances_one_year(self, canonical_inputs):
        state = initial_state(canonical_inputs)
        payment = scheduled_payment(canonical_inputs)
        rate = monthly_rate(canonical_inputs.effective_mortgage_rate)

        snapshot, nxt = step(state, canonical_inputs, payment, rate)

        assert snapshot.year == 0
        assert nxt.year == 1
        assert nxt.loan_balance < state.loan_balance
        assert nxt.investments_renting > state.investments_renting
        assert nxt.investments_buying > state.investments_buying

    def test_state_not_mutated(self, canonical_inputs):
        state = initial_state(canonical_inputs)
        payment = scheduled_payment(canonical_inputs)
        rate = monthly_rate(canonical_inputs.effective_mortgage_rate)

        step(state, canonical_inputs, payment, rate)
        assert state == initial_state(canonical_inputs)
