from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from buyrent.models.inputs import ProjectionInputs, default_inputs, pct


class TestPct:
    def test_whole_percent(self):
        assert pct(Decimal("6.5")) == Decimal("0.065")


class TestDerivedValues:
    def test_canonical(self, canonical_inputs):
        assert canonical_inputs.down_payment == Decimal("140000")
        assert canonical_inputs.loan_amount == Decimal("560000")
        assert canonical_inputs.upfront_cash_required == Decimal("140000")
        assert canonical_inputs.horizon_years == 30

    def test_closing_and_moving(self, typical_inputs):
        assert typical_inputs.closing_costs == Decimal("10000")
        assert typical_inputs.upfront_cash_required == Decimal("93500")

    def test_state_tax_combined(self):
        inputs = default_inputs(effective_state_income_tax_rate=Decimal("5"))
        assert inputs.combined_income_tax_rate == Decimal("40")

    def test_horizon_is_longer_of_term_and_display(self):
        assert default_inputs(mortgage_years=15, x_axis_years=30).horizon_years == 30
        assert default_inputs(mortgage_years=30, x_axis_years=10).horizon_years == 30


class TestValidation:
    @pytest.mark.parametrize("field,value", [
        ("mortgage_years", 0),
        ("x_axis_years", 0),
        ("down_payment_percent", Decimal("101")),
        ("down_payment_percent", Decimal("-1")),
        ("home_price", Decimal("-1")),
        ("monthly_rent", Decimal("-100")),
        ("extra_monthly_payment", Decimal("-5")),
        ("salt_cap", Decimal("-1")),
    ])
    def test_rejects(self, field, value):
        with pytest.raises(ValueError):
            default_inputs(**{field: value})

    def test_unknown_override(self):
        with pytest.raises(ValueError, match="bogus"):
            default_inputs(bogus=Decimal("1"))


class TestImmutability:
    def test_frozen(self, canonical_inputs):
        with pytest.raises(FrozenInstanceError):
            canonical_inputs.home_price = Decimal("1")

    def test_hashable(self, canonical_inputs):
        assert hash(canonical_inputs) == hash(canonical_inputs.with_extra_payment(Decimal("0")))

    def test_with_extra_payment(self, canonical_inputs):
        updated = canonical_inputs.with_extra_payment(Decimal("500"))
        assert isinstance(updated, ProjectionInputs)
        assert updated.extra_monthly_payment == Decimal("500")
        assert canonical_inputs.extra_monthly_payment == Decimal("0")
