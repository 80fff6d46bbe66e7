from decimal import Decimal

from buyrent.engine.tax import (
    capped_mortgage_interest,
    monthly_take_home,
    salt_deduction,
    yearly_tax_savings,
)
from buyrent.models.inputs import InterestCapBasis


class TestMonthlyTakeHome:
    def test_basic(self):
        assert monthly_take_home(Decimal("120000"), Decimal("35")) == Decimal("6500")

    def test_zero_tax(self):
        assert monthly_take_home(Decimal("60000"), Decimal("0")) == Decimal("5000")


class TestCappedMortgageInterest:
    def test_price_under_cap_fully_deductible(self):
        interest = capped_mortgage_interest(
            Decimal("30000"), Decimal("750000"), Decimal("700000"), Decimal("560000")
        )
        assert interest == Decimal("30000")

    def test_price_over_cap_scaled(self):
        """$1.5M home, $750K cap: half the interest is deductible."""
        interest = capped_mortgage_interest(
            Decimal("30000"), Decimal("750000"), Decimal("1500000"), Decimal("1200000")
        )
        assert interest == Decimal("15000")

    def test_loan_balance_basis(self):
        interest = capped_mortgage_interest(
            Decimal("30000"),
            Decimal("750000"),
            Decimal("1500000"),
            Decimal("1000000"),
            InterestCapBasis.LOAN_BALANCE,
        )
        assert interest == Decimal("22500")

    def test_loan_balance_basis_paid_off(self):
        interest = capped_mortgage_interest(
            Decimal("100"), Decimal("750000"), Decimal("1500000"), Decimal("0"),
            InterestCapBasis.LOAN_BALANCE,
        )
        assert interest == Decimal("0")

    def test_no_interest(self):
        interest = capped_mortgage_interest(
            Decimal("0"), Decimal("750000"), Decimal("1500000"), Decimal("0")
        )
        assert interest == Decimal("0")


class TestSaltDeduction:
    def test_uncapped(self):
        salt = salt_deduction(Decimal("15000"), Decimal("2000"), Decimal("10000"), None)
        assert salt == Decimal("27000")

    def test_capped(self):
        salt = salt_deduction(Decimal("15000"), Decimal("2000"), Decimal("10000"), Decimal("10000"))
        assert salt == Decimal("10000")


class TestYearlyTaxSavings:
    def test_itemizing_beats_standard(self):
        """Itemized $28K vs $20K standard at 40%: $3,200 saved."""
        benefit = yearly_tax_savings(
            mortgage_interest=Decimal("20000"),
            property_tax=Decimal("8000"),
            secondary_tax=Decimal("0"),
            standard_deduction=Decimal("20000"),
            deduction_cap=Decimal("750000"),
            home_price=Decimal("700000"),
            tax_rate=Decimal("40"),
        )
        assert benefit.itemized_deductions == Decimal("28000")
        assert benefit.savings == Decimal("3200")

    def test_standard_deduction_wins(self):
        benefit = yearly_tax_savings(
            mortgage_interest=Decimal("5000"),
            property_tax=Decimal("3000"),
            secondary_tax=Decimal("500"),
            standard_deduction=Decimal("20000"),
            deduction_cap=Decimal("750000"),
            home_price=Decimal("300000"),
            tax_rate=Decimal("35"),
        )
        assert benefit.savings == Decimal("0")
        assert benefit.itemized_deductions == Decimal("8500")

    def test_secondary_tax_counts(self):
        without = yearly_tax_savings(
            Decimal("20000"), Decimal("8000"), Decimal("0"), Decimal("20000"),
            Decimal("750000"), Decimal("700000"), Decimal("40"),
        )
        with_secondary = yearly_tax_savings(
            Decimal("20000"), Decimal("8000"), Decimal("1000"), Decimal("20000"),
            Decimal("750000"), Decimal("700000"), Decimal("40"),
        )
        assert with_secondary.savings - without.savings == Decimal("400")

    def test_salt_cap_limits_savings(self):
        benefit = yearly_tax_savings(
            mortgage_interest=Decimal("20000"),
            property_tax=Decimal("12000"),
            secondary_tax=Decimal("0"),
            standard_deduction=Decimal("20000"),
            deduction_cap=Decimal("750000"),
            home_price=Decimal("700000"),
            tax_rate=Decimal("30"),
            state_income_tax=Decimal("8000"),
            salt_cap=Decimal("10000"),
        )
        assert benefit.itemized_deductions == Decimal("30000")
        assert benefit.savings == Decimal("3000")
