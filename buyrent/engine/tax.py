"""Income tax effects of ownership: take-home pay and itemized deductions.

Pure functions: Decimal in, dataclasses out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from buyrent.models.inputs import InterestCapBasis, pct

ZERO = Decimal("0")
ONE = Decimal("1")


@dataclass(frozen=True)
class TaxBenefit:
    savings: Decimal  # Tax saved versus taking the standard deduction
    itemized_deductions: Decimal


def monthly_take_home(annual_salary: Decimal, income_tax_rate: Decimal) -> Decimal:
    """Salary after effective income tax, per month."""
    return annual_salary * (1 - pct(income_tax_rate)) / 12


def capped_mortgage_interest(
    interest_paid: Decimal,
    deduction_cap: Decimal,
    home_price: Decimal,
    loan_balance: Decimal,
    basis: InterestCapBasis = InterestCapBasis.HOME_PRICE,
) -> Decimal:
    """Deductible share of mortgage interest under the acquisition-debt cap.

    HOME_PRICE scales by cap / original price; LOAN_BALANCE scales by the
    share of the current balance that sits under the cap.
    """
    if interest_paid <= 0:
        return ZERO
    if basis is InterestCapBasis.LOAN_BALANCE:
        if loan_balance <= 0:
            return ZERO
        return interest_paid * min(loan_balance, deduction_cap) / loan_balance
    if home_price <= 0:
        return interest_paid
    return interest_paid * min(ONE, deduction_cap / home_price)


def salt_deduction(
    property_tax: Decimal,
    secondary_tax: Decimal,
    state_income_tax: Decimal,
    salt_cap: Decimal | None,
) -> Decimal:
    """State and local taxes, limited by the SALT cap when one applies."""
    total = property_tax + secondary_tax + state_income_tax
    if salt_cap is None:
        return total
    return min(total, salt_cap)


def yearly_tax_savings(
    mortgage_interest: Decimal,
    property_tax: Decimal,
    secondary_tax: Decimal,
    standard_deduction: Decimal,
    deduction_cap: Decimal,
    home_price: Decimal,
    tax_rate: Decimal,
    loan_balance: Decimal = ZERO,
    state_income_tax: Decimal = ZERO,
    salt_cap: Decimal | None = None,
    cap_basis: InterestCapBasis = InterestCapBasis.HOME_PRICE,
) -> TaxBenefit:
    """Tax saved by itemizing instead of taking the standard deduction.

    Args:
        mortgage_interest: Interest paid this year
        property_tax: Annual property tax on the assessed value
        secondary_tax: Annual secondary assessment (Mello-Roos) tax
        standard_deduction: This year's (inflation-adjusted) standard deduction
        deduction_cap: Mortgage principal eligible for the interest deduction
        home_price: Original purchase price
        tax_rate: Effective federal rate, percent
        loan_balance: Balance at the start of the year (LOAN_BALANCE basis)
        state_income_tax: State income tax paid this year
        salt_cap: Cap on state and local taxes, None for uncapped
    """
    interest = capped_mortgage_interest(
        mortgage_interest, deduction_cap, home_price, loan_balance, cap_basis
    )
    itemized = interest + salt_deduction(property_tax, secondary_tax, state_income_tax, salt_cap)
    benefit = max(ZERO, itemized - standard_deduction)
    return TaxBenefit(savings=benefit * pct(tax_rate), itemized_deductions=itemized)
