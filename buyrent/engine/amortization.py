"""Mortgage amortization, one year at a time.

Pure functions: Decimal in, dataclass out. No I/O. Values stay unrounded;
rounding happens only when snapshots are emitted.
"""

from dataclasses import dataclass
from decimal import Decimal

from buyrent.models.inputs import pct

ZERO = Decimal("0")
MONTHS_PER_YEAR = 12

# A residual below half a cent is retired with the payment that leaves it
PAYOFF_TOLERANCE = Decimal("0.005")


@dataclass(frozen=True)
class YearlyAmortization:
    interest_paid: Decimal
    principal_paid: Decimal
    ending_balance: Decimal
    months_paid: int  # Payments actually made this year (< 12 in the payoff year)

    @property
    def total_paid(self) -> Decimal:
        return self.interest_paid + self.principal_paid


NO_PAYMENTS = YearlyAmortization(ZERO, ZERO, ZERO, 0)


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    """Annual percent (6.5) to periodic monthly rate (0.065 / 12)."""
    return pct(annual_rate_pct) / MONTHS_PER_YEAR


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Fixed monthly payment that retires ``principal`` over ``term_years``."""
    if principal <= 0:
        return ZERO
    n = term_years * MONTHS_PER_YEAR
    r = monthly_rate(annual_rate_pct)
    if r <= 0:
        return principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * (r * factor) / (factor - 1)


def amortize_year(balance: Decimal, payment: Decimal, rate: Decimal) -> YearlyAmortization:
    """Run 12 monthly payments against ``balance``.

    Principal is never more than the outstanding balance, so the loan clamps
    at exactly zero and no payment is made once it is retired.
    """
    if balance <= 0:
        return NO_PAYMENTS

    interest_paid = ZERO
    principal_paid = ZERO
    months_paid = 0

    for _ in range(MONTHS_PER_YEAR):
        if balance <= 0:
            break
        interest = balance * rate
        principal = min(max(payment - interest, ZERO), balance)
        if balance - principal < PAYOFF_TOLERANCE:
            principal = balance

        interest_paid += interest
        principal_paid += principal
        balance -= principal
        months_paid += 1

    return YearlyAmortization(
        interest_paid=interest_paid,
        principal_paid=principal_paid,
        ending_balance=balance,
        months_paid=months_paid,
    )


def payoff_month(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
    extra_payment: Decimal = ZERO,
) -> int | None:
    """Month number (1-indexed) of the payment that retires the loan.

    ``extra_payment`` is added to every scheduled payment. Returns None if the
    loan is not retired within the term.
    """
    if principal <= 0:
        return 0
    payment = monthly_payment(principal, annual_rate_pct, term_years) + extra_payment
    rate = monthly_rate(annual_rate_pct)
    balance = principal

    for year in range(term_years):
        amort = amortize_year(balance, payment, rate)
        balance = amort.ending_balance
        if balance <= 0:
            return year * MONTHS_PER_YEAR + amort.months_paid
    return None
