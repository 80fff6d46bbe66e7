"""Monthly compounding of investment balances within a year."""

from decimal import Decimal

from buyrent.engine.amortization import MONTHS_PER_YEAR, monthly_rate


def compound_year(balance: Decimal, annual_contribution: Decimal, annual_return_pct: Decimal) -> Decimal:
    """Contribute 1/12 of ``annual_contribution`` each month, then apply that month's return.

    Contribution precedes growth, so each month's deposit earns that month's return.
    """
    contribution = annual_contribution / MONTHS_PER_YEAR
    growth = 1 + monthly_rate(annual_return_pct)
    for _ in range(MONTHS_PER_YEAR):
        balance += contribution
        balance *= growth
    return balance
