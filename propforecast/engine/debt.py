"""Bond repayment and the month-by-month split of each repayment.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

# Repayments and interest charges are rounded to cents, as a bank statement
# shows them. A zero-rate bond therefore pays principal / months to the
# nearest cent, and the last month absorbs the rounding residue.
CENTS = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class BondMonth:
    month: int
    interest: Decimal
    capital: Decimal  # principal repaid this month
    balance: Decimal  # outstanding after this month's repayment


@dataclass(frozen=True)
class BondYear:
    year: int
    interest_paid: Decimal
    principal_repaid: Decimal
    closing_balance: Decimal


def _cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, ROUND_HALF_UP)


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Fixed monthly bond repayment, rounded to cents.

    annual_rate is a percentage (10.75 for 10.75%).
    """
    if principal <= 0:
        return ZERO

    r = annual_rate / 1200
    n = term_years * 12
    if r == 0:
        return _cents(principal / n)

    growth = (1 + r) ** n
    return _cents(principal * r * growth / (growth - 1))


def amortization_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
    hold_years: int | None = None,
) -> list[BondMonth]:
    """Split each repayment into interest and capital.

    Covers the whole term, or the first hold_years of it.
    """
    payment = monthly_payment(principal, annual_rate, term_years)
    r = annual_rate / 1200
    last_month = term_years * 12
    months = last_month if hold_years is None else min(hold_years, term_years) * 12

    balance = _cents(max(principal, ZERO))
    schedule: list[BondMonth] = []
    for month in range(1, months + 1):
        interest = _cents(balance * r)
        capital = min(payment - interest, balance)
        if month == last_month:
            capital = balance
        balance -= capital
        schedule.append(BondMonth(month=month, interest=interest, capital=capital, balance=balance))
    return schedule


def yearly_debt_summary(schedule: list[BondMonth]) -> list[BondYear]:
    """Roll a monthly schedule up into bond years (months 1-12 are year 1)."""
    summary = []
    for start in range(0, len(schedule), 12):
        months = schedule[start:start + 12]
        summary.append(BondYear(
            year=start // 12 + 1,
            interest_paid=sum((m.interest for m in months), ZERO),
            principal_repaid=sum((m.capital for m in months), ZERO),
            closing_balance=months[-1].balance,
        ))
    return summary
