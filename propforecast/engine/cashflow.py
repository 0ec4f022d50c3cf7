"""Running costs, vacancy-adjusted rent, yields and cash flow.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from propforecast.models.results import CashFlowMetrics, MonthlyExpenses, YieldMetrics

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def monthly_expenses(
    purchase_price: Decimal,
    monthly_levies: Decimal,
    monthly_rates: Decimal,
    maintenance_pct: Decimal,
) -> MonthlyExpenses:
    """Monthly running costs. Maintenance is an annual % of the purchase price."""
    maintenance = (purchase_price * maintenance_pct / 100 / 12).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
    return MonthlyExpenses(
        levies=monthly_levies,
        rates_and_taxes=monthly_rates,
        maintenance=maintenance,
        total=monthly_levies + monthly_rates + maintenance,
    )


def effective_rental_income(expected_rent: Decimal, vacancy_rate: Decimal) -> Decimal:
    """Monthly rent after allowing for vacancy (vacancy_rate in %)."""
    return (expected_rent * (1 - vacancy_rate / 100)).quantize(TWO_PLACES, ROUND_HALF_UP)


def _pct_of(annual_amount: Decimal, basis: Decimal) -> Decimal:
    return (annual_amount / basis * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)


def yields(
    purchase_price: Decimal,
    total_investment: Decimal,
    expected_rent: Decimal,
    effective_rent: Decimal,
    monthly_expenses: Decimal,
) -> YieldMetrics:
    """Gross and net yields on purchase price and on total investment.

    Gross uses the full expected rent; net uses vacancy-adjusted rent less
    running costs (before bond repayments).
    """
    gross_annual = expected_rent * 12
    net_annual = (effective_rent - monthly_expenses) * 12
    return YieldMetrics(
        gross_yield_on_price=_pct_of(gross_annual, purchase_price),
        gross_yield_on_investment=_pct_of(gross_annual, total_investment),
        net_yield_on_price=_pct_of(net_annual, purchase_price),
        net_yield_on_investment=_pct_of(net_annual, total_investment),
    )


def cash_flow(
    effective_rent: Decimal, monthly_expenses: Decimal, bond_payment: Decimal
) -> CashFlowMetrics:
    """Net cash flow = effective rent - expenses - bond repayment."""
    monthly = effective_rent - monthly_expenses - bond_payment
    return CashFlowMetrics(monthly=monthly, annual=monthly * 12)
