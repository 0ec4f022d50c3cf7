"""ROI projections: appreciation, equity build, 5/10-year returns, chart series.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from propforecast.engine.debt import ZERO, BondYear, amortization_schedule, yearly_debt_summary
from propforecast.models.results import ProjectionPoint, ROIHorizon, ROIProjection

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")

DEFAULT_APPRECIATION_RATE = Decimal("5")  # % per year
HORIZONS = (5, 10)

# Share of bond repayments assumed to reduce principal. A flat stand-in for
# the amortization split, applied to every year of the horizon whatever the
# loan term; the exact split is reported per year in projection_series.
EQUITY_BUILD_SHARE = Decimal("0.4")


def appreciation(value: Decimal, annual_rate: Decimal, years: int) -> Decimal:
    """Compound growth in value over the period (future value - present value)."""
    future_value = value * (1 + annual_rate / 100) ** years
    return (future_value - value).quantize(TWO_PLACES, ROUND_HALF_UP)


def equity_build_estimate(bond_payment: Decimal, years: int) -> Decimal:
    """Approximate principal repaid: total repayments over the period * 0.4."""
    total_payments = bond_payment * 12 * years
    return (total_payments * EQUITY_BUILD_SHARE).quantize(TWO_PLACES, ROUND_HALF_UP)


def annualized_roi(roi_pct: Decimal, years: int) -> Decimal:
    """(1 + roi/100)^(1/years) - 1, as a percentage.

    Treats the total-return percentage as a growth multiple. A multiple at or
    below zero (total loss or worse) annualizes to -100%.
    """
    multiple = 1 + roi_pct / 100
    if multiple <= 0:
        return Decimal("-100")
    rate = multiple ** (Decimal(1) / Decimal(years)) - 1
    return (rate * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)


def project_horizon(
    deposit: Decimal,
    total_investment: Decimal,
    annual_cash_flow: Decimal,
    bond_payment: Decimal,
    years: int,
    appreciation_rate: Decimal = DEFAULT_APPRECIATION_RATE,
) -> ROIHorizon:
    growth = appreciation(total_investment, appreciation_rate, years)
    cumulative_cash_flow = annual_cash_flow * years
    equity = equity_build_estimate(bond_payment, years)
    total_return = growth + cumulative_cash_flow + equity

    # Reduces to total_investment; kept in this form pending product review.
    initial_investment = deposit + (total_investment - deposit)
    roi = (total_return / initial_investment * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)

    return ROIHorizon(
        years=years,
        appreciation=growth,
        cash_flow=cumulative_cash_flow,
        equity_build=equity,
        total_return=total_return,
        roi=roi,
        annualized_roi=annualized_roi(roi, years),
    )


def project_roi(
    deposit: Decimal,
    total_investment: Decimal,
    annual_cash_flow: Decimal,
    bond_payment: Decimal,
    loan_term_years: int | None = None,
    appreciation_rate: Decimal = DEFAULT_APPRECIATION_RATE,
) -> ROIProjection:
    """5- and 10-year ROI projections.

    loan_term_years travels with the other bond terms but does not enter the
    equity estimate: repayments are counted for every year of each horizon.
    """
    five, ten = (
        project_horizon(
            deposit=deposit,
            total_investment=total_investment,
            annual_cash_flow=annual_cash_flow,
            bond_payment=bond_payment,
            years=years,
            appreciation_rate=appreciation_rate,
        )
        for years in HORIZONS
    )
    return ROIProjection(five_year=five, ten_year=ten)


def projection_series(
    deposit: Decimal,
    total_investment: Decimal,
    purchase_costs_total: Decimal,
    annual_cash_flow: Decimal,
    bond_payment: Decimal,
    loan_amount: Decimal,
    interest_rate: Decimal,
    loan_term_years: int,
    appreciation_rate: Decimal = DEFAULT_APPRECIATION_RATE,
    years: int = HORIZONS[-1],
) -> list[ProjectionPoint]:
    """Year-by-year cumulative return for charting.

    Year 0 is the cash outlay (deposit + purchase costs). Years 1..N use the
    same formulas as project_horizon, so the chart and the ROI table agree.
    loan_balance, principal_repaid and interest_paid are exact figures from the
    amortization schedule; once the bond is paid off they are zero.
    """
    bond_years = yearly_debt_summary(
        amortization_schedule(loan_amount, interest_rate, loan_term_years, hold_years=years)
    )
    paid_off = BondYear(year=0, interest_paid=ZERO, principal_repaid=ZERO, closing_balance=ZERO)

    points = [
        ProjectionPoint(
            year=0,
            cumulative_return=-(deposit + purchase_costs_total),
            loan_balance=loan_amount,
        )
    ]
    for year in range(1, years + 1):
        horizon = project_horizon(
            deposit=deposit,
            total_investment=total_investment,
            annual_cash_flow=annual_cash_flow,
            bond_payment=bond_payment,
            years=year,
            appreciation_rate=appreciation_rate,
        )
        bond = bond_years[year - 1] if year <= len(bond_years) else paid_off
        points.append(ProjectionPoint(
            year=year,
            appreciation=horizon.appreciation,
            cash_flow=horizon.cash_flow,
            equity_build=horizon.equity_build,
            cumulative_return=horizon.total_return,
            loan_balance=bond.closing_balance,
            principal_repaid=bond.principal_repaid,
            interest_paid=bond.interest_paid,
        ))
    return points
