"""Rule-based investment summary.

Each metric is graded independently against a threshold ladder and the
sentences are concatenated, followed by an overall verdict. Deterministic:
the same forecast figures always give the same text.
"""

from decimal import Decimal

from propforecast.models.results import (
    BreakevenResult,
    CashFlowMetrics,
    ROIProjection,
    YieldMetrics,
)

# (threshold, sentence): first rung whose threshold the value exceeds wins.
# Figures arrive already rounded (cash flow to cents, yields and ROI to four
# decimal places) and are graded as rounded: a yield of 6.00004% reads as
# 6.0000 and does not clear the 6% rung.
CASH_FLOW_LADDER: tuple[tuple[Decimal, str], ...] = (
    (Decimal("500"), "This property is cash flow positive, generating a healthy monthly surplus."),
    (Decimal("0"), "This property is slightly cash flow positive, covering all expenses with a small margin."),
    (Decimal("-500"), "This property is slightly cash flow negative, requiring a small monthly contribution."),
)
CASH_FLOW_FALLBACK = (
    "This property is significantly cash flow negative, requiring substantial monthly contributions."
)

NET_YIELD_LADDER: tuple[tuple[Decimal, str], ...] = (
    (Decimal("8"), "The net yield is excellent compared to South African market averages."),
    (Decimal("6"), "The net yield is good for the South African market."),
    (Decimal("4"), "The net yield is average for the South African market."),
)
NET_YIELD_FALLBACK = "The net yield is below average for the South African market."

ROI_LADDER: tuple[tuple[Decimal, str], ...] = (
    (Decimal("15"), "The 10-year return on investment projection is very strong."),
    (Decimal("10"), "The 10-year return on investment projection is good."),
    (Decimal("7"), "The 10-year return on investment projection is moderate."),
)
ROI_FALLBACK = "The 10-year return on investment projection is below average."

# Breakeven grades the other way: first rung the value is below wins
BREAKEVEN_LADDER: tuple[tuple[Decimal, str], ...] = (
    (Decimal("5"), "You should recover your initial investment relatively quickly."),
    (Decimal("10"), "The breakeven period is reasonable for a long-term investment."),
    (Decimal("20"), "The breakeven period is quite long, making this a very long-term investment."),
)
BREAKEVEN_FALLBACK = (
    "The breakeven period extends beyond 20 years, raising concerns about this investment."
)

STRONG_VERDICT = "Overall, this property appears to be a strong investment opportunity."
REASONABLE_VERDICT = "Overall, this property appears to be a reasonable investment opportunity."
CASH_FLOW_VERDICT = (
    "This property may be worth considering primarily for its positive cash flow, "
    "despite modest long-term returns."
)
CHALLENGED_VERDICT = (
    "This property presents some investment challenges and may require careful "
    "consideration of future market trends and personal investment goals."
)


def _grade_above(value: Decimal, ladder, fallback: str) -> str:
    for threshold, sentence in ladder:
        if value > threshold:
            return sentence
    return fallback


def _grade_below(value: Decimal, ladder, fallback: str) -> str:
    for threshold, sentence in ladder:
        if value < threshold:
            return sentence
    return fallback


def _verdict(monthly_cash_flow: Decimal, net_yield: Decimal, ten_year_roi: Decimal) -> str:
    if ten_year_roi > 12 and net_yield > 6:
        return STRONG_VERDICT
    if ten_year_roi > 8 and net_yield > 4:
        return REASONABLE_VERDICT
    if monthly_cash_flow > 0:
        return CASH_FLOW_VERDICT
    return CHALLENGED_VERDICT


def generate_investment_summary(
    cash_flow: CashFlowMetrics,
    yields: YieldMetrics,
    roi: ROIProjection,
    breakeven: BreakevenResult,
) -> str:
    net_yield = yields.net_yield_on_investment
    ten_year_roi = roi.ten_year.annualized_roi
    sentences = [
        _grade_above(cash_flow.monthly, CASH_FLOW_LADDER, CASH_FLOW_FALLBACK),
        _grade_above(net_yield, NET_YIELD_LADDER, NET_YIELD_FALLBACK),
        _grade_above(ten_year_roi, ROI_LADDER, ROI_FALLBACK),
        _grade_below(breakeven.years, BREAKEVEN_LADDER, BREAKEVEN_FALLBACK),
        _verdict(cash_flow.monthly, net_yield, ten_year_roi),
    ]
    return " ".join(sentences)
