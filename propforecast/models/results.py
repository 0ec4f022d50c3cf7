from dataclasses import dataclass, field
from decimal import Decimal

from propforecast.models.property import PropertyType

UNBOUNDED = Decimal("Infinity")


@dataclass(frozen=True)
class PurchaseCosts:
    transfer_duty: Decimal
    attorney_fees: Decimal
    deeds_office_registration: Decimal
    electronic_transfer_fee: Decimal
    total: Decimal


@dataclass(frozen=True)
class MonthlyExpenses:
    levies: Decimal
    rates_and_taxes: Decimal
    maintenance: Decimal
    total: Decimal


@dataclass(frozen=True)
class YieldMetrics:
    """Annualized yields, expressed as percentages."""
    gross_yield_on_price: Decimal
    gross_yield_on_investment: Decimal
    net_yield_on_price: Decimal
    net_yield_on_investment: Decimal


@dataclass(frozen=True)
class CashFlowMetrics:
    monthly: Decimal
    annual: Decimal


@dataclass(frozen=True)
class ROIHorizon:
    years: int
    appreciation: Decimal
    cash_flow: Decimal
    equity_build: Decimal
    total_return: Decimal
    roi: Decimal  # % of initial investment
    annualized_roi: Decimal  # %


@dataclass(frozen=True)
class ROIProjection:
    five_year: ROIHorizon
    ten_year: ROIHorizon


@dataclass(frozen=True)
class BreakevenResult:
    months: Decimal
    years: Decimal

    @property
    def is_unbounded(self) -> bool:
        return self.months == UNBOUNDED


@dataclass(frozen=True)
class ProjectionPoint:
    """One year of the cumulative-return chart series. Year 0 is the initial outflow."""
    year: int
    appreciation: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")
    equity_build: Decimal = Decimal("0")
    cumulative_return: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")
    principal_repaid: Decimal = Decimal("0")  # exact, from the amortization schedule
    interest_paid: Decimal = Decimal("0")


@dataclass(frozen=True)
class PropertyDetails:
    property_type: PropertyType
    location: str
    bedrooms: int
    bathrooms: Decimal
    purchase_price: Decimal
    total_investment: Decimal  # Purchase price + purchase costs


@dataclass(frozen=True)
class FinancingDetails:
    deposit: Decimal
    loan_amount: Decimal
    interest_rate: Decimal
    loan_term_years: int
    monthly_bond_repayment: Decimal


@dataclass(frozen=True)
class RentalDetails:
    expected_rent: Decimal
    vacancy_rate: Decimal
    effective_rent: Decimal


@dataclass(frozen=True)
class Forecast:
    property_details: PropertyDetails
    financing: FinancingDetails
    purchase_costs: PurchaseCosts
    rental: RentalDetails
    expenses: MonthlyExpenses
    yields: YieldMetrics
    cash_flow: CashFlowMetrics
    roi: ROIProjection
    breakeven: BreakevenResult
    projection: list[ProjectionPoint] = field(default_factory=list)
    investment_summary: str = ""
