"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ---- Request schemas ----

class ForecastRequest(BaseModel):
    property_type: str = Field("apartment", description="apartment, house, townhouse or duplex")
    location: str = ""
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("1")

    purchase_price: Decimal = Field(..., description="Purchase price in Rands")
    deposit: Decimal = Decimal("0")
    interest_rate: Decimal = Field(..., description="Annual interest rate in %, e.g. 10.75")
    loan_term_years: int = 20

    monthly_levies: Decimal = Decimal("0")
    monthly_rates: Decimal = Decimal("0")
    expected_rent: Decimal = Field(..., description="Expected monthly rent in Rands")
    vacancy_rate: Decimal = Field(Decimal("5"), description="Vacancy in %")
    maintenance_pct: Decimal = Field(Decimal("1"), description="Annual maintenance, % of price")


class ListingRequest(BaseModel):
    url: str = Field(..., description="Property24 or PrivateProperty listing URL")


# ---- Response schemas ----

class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PropertyDetailsResponse(_FromEngine):
    property_type: str
    location: str
    bedrooms: int
    bathrooms: Decimal
    purchase_price: Decimal
    total_investment: Decimal


class FinancingResponse(_FromEngine):
    deposit: Decimal
    loan_amount: Decimal
    interest_rate: Decimal
    loan_term_years: int
    monthly_bond_repayment: Decimal


class PurchaseCostsResponse(_FromEngine):
    transfer_duty: Decimal
    attorney_fees: Decimal
    deeds_office_registration: Decimal
    electronic_transfer_fee: Decimal
    total: Decimal


class RentalResponse(_FromEngine):
    expected_rent: Decimal
    vacancy_rate: Decimal
    effective_rent: Decimal


class ExpensesResponse(_FromEngine):
    levies: Decimal
    rates_and_taxes: Decimal
    maintenance: Decimal
    total: Decimal


class YieldsResponse(_FromEngine):
    gross_yield_on_price: Decimal
    gross_yield_on_investment: Decimal
    net_yield_on_price: Decimal
    net_yield_on_investment: Decimal


class CashFlowResponse(_FromEngine):
    monthly: Decimal
    annual: Decimal


class ROIHorizonResponse(_FromEngine):
    years: int
    appreciation: Decimal
    cash_flow: Decimal
    equity_build: Decimal
    total_return: Decimal
    roi: Decimal
    annualized_roi: Decimal


class ROIProjectionResponse(_FromEngine):
    five_year: ROIHorizonResponse
    ten_year: ROIHorizonResponse


class BreakevenResponse(BaseModel):
    months: int | None = None  # None when cash flow never recovers the outlay
    years: Decimal | None = None
    is_unbounded: bool = False


class ProjectionPointResponse(_FromEngine):
    year: int
    appreciation: Decimal
    cash_flow: Decimal
    equity_build: Decimal
    cumulative_return: Decimal
    loan_balance: Decimal
    principal_repaid: Decimal
    interest_paid: Decimal


class ForecastResponse(BaseModel):
    property_details: PropertyDetailsResponse
    financing: FinancingResponse
    purchase_costs: PurchaseCostsResponse
    rental: RentalResponse
    expenses: ExpensesResponse
    yields: YieldsResponse
    cash_flow: CashFlowResponse
    roi: ROIProjectionResponse
    breakeven: BreakevenResponse
    projection: list[ProjectionPointResponse] = []
    investment_summary: str
