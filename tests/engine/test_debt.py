from decimal import Decimal

from propforecast.engine.debt import monthly_payment, amortization_schedule, yearly_debt_summary


def _formula(principal: float, annual_rate_pct: float, term_years: int) -> float:
    r = annual_rate_pct / 1200
    n = term_years * 12
    return principal * r * (1 + r) ** n / ((1 + r) ** n - 1)


class TestMonthlyPayment:
    def test_standard_bond(self):
        """R1M bond at 10.75% over 20 years."""
        pmt = monthly_payment(Decimal("1000000"), Decimal("10.75"), 20)
        assert abs(float(pmt) - _formula(1000000, 10.75, 20)) < 1
        assert Decimal("10150") < pmt < Decimal("10155")

    def test_quantized_to_cents(self):
        pmt = monthly_payment(Decimal("1125000"), Decimal("10.5"), 20)
        assert pmt == pmt.quantize(Decimal("0.01"))

    def test_zero_rate(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 30)
        assert pmt == Decimal("1000.00")

    def test_zero_rate_is_straight_line(self):
        for principal, term in [(Decimal("120000"), 10), (Decimal("480000"), 20)]:
            assert monthly_payment(principal, Decimal("0"), term) == principal / (term * 12)

    def test_zero_rate_uneven_principal_rounds_to_cents(self):
        # 100,000 / 240 = 416.666...
        pmt = monthly_payment(Decimal("100000"), Decimal("0"), 20)
        assert pmt == Decimal("416.67")
        assert abs(pmt - Decimal("100000") / 240) < Decimal("0.005")

    def test_zero_principal(self):
        pmt = monthly_payment(Decimal("0"), Decimal("10.75"), 20)
        assert pmt == Decimal("0")


class TestAmortizationSchedule:
    def test_month_count(self):
        schedule = amortization_schedule(Decimal("1000000"), Decimal("10.75"), 20)
        assert len(schedule) == 240
        assert schedule[0].month == 1

    def test_partial_schedule(self):
        schedule = amortization_schedule(
            Decimal("1000000"), Decimal("10.75"), 20, hold_years=10
        )
        assert len(schedule) == 120

    def test_hold_capped_at_term(self):
        schedule = amortization_schedule(
            Decimal("120000"), Decimal("0"), 5, hold_years=10
        )
        assert len(schedule) == 60
        assert schedule[-1].balance == Decimal("0")

    def test_first_month_mostly_interest(self):
        schedule = amortization_schedule(Decimal("1000000"), Decimal("10.75"), 20)
        first = schedule[0]
        # 1,000,000 * 10.75% / 12
        assert first.interest == Decimal("8958.33")
        assert first.capital == monthly_payment(
            Decimal("1000000"), Decimal("10.75"), 20
        ) - first.interest
        assert first.capital < first.interest

    def test_balance_decreases(self):
        schedule = amortization_schedule(Decimal("1000000"), Decimal("10.75"), 20)
        for prev, cur in zip(schedule, schedule[1:]):
            assert cur.balance < prev.balance

    def test_full_term_clears_the_bond(self):
        schedule = amortization_schedule(Decimal("1000000"), Decimal("10.75"), 20)
        assert schedule[-1].balance == Decimal("0")
        assert sum(m.capital for m in schedule) == Decimal("1000000")

    def test_zero_rate_uneven_principal_clears(self):
        # 100,000 / 240 rounds up to 416.67, so the last month pays less
        schedule = amortization_schedule(Decimal("100000"), Decimal("0"), 20)
        assert all(m.interest == Decimal("0") for m in schedule)
        assert schedule[-1].balance == Decimal("0")
        assert schedule[-1].capital < Decimal("416.67")


class TestYearlyDebtSummary:
    def test_ten_year_summary(self):
        schedule = amortization_schedule(
            Decimal("1000000"), Decimal("10.75"), 20, hold_years=10
        )
        yearly = yearly_debt_summary(schedule)
        assert [y.year for y in yearly] == list(range(1, 11))

    def test_yearly_totals_match_schedule(self):
        schedule = amortization_schedule(
            Decimal("1000000"), Decimal("10.75"), 20, hold_years=10
        )
        yearly = yearly_debt_summary(schedule)
        assert sum(y.interest_paid for y in yearly) == sum(m.interest for m in schedule)
        assert sum(y.principal_repaid for y in yearly) == sum(m.capital for m in schedule)
        assert yearly[-1].closing_balance == schedule[-1].balance

    def test_principal_share_grows_each_year(self):
        yearly = yearly_debt_summary(
            amortization_schedule(Decimal("1000000"), Decimal("10.75"), 20)
        )
        for prev, cur in zip(yearly, yearly[1:]):
            assert cur.principal_repaid > prev.principal_repaid
            assert cur.interest_paid < prev.interest_paid

    def test_balance_reconciles(self):
        yearly = yearly_debt_summary(
            amortization_schedule(Decimal("1000000"), Decimal("10.75"), 20, hold_years=5)
        )
        repaid = sum(y.principal_repaid for y in yearly)
        assert yearly[-1].closing_balance == Decimal("1000000") - repaid
