from decimal import Decimal

CANONICAL_PAYLOAD = {
    "property_type": "apartment",
    "location": "Sea Point, Cape Town",
    "bedrooms": 2,
    "bathrooms": "1",
    "purchase_price": "1200000",
    "deposit": "200000",
    "interest_rate": "10.75",
    "loan_term_years": 20,
    "monthly_levies": "1500",
    "monthly_rates": "800",
    "expected_rent": "9000",
    "vacancy_rate": "5",
    "maintenance_pct": "1",
}

POSITIVE_PAYLOAD = {
    **CANONICAL_PAYLOAD,
    "property_type": "house",
    "purchase_price": "1000000",
    "deposit": "900000",
    "interest_rate": "10",
    "monthly_levies": "0",
    "monthly_rates": "0",
    "expected_rent": "12000",
    "vacancy_rate": "0",
    "maintenance_pct": "0",
}


class TestHealth:
    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestDefaults:
    def test_form_defaults(self, client):
        resp = client.get("/api/v1/forecast/defaults")
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(str(data["purchase_price"])) == Decimal("1200000")
        assert Decimal(str(data["interest_rate"])) == Decimal("10.75")
        assert data["loan_term_years"] == 20
        assert data["property_type"] == "apartment"


class TestForecast:
    def test_canonical(self, client):
        resp = client.post("/api/v1/forecast", json=CANONICAL_PAYLOAD)
        assert resp.status_code == 200
        data = resp.json()
        assert data["property_details"]["property_type"] == "apartment"
        assert data["property_details"]["location"] == "Sea Point, Cape Town"
        assert Decimal(str(data["purchase_costs"]["total"])) == Decimal("28735.00")
        assert Decimal(str(data["financing"]["loan_amount"])) == Decimal("1000000")
        assert len(data["projection"]) == 11
        assert Decimal(str(data["projection"][1]["principal_repaid"])) > 0
        assert "significantly cash flow negative" in data["investment_summary"]

    def test_unbounded_breakeven(self, client):
        data = client.post("/api/v1/forecast", json=CANONICAL_PAYLOAD).json()
        assert data["breakeven"] == {"months": None, "years": None, "is_unbounded": True}

    def test_bounded_breakeven(self, client):
        data = client.post("/api/v1/forecast", json=POSITIVE_PAYLOAD).json()
        assert data["breakeven"]["months"] == 84
        assert Decimal(str(data["breakeven"]["years"])) == Decimal("7")
        assert data["breakeven"]["is_unbounded"] is False

    def test_roi_horizons(self, client):
        data = client.post("/api/v1/forecast", json=CANONICAL_PAYLOAD).json()
        assert data["roi"]["five_year"]["years"] == 5
        assert data["roi"]["ten_year"]["years"] == 10

    def test_deposit_at_price_rejected(self, client):
        resp = client.post(
            "/api/v1/forecast", json={**CANONICAL_PAYLOAD, "deposit": "1200000"}
        )
        assert resp.status_code == 400
        assert "deposit" in resp.json()["detail"]

    def test_vacancy_over_100_rejected(self, client):
        resp = client.post(
            "/api/v1/forecast", json={**CANONICAL_PAYLOAD, "vacancy_rate": "120"}
        )
        assert resp.status_code == 400
        assert "vacancy_rate" in resp.json()["detail"]

    def test_excessive_term_rejected(self, client):
        resp = client.post(
            "/api/v1/forecast", json={**CANONICAL_PAYLOAD, "loan_term_years": 100_000_000}
        )
        assert resp.status_code == 400
        assert "loan_term_years" in resp.json()["detail"]

    def test_unknown_property_type(self, client):
        resp = client.post(
            "/api/v1/forecast", json={**CANONICAL_PAYLOAD, "property_type": "castle"}
        )
        assert resp.status_code == 400

    def test_missing_required_field(self, client):
        payload = {k: v for k, v in CANONICAL_PAYLOAD.items() if k != "purchase_price"}
        resp = client.post("/api/v1/forecast", json=payload)
        assert resp.status_code == 422


class TestListingForecast:
    def test_property24(self, client):
        resp = client.post(
            "/api/v1/forecast/listing",
            json={"url": "https://www.property24.com/for-sale/sandton/johannesburg/gauteng/116/1"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["property_details"]["location"] == "Sandton, Johannesburg"
        assert Decimal(str(data["financing"]["loan_amount"])) == Decimal("1125000")

    def test_invalid_url(self, client):
        resp = client.post("/api/v1/forecast/listing", json={"url": "https://example.com/x"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Please enter a URL from Property24 or PrivateProperty"
