"""Tests for the HTTP API."""

DEAL = {
    "assetType": "multifamily",
    "market": "Chicago",
    "investmentAmount": 4_000_000,
    "expectedReturn": 9,
    "riskProfile": "moderate",
}


async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestInvestorMatchEndpoint:
    """Tests for POST /api/investor-match."""

    async def test_match(self, client):
        response = await client.post("/api/investor-match", json=DEAL)
        assert response.status_code == 200
        data = response.json()
        assert [m["investorId"] for m in data["matches"]] == ["INV004", "INV005", "INV003"]
        assert data["matches"][0]["matchScore"] == 90
        assert data["matches"][0]["matchDetails"]["riskProfileMatch"] is False
        assert data["totalMatches"] == 4

    async def test_mixed_case_asset_type(self, client):
        response = await client.post("/api/investor-match", json={**DEAL, "assetType": "MULTIFAMILY"})
        data = response.json()
        assert data["deal"]["assetType"] == "multifamily"
        assert data["matches"][0]["matchDetails"]["assetTypeMatch"] is True

    async def test_extra_fields_echoed(self, client):
        response = await client.post("/api/investor-match", json={**DEAL, "sponsor": "Acme"})
        assert response.json()["deal"]["sponsor"] == "Acme"

    async def test_missing_market(self, client):
        deal = {k: v for k, v in DEAL.items() if k != "market"}
        response = await client.post("/api/investor-match", json=deal)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required field: market", "field": "market"}

    async def test_invalid_json(self, client):
        response = await client.post(
            "/api/investor-match",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "error" in response.json()

    async def test_nan_return_rejected(self, client):
        response = await client.post(
            "/api/investor-match",
            content='{"assetType":"multifamily","market":"Chicago","investmentAmount":4000000,'
                    '"expectedReturn":NaN,"riskProfile":"moderate"}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "error": "Invalid value for field: expectedReturn",
            "field": "expectedReturn",
        }

    async def test_infinite_amount_rejected(self, client):
        response = await client.post(
            "/api/investor-match",
            content='{"assetType":"multifamily","market":"Chicago","investmentAmount":Infinity,'
                    '"expectedReturn":9,"riskProfile":"moderate"}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["field"] == "investmentAmount"

    async def test_deal_echoed_as_sent(self, client):
        response = await client.post("/api/investor-match", json={**DEAL, "expectedReturn": "9"})
        assert response.status_code == 200
        deal = response.json()["deal"]
        assert deal["expectedReturn"] == "9"
        assert deal["investmentAmount"] == 4_000_000


class TestReferenceEndpoints:
    """Tests for the reference-data endpoints."""

    async def test_list_investors(self, client):
        response = await client.get("/api/investors")
        assert response.status_code == 200
        investors = response.json()
        assert len(investors) == 5
        assert investors[3]["name"] == "Greystar Real Estate"
        assert investors[3]["preferredAssetTypes"] == ["multifamily", "student housing"]

    async def test_market_comparison(self, client):
        response = await client.get(
            "/api/market-comparison",
            params={"city": "Chicago", "assetType": "Office", "capRate": "7.5"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["assetType"] == "office"
        assert data["marketAverages"]["averageCapRate"] == 6.8
        assert "averagePricePerUnit" not in data["marketAverages"]
        assert data["comparison"]["capRate"]["isBetterThanMarket"] is False
        assert data["marketContext"]["marketTrend"] == "Declining market"

    async def test_market_comparison_requires_params(self, client):
        response = await client.get("/api/market-comparison", params={"city": "Chicago"})
        assert response.status_code == 400
        assert response.json() == {"error": "City and assetType parameters are required"}

    async def test_market_comparison_unknown_city(self, client):
        response = await client.get(
            "/api/market-comparison",
            params={"city": "Boise", "assetType": "office"},
        )
        assert response.status_code == 404
        assert response.json()["error"] == "Market data not available for city: Boise"

    async def test_supported_cities(self, client):
        response = await client.get("/api/supported-cities")
        assert response.status_code == 200
        assert "dallas" in response.json()["supportedCities"]

    async def test_entitlement_types(self, client):
        response = await client.get("/api/entitlement-types", params={"city": "Miami"})
        assert response.status_code == 200
        data = response.json()
        assert data["city"] == "miami"
        assert "Warrant" in data["entitlementTypes"]

    async def test_entitlement_types_unsupported(self, client):
        response = await client.get("/api/entitlement-types", params={"city": "Boise"})
        assert response.status_code == 400
        assert response.json()["error"] == "Unsupported city."

    async def test_entitlement_tracking(self, client):
        response = await client.get(
            "/api/entitlement-tracking",
            params={"city": "Denver", "address": "1600 Glenarm Pl"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["address"] == "1600 Glenarm Pl"
        assert data["permits"][0]["reference_number"] == "Z-2023-10456"
        assert "note" not in data["permits"][0]

    async def test_entitlement_tracking_requires_address(self, client):
        response = await client.get("/api/entitlement-tracking", params={"city": "Denver"})
        assert response.status_code == 400
        assert response.json() == {"error": "Both city and address are required."}

    async def test_zoning_mock(self, client):
        response = await client.get(
            "/api/zoning-mock",
            params={"address": "123 N State St, Chicago, IL"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["zoning"]["zoning_classification"] == "B3-5"
        assert data["address_queried"] == "123 N State St, Chicago, IL"

    async def test_zoning_mock_requires_address(self, client):
        response = await client.get("/api/zoning-mock")
        assert response.status_code == 400


class TestZoningFilterEndpoint:
    """Tests for POST /api/zoning-filter."""

    async def test_filter_by_district_and_lot_size(self, client):
        response = await client.post(
            "/api/zoning-filter",
            json={"city": "Charlotte", "filters": {"zoning_districts": ["UMUD"], "min_lot_size": 20000}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["city"] == "Charlotte"
        assert data["parcels_found"] == 2
        assert [p["parcel_id"] for p in data["parcels"]] == ["08117716", "08117734"]
        assert data["filter_applied"] == {"zoning_districts": ["UMUD"], "min_lot_size": 20000}

    async def test_neighborhood_boundary(self, client):
        response = await client.post(
            "/api/zoning-filter",
            json={"city": "raleigh", "filters": {}, "boundary": {"neighborhood": "Downtown"}},
        )
        assert response.status_code == 200
        addresses = [p["address"] for p in response.json()["parcels"]]
        assert addresses == ["150 Fayetteville St, Raleigh, NC", "119 E Hargett St, Raleigh, NC"]

    async def test_requires_city(self, client):
        response = await client.post("/api/zoning-filter", json={"filters": {}})
        assert response.status_code == 400
        assert response.json() == {"error": "City parameter is required"}

    async def test_requires_filters(self, client):
        response = await client.post("/api/zoning-filter", json={"city": "Charlotte"})
        assert response.status_code == 400
        assert response.json() == {"error": "Filters parameter is required"}

    async def test_unsupported_city(self, client):
        response = await client.post("/api/zoning-filter", json={"city": "Denver", "filters": {}})
        assert response.status_code == 400
        assert response.json()["error"] == (
            "City 'Denver' is not supported. Supported cities: Charlotte, Raleigh."
        )
