"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def report_payload():
    """Records as the UI would post them"""
    return {
        "users": [
            {"id": "u1", "name": "Rajesh Kumar", "created_at": "2024-01-15T10:00:00"},
            {"id": "u2", "name": "Priya Sharma", "created_at": "2024-03-02T09:00:00"},
        ],
        "user_schemes": [
            {
                "id": "us_gold",
                "user_id": "u1",
                "scheme_type": "Gold Saver",
                "start_date": "2024-01-01",
                "duration": 100,
                "total_amount": 1000,
                "interest_rate": 10,
            }
        ],
        "transactions": [
            {
                "id": "t1",
                "user_id": "u1",
                "scheme_id": "us_gold",
                "amount": 400,
                "date": "2024-03-05T09:30:00",
                "payment_mode": "cash",
            },
            {
                "id": "t2",
                "user_id": "u2",
                "scheme_id": "us_missing",
                "amount": 60,
                "date": "2024-03-10T18:30:00",
                "payment_mode": "bank-transfer",
            },
        ],
        "as_of": "2024-03-10T20:00:00",
        "days": 7,
        "window": 3,
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/interest", json={"principal": 1000, "rate": 10, "days": 365})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "finance_tracker_calculation_total" in response.text


def test_request_id_header(client: TestClient):
    """Caller's request ID is echoed, otherwise one is generated"""
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_interest_endpoint(client: TestClient):
    """Test POST /v1/interest for one year at 10%"""
    response = client.post("/v1/interest", json={"principal": 1000, "rate": 10, "days": 365})

    assert response.status_code == 200
    data = response.json()
    assert data["interest"] == pytest.approx(100)
    assert data["maturity_amount"] == pytest.approx(1100)
    assert data["entry_interest"] == pytest.approx(1000 * 10 / 365 / 100)


def test_interest_endpoint_rejects_rate_above_100(client: TestClient):
    """Rates are percentages"""
    response = client.post("/v1/interest", json={"principal": 1000, "rate": 150, "days": 365})
    assert response.status_code == 422


def test_scheme_progress_endpoint(client: TestClient, report_payload):
    """Test POST /v1/schemes/progress"""
    response = client.post(
        "/v1/schemes/progress",
        json={
            "schemes": report_payload["user_schemes"],
            "transactions": report_payload["transactions"],
            "as_of": "2024-03-01T00:00:00",
        },
    )

    assert response.status_code == 200
    item = response.json()["schemes"][0]
    assert item["scheme_id"] == "us_gold"
    assert item["total_paid"] == 400
    assert item["remaining_amount"] == 600
    assert item["completion_percentage"] == pytest.approx(40)
    assert item["days_remaining"] == 40
    assert item["accrued_interest"] == 0  # empty balance


def test_scheme_progress_endpoint_zero_total(client: TestClient, report_payload):
    """A zero target is rejected as a domain error"""
    scheme = dict(report_payload["user_schemes"][0], total_amount=0)

    response = client.post("/v1/schemes/progress", json={"schemes": [scheme], "transactions": []})

    assert response.status_code == 422
    assert "non-positive total amount" in response.json()["detail"]


def test_bonus_endpoint_weekday(client: TestClient):
    """Wednesday payment earns the bonus"""
    response = client.post(
        "/v1/bonus",
        json={"payment_date": "2024-03-13T10:00:00", "scheme_start_date": "2024-01-01", "amount": 100},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["eligible"] is True
    assert data["bonus"] == 5
    assert data["total_amount"] == 105
    assert data["week"] == 11
    assert data["year"] == 2024
    assert data["next_payment_date"] == "2024-03-20T10:00:00"


def test_bonus_endpoint_weekend(client: TestClient):
    """Saturday payment earns nothing"""
    response = client.post("/v1/bonus", json={"payment_date": "2024-03-16T10:00:00", "amount": 100})

    assert response.status_code == 200
    data = response.json()
    assert data["eligible"] is False
    assert data["bonus"] == 0
    assert data["total_amount"] == 100


def test_report_summary_endpoint(client: TestClient, report_payload):
    """Test POST /v1/reports/summary over all records"""
    response = client.post("/v1/reports/summary", json=report_payload)

    assert response.status_code == 200
    data = response.json()

    assert [p["label"] for p in data["daily"]][-1] == "2024-03-10"
    assert [p["value"] for p in data["daily"]] == [0, 400, 0, 0, 0, 0, 60]
    assert len(data["daily_moving_average"]) == 7
    assert data["daily_moving_average"][1] == pytest.approx(200)

    assert len(data["monthly"]) == 12
    assert data["monthly"][2] == {"label": "Mar", "value": 460}
    assert [p["value"] for p in data["user_growth"][:3]] == [1, 0, 1]

    assert data["payment_modes"] == {
        "labels": ["cash", "card", "mobile-wallet", "bank-transfer"],
        "values": [1, 0, 0, 1],
    }
    assert data["scheme_amounts"] == {"labels": ["Gold Saver", "Unknown"], "values": [400, 60]}

    assert data["stats"]["total_transactions"] == 2
    assert data["stats"]["online_payments"] == 1
    assert data["dashboard"]["today_collection"] == 60
    assert data["dashboard"]["pending_dues"] == 600


def test_report_summary_endpoint_filters(client: TestClient, report_payload):
    """Period and drill-down filters narrow distributions and stats only"""
    report_payload["period"] = "weekly"
    report_payload["filters"] = {"payment_mode": "bank-transfer"}

    response = client.post("/v1/reports/summary", json=report_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["stats"]["total_transactions"] == 1
    assert data["stats"]["total_amount"] == 60
    assert data["scheme_amounts"] == {"labels": ["Unknown"], "values": [60]}
    # Charts over time still cover every record
    assert data["monthly"][2]["value"] == 460


def test_report_summary_endpoint_invalid_period(client: TestClient, report_payload):
    """Unknown period is a domain error"""
    report_payload["period"] = "fortnightly"

    response = client.post("/v1/reports/summary", json=report_payload)

    assert response.status_code == 422


def test_report_summary_endpoint_utc_timestamps(client: TestClient, report_payload):
    """Z-suffixed timestamps as browsers serialise them, with a period filter"""
    report_payload["transactions"][0]["date"] = "2024-03-05T09:30:00.000Z"
    report_payload["transactions"][1]["date"] = "2024-03-10T18:30:00Z"
    report_payload["as_of"] = "2024-03-10T20:00:00Z"
    report_payload["period"] = "monthly"

    response = client.post("/v1/reports/summary", json=report_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["stats"]["total_transactions"] == 2
    assert [p["value"] for p in data["daily"]] == [0, 400, 0, 0, 0, 0, 60]
    assert data["monthly"][2]["value"] == 460
    assert data["dashboard"]["today_collection"] == 60


@pytest.mark.parametrize("as_of", ["2024-03-01T00:00:00Z", "2024-03-01T05:30:00+05:30"])
def test_scheme_progress_endpoint_offset_as_of(client: TestClient, report_payload, as_of):
    """as_of with a UTC offset is measured in UTC"""
    response = client.post(
        "/v1/schemes/progress",
        json={
            "schemes": report_payload["user_schemes"],
            "transactions": report_payload["transactions"],
            "as_of": as_of,
        },
    )

    assert response.status_code == 200
    assert response.json()["schemes"][0]["days_remaining"] == 40
