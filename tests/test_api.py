import pytest
from fastapi.testclient import TestClient

from pharmacy_booking.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def raw_day(day: str, times: list[str], offset: str = "+12:00") -> dict:
    return {
        "date": day,
        "timeSlots": [
            {
                "startTime": f"{day}T{hhmm}:00{offset}",
                "endTime": f"{day}T{hhmm[:3]}30:00{offset}",
                "available": True,
            }
            for hhmm in times
        ],
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "timezone": "Pacific/Auckland"}


def test_overrides_endpoint(client):
    response = client.post("/slots/overrides", json={
        "calendar": [raw_day("2024-06-05", ["11:00", "12:00", "13:00"])],
        "tenantId": 4,
        "serviceId": "1",
    })
    assert response.status_code == 200

    day = response.json()["calendar"][0]
    assert day["date"] == "2024-06-05"
    assert [s["available"] for s in day["timeSlots"]] == [True, False, True]


def test_day_endpoint_applies_overrides_and_selects(client):
    response = client.post("/slots/day", json={
        "calendar": [raw_day("2024-06-05", ["13:00", "09:00", "12:00"])],
        "date": "2024-06-05",
        "now": "2024-06-01T10:00:00+12:00",
        "tenantId": 4,
        "serviceId": 1,
    })
    assert response.status_code == 200

    body = response.json()
    assert body["date"] == "2024-06-05"
    assert body["count"] == 2
    assert [s["label"] for s in body["slots"]] == ["09:00 am – 09:30 am", "01:00 pm – 01:30 pm"]


def test_day_endpoint_without_date(client):
    response = client.post("/slots/day", json={
        "calendar": [raw_day("2024-06-05", ["09:00"])],
        "now": "2024-06-01T10:00:00+12:00",
    })
    assert response.status_code == 200
    assert response.json()["count"] == 0


def test_malformed_start_time_rejected(client):
    day = raw_day("2024-06-05", ["09:00"])
    day["timeSlots"][0]["startTime"] = "tomorrow-ish"
    response = client.post("/slots/overrides", json={"calendar": [day], "tenantId": 4})
    assert response.status_code == 422


def test_rules_endpoint(client):
    response = client.get("/slots/rules")
    assert response.status_code == 200

    body = response.json()
    assert body["timezone"] == "Pacific/Auckland"
    assert [h["date"] for h in body["holidays"]] == ["2025-10-27", "2025-12-25", "2026-01-01", "2026-01-02"]
    assert body["holidays"][0]["openWindows"] == {"5": ["10:00-16:00"], "7": ["09:00-15:00"]}
    assert body["tenants"] == [{
        "tenantId": 4,
        "lunchBlackout": ["12:00-13:00"],
        "saturdayServiceIds": [150, 152, 153, 154, 155, 156, 157],
    }]


def test_day_endpoint_closes_holiday_without_tenant(client):
    response = client.post("/slots/day", json={
        "calendar": [raw_day("2025-12-25", ["10:00"], offset="+13:00")],
        "date": "2025-12-25",
        "now": "2025-12-20T10:00:00+13:00",
    })
    assert response.status_code == 200
    assert response.json()["count"] == 0
