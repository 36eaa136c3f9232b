"""HTTP tests for the travel pricing endpoints."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from travel_premium.api.app import create_app


@pytest.fixture
def client(container, seeder):
    seeder.premium("국내여행보험", "표준플랜", 30, "남자", "120000")
    seeder.premium("국내여행보험", "어린이플랜", 10, "남자", "60000")
    seeder.short_term("국내여행보험", 7, "15.5")
    seeder.short_term("국내여행보험", 30, "40")
    seeder.foreign("유학/어학연수", "표준플랜", 30, "남자", "EUR", "100000", "50")
    seeder.exchange_rate("EUR", "1450.5", "2024-05-31")
    return TestClient(create_app(container))


def premium_body(**overrides):
    body = {
        "insurance_type": "국내여행보험",
        "age": 30,
        "gender": "남자",
        "plan_type": "표준플랜",
        "has_medical_expense": False,
        "departure_date": "2024-06-01T00:00",
        "arrival_date": "2024-06-08T00:00",
    }
    body.update(overrides)
    return body


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calculate_premium(client) -> None:
    response = client.post("/api/travel/calculate-premium", json=premium_body())

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "premium": 18600,
        "annual_premium": 120000.0,
        "short_term_rate": 15.5,
        "period_days": 7,
    }


def test_calculate_premium_foreign_plan_reports_currency(client) -> None:
    response = client.post(
        "/api/travel/calculate-premium",
        json=premium_body(
            insurance_type="유학/어학연수",
            departure_date="2024-01-01T00:00",
            arrival_date="2025-02-04T00:00",
            currency_plan="외화",
            travel_country="독일",
        ),
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["currency"] == "EUR"
    assert payload["premium"] == 172520
    assert payload["short_term_rate"] == 100.0


def test_calculate_premium_missing_field_is_400(client) -> None:
    body = premium_body()
    del body["gender"]

    response = client.post("/api/travel/calculate-premium", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "필수 파라미터가 누락되었습니다."}


def test_calculate_premium_reversed_dates_is_400(client) -> None:
    response = client.post(
        "/api/travel/calculate-premium",
        json=premium_body(departure_date="2024-06-08T00:00", arrival_date="2024-06-01T00:00"),
    )

    assert response.status_code == 400
    assert response.json()["message"] == "도착일시는 출발일시보다 이후여야 합니다."


def test_calculate_premium_malformed_body_is_400(client) -> None:
    response = client.post("/api/travel/calculate-premium", json=premium_body(age="thirty"))

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_calculate_premium_unknown_rate_is_404(client) -> None:
    response = client.post("/api/travel/calculate-premium", json=premium_body(age=77))

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "해당 조건의 보험료 정보를 찾을 수 없습니다."}


def test_calculate_group_premium(client) -> None:
    response = client.post(
        "/api/travel/calculate-group-premium",
        json={
            "insurance_type": "국내여행보험",
            "departure_date": "2024-06-01T00:00",
            "arrival_date": "2024-06-08T00:00",
            "insured_persons": [
                {"age": 30, "gender": "남자", "plan_type": "표준플랜"},
                {"age": 10, "gender": "남자", "plan_type": "표준플랜"},
            ],
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["period_days"] == 7
    assert payload["total_premium"] == 18600 + 9300
    assert [person["plan_type"] for person in payload["insured_persons"]] == ["표준플랜", "어린이플랜"]
    assert [person["index"] for person in payload["insured_persons"]] == [1, 2]


def test_calculate_group_premium_failure_names_participant(client) -> None:
    response = client.post(
        "/api/travel/calculate-group-premium",
        json={
            "insurance_type": "국내여행보험",
            "departure_date": "2024-06-01T00:00",
            "arrival_date": "2024-06-08T00:00",
            "insured_persons": [
                {"age": 30, "gender": "남자", "plan_type": "표준플랜"},
                {"age": 45, "gender": "여자", "plan_type": "표준플랜"},
                {"age": 10, "gender": "남자", "plan_type": "표준플랜"},
            ],
        },
    )

    assert response.status_code == 404
    assert response.json()["message"].startswith("2번째 피보험자")


def test_calculate_group_premium_empty_is_400(client) -> None:
    response = client.post(
        "/api/travel/calculate-group-premium",
        json={
            "insurance_type": "국내여행보험",
            "departure_date": "2024-06-01T00:00",
            "arrival_date": "2024-06-08T00:00",
            "insured_persons": [],
        },
    )

    assert response.status_code == 400


def test_exchange_rate_endpoint(client, seeder) -> None:
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    seeder.exchange_rate("USD", "1355.2", yesterday)

    response = client.get("/api/travel/exchange-rate", params={"currency": "USD"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "currency": "USD",
        "exchangeRate": 1355.2,
        "rateDate": yesterday,
    }


def test_exchange_rate_endpoint_missing_currency_is_404(client) -> None:
    response = client.get("/api/travel/exchange-rate")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_unexpected_error_is_500(container, monkeypatch) -> None:
    def broken(_request):
        raise RuntimeError("database is locked")

    monkeypatch.setattr(container.premium_calculator, "calculate_premium", broken)
    client = TestClient(create_app(container), raise_server_exceptions=False)

    response = client.post("/api/travel/calculate-premium", json=premium_body())

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "보험료 계산 중 오류가 발생했습니다."}


def test_openapi_documents_error_body(client) -> None:
    schema = client.get("/openapi.json").json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    for path in ("/api/travel/calculate-premium", "/api/travel/calculate-group-premium"):
        responses = schema["paths"][path]["post"]["responses"]
        assert responses["404"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
    assert "400" in schema["paths"]["/api/travel/exchange-rate"]["get"]["responses"]
