# This project was developed with assistance from AI tools.
"""Tests for the public API routes.

Census and lead delivery are replaced through ``app.dependency_overrides`` so
no request leaves the process.
"""

from unittest.mock import AsyncMock

from casaready.core.config import settings
from casaready.main import app
from casaready.routes.public import (
    get_census_service,
    get_lead_service,
    get_rate_limiter,
    get_report_writer,
)
from casaready.schemas.census import CensusLookupResult, CityValidation
from casaready.schemas.submission import LeadSubmissionResult
from casaready.services.rate_limit import FixedWindowRateLimiter

from .factories import make_answers, make_census, make_contact


def _answers_json(**overrides):
    return make_answers(**overrides).model_dump(mode="json")


def _contact_json():
    return make_contact().model_dump(mode="json")


def _census_stub():
    stub = AsyncMock()
    stub.get_area_insights.return_value = CensusLookupResult(success=True, data=make_census())
    stub.validate_city.return_value = CityValidation(
        is_valid=True, standardized_name="AUSTIN", state="TX", county="Travis"
    )
    return stub


def _lead_stub():
    stub = AsyncMock()
    stub.submit.return_value = LeadSubmissionResult(
        success=True, message="Lead created", lead_id="sub_123"
    )
    return stub


# -- Service --


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "CasaReady" in response.json()["message"]


def test_health(client):
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_programs(client):
    response = client.get("/api/public/programs")
    assert response.status_code == 200
    names = [program["name"] for program in response.json()]
    assert {"Conventional", "FHA", "VA"} <= set(names)


# -- Metrics --


def test_metrics_happy_path(client):
    response = client.post("/api/public/metrics", json={
        "annual_income": 120000,
        "monthly_debts": 500,
        "credit_band": "740-799",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["monthly_income"] == 10000
    assert data["debt_to_income_ratio"] == 5.0
    assert data["dti_status"] == "defined"
    assert data["estimated_affordability"] > 0


def test_metrics_zero_income_has_undefined_dti(client):
    response = client.post("/api/public/metrics", json={"annual_income": 0, "monthly_debts": 500})
    assert response.status_code == 200
    data = response.json()
    assert data["debt_to_income_ratio"] is None
    assert data["dti_status"] == "undefined"


def test_metrics_rejects_negative_income(client):
    response = client.post("/api/public/metrics", json={"annual_income": -1})
    assert response.status_code == 422
    body = response.json()
    assert body["title"] == "Unprocessable Entity"
    assert body["status"] == 422


# -- Wizard --


def test_finalize_parses_raw_draft(client):
    response = client.post("/api/public/wizard/finalize", json={
        "annual_income": "$65,000",
        "monthly_debts": "600",
        "timeline": "0-3",
        "buyer_type": ["first-time"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["annual_income"] == 65000
    assert data["timeline"] == "0-3"
    assert data["buyer_tags"] == ["first-time"]


def test_finalize_reports_every_bad_field(client):
    response = client.post("/api/public/wizard/finalize", json={
        "timeline": "someday",
        "target_price": "-5",
    })
    assert response.status_code == 422
    body = response.json()
    assert body["status"] == 422
    assert {error["field"] for error in body["errors"]} == {
        "annual_income",
        "timeline",
        "target_price",
    }


# -- Classification and report --


def test_classify_in_spanish(client):
    response = client.post("/api/public/classify", json={
        "answers": _answers_json(),
        "locale": "es",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["lead_type"] == "W2_FIRST_TIME_GOOD_CREDIT"
    assert data["description"] == "Comprador W2 Primera Vez (Crédito Fuerte)"
    assert data["loan_eligibility"]["recommended"] == "FHA"


def test_report_uses_census(client):
    census = _census_stub()
    app.dependency_overrides[get_census_service] = lambda: census
    app.dependency_overrides[get_report_writer] = lambda: None

    response = client.post("/api/public/report", json={
        "answers": _answers_json(),
        "contact": _contact_json(),
    })
    assert response.status_code == 200
    data = response.json()
    assert data["ai_generated"] is False
    assert data["estimated_price"] > data["max_affordable"]
    assert "Area median home value" in data["report_content"]
    census.get_area_insights.assert_awaited_once()


def test_report_without_census(client):
    census = _census_stub()
    app.dependency_overrides[get_census_service] = lambda: census
    app.dependency_overrides[get_report_writer] = lambda: None

    response = client.post("/api/public/report", json={
        "answers": _answers_json(),
        "contact": _contact_json(),
        "locale": "es",
        "include_census": False,
    })
    assert response.status_code == 200
    assert "Resumen Financiero" in response.json()["report_content"]
    census.get_area_insights.assert_not_awaited()


# -- Census --


def test_census_lookup(client):
    census = _census_stub()
    app.dependency_overrides[get_census_service] = lambda: census

    response = client.get("/api/public/census", params={
        "city": "Austin", "state": "TX", "locale": "es",
    })
    assert response.status_code == 200
    assert response.json()["success"] is True
    city, state, locale = census.get_area_insights.await_args.args
    assert (city, state, locale.value) == ("Austin", "TX", "es")


def test_census_validate(client):
    app.dependency_overrides[get_census_service] = _census_stub

    response = client.get("/api/public/census/validate", params={"city": "austin"})
    assert response.status_code == 200
    assert response.json()["standardized_name"] == "AUSTIN"


def test_census_requires_city(client):
    response = client.get("/api/public/census")
    assert response.status_code == 422


# -- Leads --


def test_submit_lead(client):
    leads = _lead_stub()
    app.dependency_overrides[get_lead_service] = lambda: leads

    response = client.post("/api/public/leads", json={
        "answers": _answers_json(),
        "contact": _contact_json(),
    })
    assert response.status_code == 200
    assert response.json()["lead_id"] == "sub_123"
    leads.submit.assert_awaited_once()


def test_submit_lead_is_rate_limited_per_ip(client, monkeypatch):
    monkeypatch.setattr(settings, "TRUST_FORWARDED_FOR", True)
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60)
    app.dependency_overrides[get_lead_service] = _lead_stub
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    body = {"answers": _answers_json(), "contact": _contact_json()}

    first = client.post("/api/public/leads", json=body, headers={"X-Forwarded-For": "1.1.1.1"})
    second = client.post("/api/public/leads", json=body, headers={"X-Forwarded-For": "1.1.1.1"})
    other = client.post("/api/public/leads", json=body, headers={"X-Forwarded-For": "2.2.2.2"})

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json()["title"] == "Too Many Requests"
    assert 0 < int(second.headers["retry-after"]) <= 60
    assert other.status_code == 200


def test_forwarded_for_is_ignored_unless_trusted(client):
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60)
    app.dependency_overrides[get_lead_service] = _lead_stub
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    body = {"answers": _answers_json(), "contact": _contact_json()}

    first = client.post("/api/public/leads", json=body, headers={"X-Forwarded-For": "1.1.1.1"})
    spoofed = client.post("/api/public/leads", json=body, headers={"X-Forwarded-For": "9.9.9.9"})

    assert first.status_code == 200
    assert spoofed.status_code == 429


def test_report_rejects_unbounded_income(client):
    app.dependency_overrides[get_census_service] = _census_stub
    app.dependency_overrides[get_report_writer] = lambda: None

    response = client.post("/api/public/report", json={
        "answers": {"annual_income": 1e308},
        "contact": _contact_json(),
    })
    assert response.status_code == 422
    assert response.json()["status"] == 422


def test_metrics_rejects_unbounded_income(client):
    response = client.post("/api/public/metrics", json={"annual_income": 1e308})
    assert response.status_code == 422
