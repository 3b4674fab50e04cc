"""
API-Tests für die /api-Routen.

Der LLM-Client wird durch Dummies ersetzt, die DB ist eine temporäre
SQLite-Datei. Getestet werden Routing, Serialisierung und das Mapping der
Fehlerklassen auf Status-Codes.
"""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from writecheck.api import routes
from writecheck.api.routes import router
from writecheck.db.kv_store import init_kv_store
from writecheck.db.session import get_db
from writecheck.llm.llm_client import LLMClient
from writecheck.services.errors import AuthError, TransportError
from writecheck.services.feedback import FeedbackService

VALID_RESPONSE = json.dumps(
    {
        "criteria": [
            {
                "criterionNumber": 1,
                "criterion": "Uses paragraphs",
                "rating": "Accomplished",
                "feedback": "Well structured.",
            }
        ],
        "summary": ["Add an example.", "Check commas."],
    }
)


class StaticLLMClient(LLMClient):
    def __init__(self, response: str = VALID_RESPONSE, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = 0

    def complete(self, prompt: str, **kwargs) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def client(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'api.db'}",
        future=True,
        connect_args={"check_same_thread": False},
    )
    SessionTest = sessionmaker(bind=engine)

    setup = SessionTest()
    init_kv_store(setup)
    setup.close()

    def override_get_db():
        db = SessionTest()
        try:
            yield db
        finally:
            db.close()

    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    engine.dispose()


@pytest.fixture
def llm(monkeypatch):
    fake = StaticLLMClient()
    monkeypatch.setattr(routes, "feedback_service", FeedbackService(llm_client=fake))
    return fake


def test_health_reports_missing_api_key(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["hasApiKey"] is False


def test_analysis_returns_snapshot(client):
    resp = client.post("/api/analysis", json={"draft": "I think think this is good."})
    assert resp.status_code == 200
    data = resp.json()
    assert data["metrics"]["word_count"] == 6
    assert data["issues"]["total"] == 1
    assert data["issues"]["issues"]["repeated_word"][0]["sentence_index"] == 1


def test_analysis_of_empty_draft(client):
    data = client.post("/api/analysis", json={"draft": ""}).json()
    assert data["metrics"]["reading_time"] == "0m 0s"
    assert data["issues"]["status"] == "empty"
    assert data["frequency"]["status"] == "empty"


def test_analyse_success_uses_camel_case(client, llm):
    resp = client.post("/api/analyse", json={"draft": "My draft.", "criteria": ["Uses paragraphs"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["criteria"][0]["criterionNumber"] == 1
    assert body["data"]["criteria"][0]["rating"] == "Accomplished"
    assert body["data"]["summary"] == ["Add an example.", "Check commas."]


def test_analyse_rejects_sixteen_criteria_without_llm_call(client, llm):
    resp = client.post(
        "/api/analyse",
        json={"draft": "My draft.", "criteria": [f"C{i}" for i in range(16)]},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert llm.calls == 0


def test_analyse_rejects_non_string_draft(client, llm):
    resp = client.post("/api/analyse", json={"draft": 5, "criteria": ["C1"]})
    assert resp.status_code == 400
    assert llm.calls == 0


def test_unknown_rating_is_502(client, monkeypatch):
    bad = VALID_RESPONSE.replace("Accomplished", "Good")
    monkeypatch.setattr(routes, "feedback_service", FeedbackService(llm_client=StaticLLMClient(bad)))

    resp = client.post("/api/analyse", json={"draft": "My draft.", "criteria": ["Uses paragraphs"]})
    assert resp.status_code == 502
    assert resp.json()["code"] == "UPSTREAM_PROTOCOL"
    # Roh-Output gehört nicht in die API-Antwort
    assert "Good" not in resp.text


@pytest.mark.parametrize(
    "error, status, code",
    [
        (AuthError(), 401, "AUTH_ERROR"),
        (TransportError("OpenAI API error: boom"), 502, "TRANSPORT_ERROR"),
        (TransportError("rate limited", status_code=503, upstream_status=429), 503, "TRANSPORT_ERROR"),
    ],
)
def test_llm_errors_map_to_status_codes(client, monkeypatch, error, status, code):
    monkeypatch.setattr(
        routes, "feedback_service", FeedbackService(llm_client=StaticLLMClient(error=error))
    )
    resp = client.post("/api/quick-check", json={"draft": "My draft."})
    assert resp.status_code == status
    assert resp.json()["code"] == code


def test_unexpected_error_is_500(client, monkeypatch):
    monkeypatch.setattr(
        routes,
        "feedback_service",
        FeedbackService(llm_client=StaticLLMClient(error=RuntimeError("kaputt"))),
    )
    resp = client.post("/api/analyse", json={"draft": "My draft.", "criteria": ["C1"]})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Internal server error", "code": "INTERNAL_ERROR"}


def test_report_download(client):
    resp = client.post(
        "/api/report",
        json={"draft": "The cat sat.", "result": json.loads(VALID_RESPONSE)},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "attachment; filename=\"feedback_" in resp.headers["content-disposition"]
    assert "Rating: Accomplished" in resp.text
    assert resp.text.rstrip().endswith("The cat sat.")


def test_workspace_round_trip_and_clear(client):
    assert client.get("/api/workspace").json()["draft"] == ""

    resp = client.put("/api/workspace", json={"draft": "Hello.", "criteria": ["A", "B"]})
    assert resp.status_code == 200
    assert resp.json()["timestamp"]

    loaded = client.get("/api/workspace").json()
    assert loaded["draft"] == "Hello."
    assert loaded["criteria"] == ["A", "B"]

    client.put("/api/theme", json={"theme": "dark"})
    assert client.delete("/api/workspace").json() == {"cleared": True}
    assert client.get("/api/workspace").json()["criteria"] == []
    assert client.get("/api/theme").json() == {"theme": "dark"}


def test_workspace_rejects_too_many_criteria(client):
    resp = client.put("/api/workspace", json={"draft": "x", "criteria": [str(i) for i in range(16)]})
    assert resp.status_code == 400


def test_theme_validation(client):
    assert client.get("/api/theme").json() == {"theme": "light"}
    assert client.put("/api/theme", json={"theme": "neon"}).status_code == 422


@pytest.mark.parametrize("criteria", ["Uses paragraphs", None, {"a": 1}])
def test_analyse_rejects_non_list_criteria_with_validation_body(client, llm, criteria):
    resp = client.post("/api/analyse", json={"draft": "My draft.", "criteria": criteria})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert body["error"] == "At least one success criterion is required"
    assert llm.calls == 0


def test_analyse_without_criteria_field(client, llm):
    resp = client.post("/api/analyse", json={"draft": "My draft."})
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
