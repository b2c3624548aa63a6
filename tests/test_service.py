"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from repo_evaluator.errors import (
    AccessDeniedError,
    InvalidRepositoryUrlError,
    RepositoryNotFoundError,
    SnapshotFetchError,
)
from repo_evaluator.evaluators.registry import RepositoryEvaluator
from repo_evaluator.models.model_result import EvaluationResult
from repo_evaluator.models.model_snapshot import RepositorySnapshot
from repo_evaluator.service.app import create_app


@pytest.fixture
def mature_result(mature_snapshot: RepositorySnapshot) -> EvaluationResult:
    return RepositoryEvaluator().evaluate(mature_snapshot)


def make_client(
    outcome: EvaluationResult | Exception,
    seen: list[str] | None = None,
    raise_server_exceptions: bool = True,
) -> TestClient:
    """Client whose evaluation returns ``outcome`` (or raises it)."""

    async def evaluate(url: str) -> EvaluationResult:
        if seen is not None:
            seen.append(url)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return TestClient(
        create_app(evaluate=evaluate), raise_server_exceptions=raise_server_exceptions
    )


class TestHealth:
    def test_health(self, mature_result: EvaluationResult) -> None:
        response = make_client(mature_result).get("/api/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "OK",
            "message": "GitHub Repository Evaluator API is running",
        }


class TestAnalyze:
    """Tests for the analyze endpoints."""

    def test_analyze(self, mature_result: EvaluationResult) -> None:
        seen: list[str] = []
        client = make_client(mature_result, seen)

        response = client.post("/api/analyze", json={"url": "https://github.com/example/widget"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == mature_result.to_payload()
        assert seen == ["https://github.com/example/widget"]

    def test_analyze_by_path(self, mature_result: EvaluationResult) -> None:
        seen: list[str] = []
        client = make_client(mature_result, seen)

        response = client.get("/api/analyze/example/widget")

        assert response.status_code == 200
        assert response.json()["data"]["score"] == 93
        assert seen == ["https://github.com/example/widget"]

    @pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": None}])
    def test_missing_url(self, mature_result: EvaluationResult, body: dict) -> None:
        response = make_client(mature_result).post("/api/analyze", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Missing repository URL"

    @pytest.mark.parametrize(
        "error,status,label",
        [
            (InvalidRepositoryUrlError("bad"), 400, "Invalid GitHub URL"),
            (RepositoryNotFoundError("gone"), 404, "Repository not found"),
            (AccessDeniedError("private"), 403, "Access denied"),
            (SnapshotFetchError("HTTP 502", status_code=502), 500, "Analysis failed"),
        ],
    )
    def test_error_mapping(self, error: Exception, status: int, label: str) -> None:
        response = make_client(error).post(
            "/api/analyze", json={"url": "https://github.com/example/widget"}
        )
        assert response.status_code == status
        assert response.json()["error"] == label

    def test_analysis_failure_message(self) -> None:
        response = make_client(SnapshotFetchError("HTTP 502", status_code=502)).post(
            "/api/analyze", json={"url": "https://github.com/example/widget"}
        )
        assert response.json()["message"] == "HTTP 502"

    def test_unexpected_error_is_json(self) -> None:
        # Starlette re-raises after the catch-all handler responds
        client = make_client(RuntimeError("boom"), raise_server_exceptions=False)

        response = client.post("/api/analyze", json={"url": "https://github.com/example/widget"})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {
            "error": "Analysis failed",
            "message": "An error occurred while analyzing the repository",
        }

    def test_unexpected_error_on_path_route(self) -> None:
        client = make_client(KeyError("missing"), raise_server_exceptions=False)

        response = client.get("/api/analyze/example/widget")

        assert response.status_code == 500
        assert response.json()["error"] == "Analysis failed"
