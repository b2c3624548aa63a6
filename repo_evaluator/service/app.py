"""FastAPI application exposing repository evaluation over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from repo_evaluator.errors import (
    AccessDeniedError,
    InvalidRepositoryUrlError,
    RepoEvaluatorError,
    RepositoryNotFoundError,
)
from repo_evaluator.models.model_eval import RubricPolicy
from repo_evaluator.models.model_result import EvaluationResult
from repo_evaluator.pipeline import evaluate_repository

logger = logging.getLogger(__name__)

Evaluate = Callable[[str], Awaitable[EvaluationResult]]


class AnalyzeRequest(BaseModel):
    url: str | None = None


class HealthResponse(BaseModel):
    status: str
    message: str


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def create_app(
    evaluate: Evaluate | None = None,
    token: str | None = None,
    policy: RubricPolicy | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    ``evaluate`` maps a repository URL to a result; by default it fetches from
    GitHub with the given token and policy.
    """

    async def _default_evaluate(url: str) -> EvaluationResult:
        return await evaluate_repository(url, token=token, policy=policy)

    run_evaluate = evaluate or _default_evaluate

    app = FastAPI(title="Repository Evaluator", version="1.0.0")

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="OK", message="GitHub Repository Evaluator API is running")

    @app.post("/api/analyze")
    async def analyze(payload: AnalyzeRequest) -> Any:
        if not payload.url:
            return _error(
                400, "Missing repository URL", "Please provide a GitHub repository URL"
            )
        result = await run_evaluate(payload.url)
        return {"success": True, "data": result.to_payload()}

    @app.get("/api/analyze/{owner}/{repo}")
    async def analyze_path(owner: str, repo: str) -> Any:
        result = await run_evaluate(f"https://github.com/{owner}/{repo}")
        return {"success": True, "data": result.to_payload()}

    @app.exception_handler(InvalidRepositoryUrlError)
    async def invalid_url_handler(_: Request, exc: InvalidRepositoryUrlError) -> JSONResponse:
        return _error(
            400,
            "Invalid GitHub URL",
            "Please provide a valid GitHub repository URL (e.g., https://github.com/owner/repo)",
        )

    @app.exception_handler(RepositoryNotFoundError)
    async def not_found_handler(_: Request, exc: RepositoryNotFoundError) -> JSONResponse:
        return _error(
            404, "Repository not found", "The specified repository does not exist or is private"
        )

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(_: Request, exc: AccessDeniedError) -> JSONResponse:
        return _error(
            403, "Access denied", "This repository is private or access is restricted"
        )

    @app.exception_handler(RepoEvaluatorError)
    async def evaluation_error_handler(_: Request, exc: RepoEvaluatorError) -> JSONResponse:
        logger.error(f"Analysis error: {exc}")
        return _error(
            500,
            "Analysis failed",
            str(exc) or "An error occurred while analyzing the repository",
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(_: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unexpected analysis error: {exc}")
        return _error(500, "Analysis failed", "An error occurred while analyzing the repository")

    return app


def run_service(
    host: str = "0.0.0.0",
    port: int = 5000,
    token: str | None = None,
    policy: RubricPolicy | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(token=token, policy=policy)
    uvicorn.run(app, host=host, port=port)
