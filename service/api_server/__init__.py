from __future__ import annotations

"""Application factory for the graph engine HTTP facade."""

import time
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tripleForge import __version__ as package_version
from tripleForge.errors import DecodeError, DefinitionError, LoweringError, TripleForgeError
from tripleForge.utils.log_json import JsonLogger

from .config import ApiSettings
from .routers import build_router
from .schemas import ProblemDetails

_PROBLEM_BASE = "https://tripleforge.dev/problems"


def _problem(
    request: Request,
    status: int,
    kind: str,
    title: str,
    detail: Optional[str],
    **extra: Any,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{_PROBLEM_BASE}/{kind}",
        title=title,
        status=status,
        detail=detail,
        instance=str(request.url),
        **extra,
    )
    return JSONResponse(status_code=status, content=problem.model_dump(exclude_none=True))


def create_app(settings: Optional[ApiSettings] = None) -> FastAPI:
    settings = settings or ApiSettings.from_env()

    app = FastAPI(
        title="tripleForge API",
        version=package_version,
        docs_url=None,
        redoc_url=None,
        openapi_url="/openapi.json",
        default_response_class=JSONResponse,
    )
    json_logger = JsonLogger("api")

    app.state.settings = settings
    app.state.request_logger = json_logger

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        json_logger.info(
            "api.request",
            route=request.url.path,
            status=response.status_code,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
            details={"method": request.method},
        )
        return response

    app.include_router(build_router())

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg"), "type": error.get("type")}
            for error in exc.errors()
        ]
        return _problem(request, 422, "validation", "Validation Failed", "Request body is invalid", errors=errors)

    @app.exception_handler(HTTPException)
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
        detail = exc.detail if isinstance(exc.detail, str) else None
        response = _problem(request, exc.status_code, "http", detail or "HTTP Error", detail)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(TripleForgeError)
    async def library_error_handler(request: Request, exc: TripleForgeError) -> JSONResponse:
        status = 422 if isinstance(exc, (DefinitionError, LoweringError)) else 400
        json_logger.warning(
            "api.library_error",
            route=request.url.path,
            status=status,
            details={"error": type(exc).__name__, "message": str(exc)},
        )
        line = exc.line if isinstance(exc, DecodeError) else None
        return _problem(request, status, type(exc).__name__, "Graph Operation Failed", str(exc), line=line)

    return app


__all__ = ["create_app"]
