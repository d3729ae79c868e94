"""FastAPI application for the plan engine.

Engine errors surface through app-level handlers: input that only fails
against the anchor date is a 422, any other ``ValueError`` raised while
building a plan is a 400. Every request gets an id (echoed back in the
configured header) and one ``http_request`` log record.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.observability import (
    configure_logging,
    monotonic_ms,
    new_request_id,
    request_log_fields,
    reset_request_id,
    set_request_id,
)
from api.routes import router
from core.config import Settings, get_settings
from core.validators import PlanInputError

logger = logging.getLogger(__name__)


async def plan_input_error_handler(request: Request, exc: PlanInputError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})


async def engine_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("plan_request_rejected", extra={"ctx_path": request.url.path, "ctx_error": str(exc)})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def _log_request(request: Request, status_code: int, started_ms: float, exc_info: bool = False) -> None:
    fields = request_log_fields(
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        duration_ms=monotonic_ms() - started_ms,
        client_ip=getattr(request.client, "host", None),
    )
    if exc_info:
        logger.exception("http_request_error", extra=fields)
    else:
        logger.info("http_request", extra=fields)


def _request_id_middleware(settings: Settings):
    header_name = settings.request_id_header_name or "X-Request-ID"

    async def middleware(request: Request, call_next: Callable) -> Response:
        incoming: Optional[str] = request.headers.get(header_name)
        request_id = (incoming or "").strip() or new_request_id()
        token = set_request_id(request_id)
        started_ms = monotonic_ms()
        try:
            response = await call_next(request)
        except Exception:
            _log_request(request, status.HTTP_500_INTERNAL_SERVER_ERROR, started_ms, exc_info=True)
            raise
        else:
            response.headers[header_name] = request_id
            _log_request(request, response.status_code, started_ms)
            return response
        finally:
            reset_request_id(token)

    return middleware


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Race Plan API", version="1.0.0")
    app.add_exception_handler(PlanInputError, plan_input_error_handler)
    app.add_exception_handler(ValueError, engine_error_handler)
    app.include_router(router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_request_id_middleware(settings))
    return app


app = create_app()
