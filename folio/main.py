"""Application entrypoint: `uvicorn folio.main:app`."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from folio.api.routes import health
from folio.api.routes.router import get_api_router
from folio.auth.session_store import InMemorySessionStore
from folio.core.config import get_config
from folio.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    FolioException,
    NotFoundError,
    PaymentProviderError,
    ValidationError,
)
from folio.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Public form endpoints answer errors as {"message"}; everything else as {"error"}.
MESSAGE_ENVELOPE_PATHS = frozenset({"/api/contact", "/api/project-inquiry"})
INTERNAL_ERROR = "Internal server error"


def _error_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    key = "message" if request.url.path in MESSAGE_ENVELOPE_PATHS else "error"
    return JSONResponse(status_code=status_code, content={key: detail})


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    return str(errors[0].get("msg") or "Invalid request")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(request, 400, _first_validation_message(exc))

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error_response(request, 400, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error_response(request, 404, str(exc))

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
        return _error_response(request, 401, str(exc))

    @app.exception_handler(ConfigurationError)
    async def configuration_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("config.unavailable", extra={"event": "config.unavailable", "path": request.url.path})
        return _error_response(request, 503, str(exc))

    @app.exception_handler(PaymentProviderError)
    async def payment_provider_handler(request: Request, exc: PaymentProviderError) -> JSONResponse:
        return _error_response(request, 500, str(exc) or "Payment provider error")

    @app.exception_handler(FolioException)
    async def folio_handler(request: Request, exc: FolioException) -> JSONResponse:
        logger.error(
            "request.failed",
            exc_info=(type(exc), exc, exc.__traceback__),
            extra={"event": "request.failed", "path": request.url.path},
        )
        return _error_response(request, 500, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "request.unhandled_error",
            exc_info=(type(exc), exc, exc.__traceback__),
            extra={"event": "request.unhandled_error", "path": request.url.path},
        )
        return _error_response(request, 500, INTERNAL_ERROR)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    yield


def create_app() -> FastAPI:
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, lifespan=lifespan)
    app.state.session_store = InMemorySessionStore()
    app.include_router(health.router)
    app.include_router(get_api_router())
    register_exception_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from folio.core.startup import bootstrap

    bootstrap()
    cfg = get_config()
    uvicorn.run(app, host=cfg.API_HOST, port=cfg.API_PORT)
