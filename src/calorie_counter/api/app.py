"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from datetime import UTC, datetime
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Any

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from calorie_counter.api.models import CalorieRequest, CalorieResponse, ErrorResponse
from calorie_counter.api.security import require_api_token
from calorie_counter.app_logging import configure_logging
from calorie_counter.config import parse_cors_origins
from calorie_counter.containers import AppContainer
from calorie_counter.domain.errors import (
    CalorieLookupError,
    InputError,
    MissingEnergyDataError,
    NoCandidatesError,
    UpstreamError,
)

_ERROR_STATUS: tuple[tuple[type[CalorieLookupError], HTTPStatus], ...] = (
    (InputError, HTTPStatus.BAD_REQUEST),
    (NoCandidatesError, HTTPStatus.NOT_FOUND),
    (MissingEnergyDataError, HTTPStatus.UNPROCESSABLE_ENTITY),
    (UpstreamError, HTTPStatus.SERVICE_UNAVAILABLE),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Calorie Counter", lifespan=lifespan)
    app.state.container = container
    app.state.limiter = container.rate_limiter
    app.add_middleware(SlowAPIMiddleware)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s %s - %.0fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origin),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CalorieLookupError)
    async def calorie_error_handler(
        request: Request, exc: CalorieLookupError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        message = str(exc)
        if isinstance(exc, NoCandidatesError):
            message = f"Dish not found: {message}"
        elif isinstance(exc, UpstreamError):
            message = f"Food lookup failed: {message}"
        logger.warning("Calorie lookup failed (%s): %s", status_code.value, exc)
        return _error_response(status_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = [_describe_validation_error(error) for error in exc.errors()]
        if len(messages) == 1:
            message = messages[0]
        elif messages:
            message = f"Please fix the following errors: {', '.join(messages)}"
        else:
            message = "Invalid input data"
        return _error_response(
            HTTPStatus.BAD_REQUEST,
            message,
            error="Validation Error",
            details=messages if len(messages) > 1 else None,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(
            HTTPStatus(exc.status_code),
            str(exc.detail),
            headers=exc.headers,
        )

    def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> Response:
        response = _error_response(
            HTTPStatus.TOO_MANY_REQUESTS, "Too many requests, please try again later"
        )
        return request.app.state.limiter._inject_headers(  # noqa: SLF001
            response, request.state.view_rate_limit
        )

    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, "Something went wrong"
        )

    @app.get("/health")
    @container.rate_limiter.exempt
    async def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "ok",
            "message": "Calorie Counter API is running",
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "environment": state_container.settings.environment,
        }

    @app.post(
        "/get-calories",
        response_model=CalorieResponse,
        response_model_exclude_none=True,
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            422: {"model": ErrorResponse},
            429: {"model": ErrorResponse},
            503: {"model": ErrorResponse},
        },
    )
    async def get_calories(
        body: CalorieRequest,
        request: Request,
        token: str | None = Depends(require_api_token),
    ) -> CalorieResponse:
        """Estimate calories and macronutrients for a dish."""
        state_container: AppContainer = request.app.state.container
        breakdown = await state_container.nutrition_service.calculate(
            body.dish_name, body.servings
        )
        logger.info(
            "Calorie calculation successful: dish=%s servings=%s total_calories=%s "
            "authenticated=%s",
            body.dish_name,
            body.servings,
            breakdown.total_calories,
            token is not None,
        )
        return CalorieResponse.from_breakdown(breakdown)

    return app


def _status_for(exc: CalorieLookupError) -> HTTPStatus:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return HTTPStatus.INTERNAL_SERVER_ERROR


def _describe_validation_error(error: Mapping[str, Any]) -> str:
    location = error.get("loc") or ()
    field = ".".join(str(part) for part in location if part != "body")
    message = str(error.get("msg", "Invalid value"))
    return f"{field}: {message}" if field else message


def _error_response(
    status_code: HTTPStatus,
    message: str,
    *,
    error: str | None = None,
    details: list[str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=error or status_code.phrase,
        message=message,
        status_code=status_code.value,
        details=details,
    )
    return JSONResponse(
        status_code=status_code.value,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )
