import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware

from .api.main import api_router
from .core.config import settings
from .core.observability import (
    get_logger,
    set_correlation_id,
    setup_metrics,
    setup_structured_logging,
)
from .domain.shared.exceptions import DomainError, ErrorType

logger = get_logger(__name__)

ERROR_STATUS_CODES = {
    ErrorType.NOT_FOUND: 404,
    ErrorType.BUSINESS_RULE: 409,
    ErrorType.CONSTRAINT_VIOLATION: 409,
    ErrorType.VALIDATION: 422,
    ErrorType.REPOSITORY: 503,
    ErrorType.NOTIFICATION: 502,
    ErrorType.CONFIGURATION: 500,
}


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Attach a correlation ID to each request and log its outcome."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_seconds=time.time() - start_time,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_structured_logging()
    setup_metrics()
    logger.info(
        "Application started",
        project_name=settings.PROJECT_NAME,
        environment=settings.ENVIRONMENT,
        metrics_enabled=settings.ENABLE_METRICS,
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)
app.add_middleware(ObservabilityMiddleware)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = ERROR_STATUS_CODES.get(exc.error_type, 500)
    if status_code >= 500:
        logger.error("Request failed", path=request.url.path, **exc.to_dict())
    return JSONResponse(status_code=status_code, content=exc.to_dict())


app.include_router(api_router, prefix=settings.API_V1_STR)
