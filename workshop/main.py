import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from .api.deps import get_repository
from .api.main import api_router
from .core.config import settings
from .core.observability import (
    REQUEST_COUNT,
    get_logger,
    set_correlation_id,
    setup_structured_logging,
)
from .domain.shared.exceptions import DomainError, ErrorType

logger = get_logger(__name__)

ERROR_STATUS = {
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorType.BUSINESS_RULE: status.HTTP_409_CONFLICT,
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware for request correlation, logging and request counts."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        start_time = time.time()
        method = request.method
        path = request.url.path

        logger.info(
            "Request started",
            method=method,
            path=path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            REQUEST_COUNT.labels(method=method, endpoint=path, status="500").inc()
            logger.error(
                "Request failed",
                method=method,
                path=path,
                duration_seconds=time.time() - start_time,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        REQUEST_COUNT.labels(
            method=method, endpoint=path, status=str(response.status_code)
        ).inc()
        response.headers["X-Correlation-ID"] = correlation_id
        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=time.time() - start_time,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_structured_logging()
    repository = get_repository()
    with repository.transaction():
        snapshot = repository.snapshot()
    logger.info(
        "Application started",
        project_name=settings.PROJECT_NAME,
        environment=settings.ENVIRONMENT,
        api_version=settings.API_V1_STR,
        technicians=len(snapshot.technicians),
        bays=len(snapshot.bays),
        business_hours=f"{settings.WORK_START_HOUR:02d}:00-{settings.WORK_END_HOUR:02d}:00",
    )
    yield
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Workshop Scheduler - vehicle service intake and shop-floor allocation API

    Estimates job durations from vehicle condition and shop load, assigns
    technicians and service bays under capacity limits, queues work when the
    shop is full, and projects completion times onto business hours.
    """,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors that escaped a route into HTTP responses."""
    logger.warning(
        "Domain error",
        path=request.url.path,
        error_type=exc.error_type.value,
        message=exc.message,
    )
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.error_type, status.HTTP_400_BAD_REQUEST),
        content={"detail": exc.to_dict()},
    )


@app.get("/metrics", tags=["metrics"], include_in_schema=False)
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
