from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.collection.parsing import utc_now_iso
from app.config import AppSettings, get_app_settings
from app.context import AppContext, build_app_context
from app.schemas.dashboard import HealthResponse

logger = logging.getLogger(__name__)

ANNOUNCED_ENDPOINTS = (
    ("Dashboard API", "/api/dashboard/overview"),
    ("Intelligence API", "/api/intelligence/feed"),
    ("Deals API", "/api/deals/pipeline"),
    ("Health Check", "/health"),
)


def _configure_logging(settings: AppSettings) -> None:
    """
    Configure root logging once for the API process.
    """

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def _catch_all_errors(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    Turn any uncaught handler exception into a generic 500 body.
    """

    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error method=%s path=%s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Something broke!"},
        )


def _lifespan_for(settings: AppSettings):
    @asynccontextmanager
    async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
        context: AppContext = application.state.context
        logger.info(
            "Sales intelligence backend ready port=%s templates=%d",
            settings.port,
            len(context.registry),
        )
        for label, path in ANNOUNCED_ENDPOINTS:
            logger.info("%s: http://localhost:%s%s", label, settings.port, path)
        yield

    return _lifespan


def create_app(
    *,
    context: AppContext | None = None,
    settings: AppSettings | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    `context` defaults to one built from environment settings; tests inject
    their own to control HTTP sessions and randomness.
    """

    settings = settings or get_app_settings()
    _configure_logging(settings)

    application = FastAPI(
        title="Sales Intelligence API",
        version="1.0.0",
        lifespan=_lifespan_for(settings),
    )
    application.state.context = context or build_app_context()

    application.middleware("http")(_catch_all_errors)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from app.api.routers import collection_router, dashboard_router, templates_router

    application.include_router(dashboard_router)
    application.include_router(collection_router)
    application.include_router(templates_router)

    @application.get("/health", response_model=HealthResponse)
    def healthcheck() -> HealthResponse:
        context: AppContext = application.state.context
        return HealthResponse(
            status="ok",
            timestamp=utc_now_iso(),
            data_counts=context.store.counts(),
        )

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_app_settings().port)
