"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from schedule_engine.api.v1.router import api_router
from schedule_engine.api.v1.endpoints.health import get_health
from schedule_engine.core.config import settings
from schedule_engine.core.exceptions import setup_exception_handlers
from schedule_engine.core.logging import setup_logging
from schedule_engine.core.rate_limit import limiter
from schedule_engine.deps import di_container


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Initializes logging and the DI container, closes the HTTP session on exit.
    """
    setup_logging()

    container = di_container.get_container()
    app.state.container = container

    yield

    await container.http_client().close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Availability and schedule reconciliation API",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    @app.get("/health", response_model=None, include_in_schema=False)
    async def root_health():
        """Liveness check; skips the data source ping."""
        return await get_health(check_data_source=False)

    setup_exception_handlers(app)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
