import logging

from dotenv import load_dotenv
load_dotenv()  # Load .env file before importing settings

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from core.config import settings
from core.exceptions import register_exception_handlers
from core.rate_limiter import limiter, rate_limit_exceeded_handler, RateLimits

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    # Settings validation is done automatically in core/config.py on import

    app = FastAPI(
        title="Flight Routes API",
        description="Location and transportation catalog with flight route search",
        version="1.0.0",
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # CORS middleware - browser frontend sends a bearer token
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Domain errors and request validation -> JSON error bodies
    register_exception_handlers(app)

    # Register routers
    from adapters.http.api.flight_routes.routers import (
        auth_router,
        location_router,
        transportation_router,
        route_router,
    )
    app.include_router(auth_router, prefix="/api")
    app.include_router(location_router, prefix="/api")
    app.include_router(transportation_router, prefix="/api")
    app.include_router(route_router, prefix="/api")

    @app.get("/health")
    @limiter.limit(RateLimits.HEALTH)
    async def health_check(request: Request):
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.ENVIRONMENT}

    logger.info(f"Flight Routes API configured ({settings.ENVIRONMENT})")
    return app


app = create_app()
