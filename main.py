# Import necessary FastAPI components
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from pydantic import ValidationError
import logging
from datetime import datetime
from redis.asyncio import Redis

# Import application routes and custom error handlers
from src.routers import search_routes
from src.services.site_search import SiteSearchOrchestrator, ValidationError as SearchValidationError
from src.utils.exception_handlers import (
    http_exception_handler,
    pydantic_validation_error_handler,
    search_validation_error_handler,
    validation_exception_handler
)

# Import middleware
from src.middleware.logging_middleware import LoggingMiddleware
from src.middleware.rate_limit_middleware import RateLimitMiddleware

# Import configuration
from src.core.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)


async def connect_redis():
    """Connect to Redis when configured; None means caching and rate limiting stay in memory."""
    if not settings.redis_url:
        logger.info("REDIS_URL not set. Response caching disabled, using in-memory rate limiting.")
        return None

    try:
        redis = Redis.from_url(
            url=settings.redis_url,
            decode_responses=True,
            socket_timeout=5,  # Redis timeout
            socket_connect_timeout=5  # Redis connection timeout
        )
        await redis.ping()
        logger.info("Redis connection established successfully")
        return redis
    except Exception as e:
        logger.warning(f"Redis connection failed: {str(e)}. Using in-memory rate limiting.")
        return None


# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Initialize application state
    app.state.settings = settings
    app.state.redis = await connect_redis()

    # Build the search index once per process
    site_search = SiteSearchOrchestrator(app.state.redis)
    document_count = await site_search.rebuild_index()
    app.state.site_search = site_search
    logger.info(f"Search index ready with {document_count} documents")

    yield

    # Close Redis connection if it exists
    if app.state.redis:
        try:
            await app.state.redis.close()
            logger.info("Redis connection closed successfully")
        except Exception as e:
            logger.warning(f"Error closing Redis connection: {str(e)}")


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Search API for legal glossary terms, criminal charges, diversion programs, "
                "expungement rules, court preparation and rights information",
    version=settings.app_version,
    default_response_class=ORJSONResponse,
    lifespan=lifespan
)

# CORS Configuration
logger.info(f"Effective CORS Origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_methods,
    allow_headers=settings.cors_headers,
)

# Search endpoints are the only public traffic worth limiting tightly
RATE_LIMIT_PATH_LIMITS = {
    f"{settings.api_prefix}/search*": (settings.search_rate_limit, settings.search_rate_window),
}

app.add_middleware(
    RateLimitMiddleware,
    default_limit=60,  # 60 requests per minute by default
    default_window=60,  # 1 minute window
    path_limits=RATE_LIMIT_PATH_LIMITS,
    exclude_paths=set(settings.untracked_paths)
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# Register custom exception handlers
# These ensure consistent error responses across the API
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ValidationError, pydantic_validation_error_handler)
app.add_exception_handler(SearchValidationError, search_validation_error_handler)


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint for monitoring system status

    Returns a status response indicating the API is operational and the status of its dependencies.
    """
    health_status = {
        "status": "healthy",
        "timestamp": str(datetime.now()),
        "version": settings.app_version,
        "dependencies": {
            "redis": "not_configured",
            "search_index": "not_ready"
        },
        "total_documents": 0
    }

    # Check Redis health
    try:
        if getattr(request.app.state, "redis", None):
            redis_ping = await request.app.state.redis.ping()
            health_status["dependencies"]["redis"] = "healthy" if redis_ping else "unhealthy"
    except Exception as e:
        logger.error(f"Redis health check error: {str(e)}")
        health_status["dependencies"]["redis"] = "unhealthy"

    site_search = getattr(request.app.state, "site_search", None)
    if site_search is not None:
        search_health = await site_search.health_check()
        if search_health["index_ready"]:
            health_status["dependencies"]["search_index"] = "healthy"
        health_status["dependencies"]["response_cache"] = search_health["cache"]
        health_status["total_documents"] = search_health["total_documents"]

    # Update overall status if any dependency is unhealthy
    if any(status == "unhealthy" for status in health_status["dependencies"].values()):
        health_status["status"] = "unhealthy"

    return ORJSONResponse(content=health_status)


# Include all routers with appropriate prefixes
api_prefix = settings.api_prefix

# Search routes
app.include_router(
    search_routes.router,
    prefix=api_prefix,
    tags=["Search"]
)
