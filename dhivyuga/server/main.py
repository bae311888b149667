"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(CORS, request logging), registers the exception handlers and includes all
API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dhivyuga.core.database import init_db
from dhivyuga.core.logging_config import get_logger, setup_logging
from dhivyuga.core.monitoring import initialize_logfire

from .api.v1 import (
    analytics,
    auth,
    categories,
    deities,
    health,
    languages,
    mantras,
    recitation,
    search,
    translations,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Handles startup and shutdown events for the FastAPI application.
    """
    # Startup
    try:
        logger.info("Starting up Dhivyuga API...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Dhivyuga API...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Dhivyuga API

    Search and browse a catalog of Hindu mantras with their deities, categories,
    recitation guidance and translations, and manage the catalog as an admin.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(search.router, prefix=constant.API_V1_STR)
app.include_router(mantras.router, prefix=f"{constant.API_V1_STR}/mantras")
app.include_router(translations.router, prefix=f"{constant.API_V1_STR}/mantras")
app.include_router(deities.router, prefix=f"{constant.API_V1_STR}/deities")
app.include_router(categories.router, prefix=f"{constant.API_V1_STR}/categories")
app.include_router(recitation.recitation_counts_router, prefix=f"{constant.API_V1_STR}/recitation-counts")
app.include_router(recitation.recitation_times_router, prefix=f"{constant.API_V1_STR}/recitation-times")
app.include_router(recitation.kalams_router, prefix=f"{constant.API_V1_STR}/kalams")
app.include_router(recitation.time_ranges_router, prefix=f"{constant.API_V1_STR}/time-ranges")
app.include_router(languages.router, prefix=f"{constant.API_V1_STR}/languages")
app.include_router(analytics.router, prefix=f"{constant.API_V1_STR}/analytics")
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth")
