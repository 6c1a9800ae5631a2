"""
DevEvent API - Main Application Entry Point

Event listing and booking backend:
- Explicit normalize -> validate -> persist pipelines for events and bookings
- Referential check that keeps bookings pointing at existing events
- One lazily-established, process-wide database connection
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devevent.core.config import get_settings
from devevent.core.logging import setup_logging, get_logger
from devevent.core.metrics import metrics_endpoint
from devevent.api.errors import register_exception_handlers
from devevent.api.router import api_router
from devevent.api.middleware import RequestLoggingMiddleware
from devevent.db.connection import ConnectionCache

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    # Connects on first use, so a missing DATABASE_URL surfaces on the first query
    app.state.connections = ConnectionCache(settings)

    yield

    await app.state.connections.dispose()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Event listing and booking API",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint. Does not open a database connection."""
    connections = getattr(app.state, "connections", None)
    connected = connections is not None and connections.engine is not None
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": "connected" if connected else "not_connected",
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
