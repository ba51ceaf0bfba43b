# main.py
"""
Recetario API - Main Application.

FastAPI app with a relational (SQLAlchemy) backend.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sqlalchemy.exc import SQLAlchemyError

from settings import settings
from recetario import database
from recetario.middleware import SecurityHeadersMiddleware
from recetario.utils.errors import RecetarioException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")

# Import routers
from recetario.routes import auth, recipes, planner, user

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Recetario API...")
    try:
        database.init_db()
        logger.info("Database initialized successfully")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize database at startup: {e}")
        raise

    yield

    database.get_engine().dispose()
    logger.info("Recetario API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Recetario API",
    version=VERSION,
    description="Recipes, daily meal planning, pantry-based recommendations and calorie history",
    lifespan=lifespan
)

# CORS middleware - Allow frontend origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(SecurityHeadersMiddleware)


# Error handlers: every failure leaves as {"message": ...}
@app.exception_handler(RecetarioException)
async def recetario_exception_handler(request: Request, exc: RecetarioException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = [
        ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        for error in exc.errors()
    ]
    fields = [field for field in fields if field]
    message = "Invalid or missing fields"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path} database error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint - fast response without database dependency."""
    return {
        "status": "ok",
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION
    }


@app.get("/health/detailed")
async def health_check_detailed():
    """Detailed health check with database connectivity test."""
    db_ok = database.ping()
    return {
        "status": "ok" if db_ok else "degraded",
        "database": database.get_engine().dialect.name,
        "database_connected": db_ok,
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION
    }


# Include routers
app.include_router(auth.router, prefix="/api", tags=["Authentication"])
app.include_router(recipes.router, prefix="/api", tags=["Recipes"])
app.include_router(planner.router, prefix="/api/planner", tags=["Planner"])
app.include_router(user.router, prefix="/api/users", tags=["User"])


# Root endpoint
@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "Recetario API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health"
    }
