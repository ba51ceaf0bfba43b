"""
Recetario API - Database Configuration.

SQLAlchemy engine, session factory, and declarative base for ORM models.
PostgreSQL connection with connection pooling and validation, SQLite for
local development.
LAZY INITIALIZATION: Engine connects on first use, not at import time.
"""

from typing import Generator, Optional
import logging

from sqlalchemy import create_engine, event, text, Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from settings import settings

logger = logging.getLogger(__name__)

# Declarative base for ORM models
Base = declarative_base()

# Global engine and session factory (initialized lazily)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None

# Largest value an Integer primary key holds on every supported dialect
MAX_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """Whether ``value`` can name a row; anything else cannot exist."""
    return 1 <= value <= MAX_ID


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""

    @event.listens_for(engine, "connect")
    def on_connect(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_engine() -> Engine:
    """
    Get or create the SQLAlchemy engine (lazy initialization).

    Returns:
        Engine: SQLAlchemy engine instance.
    """
    global _engine
    if _engine is None:
        logger.info("Creating database engine...")
        try:
            # Handle both PostgreSQL and SQLite URLs
            if settings.is_sqlite:
                _engine = create_engine(
                    settings.DATABASE_URL,
                    echo=False,
                    connect_args={"check_same_thread": False},  # SQLite specific
                )
                enable_sqlite_foreign_keys(_engine)
            else:
                # PostgreSQL with connection pooling and validation
                _engine = create_engine(
                    settings.DATABASE_URL,
                    echo=False,
                    pool_size=5,
                    max_overflow=10,
                    pool_pre_ping=True,      # Validate connections before use
                    pool_recycle=3600,       # Recycle connections every hour
                    connect_args={
                        "connect_timeout": 10,
                        "application_name": "recetario-backend",
                    },
                )
            logger.info("Database engine created successfully")
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}")
            raise
    return _engine


def get_session_factory() -> sessionmaker:
    """
    Get or create the session factory (lazy initialization).

    Returns:
        sessionmaker: SQLAlchemy session factory.
    """
    global _SessionLocal
    if _SessionLocal is None:
        engine = get_engine()
        _SessionLocal = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Yields a database session and ensures proper cleanup after request.

    Yields:
        Session: SQLAlchemy database session.

    Example:
        @router.get("/recipes")
        async def list_recipes(db: Session = Depends(get_db)):
            return recipes_service.list_recipes(db)
    """
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables that do not exist yet."""
    # Register models on the metadata before create_all
    import recetario.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables ensured")


def ping() -> bool:
    """Test database connectivity."""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        return False
