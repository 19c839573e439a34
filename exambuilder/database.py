"""Database utilities and setup."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from exambuilder.config import DATABASE_URL, DB_DIR


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine for the given URL."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, **kwargs)


# Create engine
engine = build_engine(DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Base class for models
class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Initialize database (create all tables)."""
    # Register models on the metadata before create_all
    from exambuilder.models import db as _db_models  # noqa: F401

    if bind is None:
        DB_DIR.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind or engine)
