from contextlib import contextmanager
import logging
from typing import Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, create_engine

from .config import DATABASE_URL, SQL_ECHO

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401

logger = logging.getLogger(__name__)


def create_db_engine(database_url: Optional[str] = None, echo: bool = SQL_ECHO) -> Engine:
    """Build the SQLAlchemy engine for ``database_url`` (defaults to config)."""
    url = database_url or DATABASE_URL
    logger.debug("Creating engine for %s", url.split("@")[-1])

    if url.startswith("sqlite"):
        # Handlers run in the threadpool, so connections cross threads.
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Dependency to get a database session bound to the app's engine."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session(engine: Engine):
    """Get a database session (context manager style).

    This is a convenience function for use outside of FastAPI dependencies.
    Usage:
        with get_session(engine) as session:
            # do something with session
    """
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


def create_tables(engine: Engine) -> None:
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=engine)
