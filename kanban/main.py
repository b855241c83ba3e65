from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .config import CORS_ORIGINS
from .database import create_db_engine, create_tables, make_session_factory
from .routers import tasks

logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None, cors_origins: Optional[list] = None) -> FastAPI:
    """Build the API around ``engine`` (a new one from config when omitted)."""
    if engine is None:
        engine = create_db_engine()
    if cors_origins is None:
        cors_origins = CORS_ORIGINS

    # Create tables on startup
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_tables(app.state.engine)
        logger.info("Kanban Task API started")
        yield

    app = FastAPI(
        title="Kanban Task API",
        description="Task tracking API for a kanban board",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    # Cross-origin requests stay disabled unless origins are configured
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(tasks.router, prefix="/api", tags=["tasks"])

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Database error"})

    @app.get("/")
    def read_root():
        return {"message": "Kanban Task API"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
