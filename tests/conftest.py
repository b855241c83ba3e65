# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from kanban.database import create_tables, make_session_factory
from kanban.main import create_app


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps one connection so the threadpool workers serving
    requests all see the same in-memory database.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    db = make_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def app(engine: Engine) -> FastAPI:
    return create_app(engine=engine, cors_origins=[])


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
