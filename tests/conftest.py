from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app


@pytest.fixture()
def db_session():
    """
    Session bound to a private in-memory SQLite database.

    StaticPool keeps one connection alive so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        # Not used as a context manager: the lifespan hook (logging setup,
        # table creation against DATABASE_URL) stays out of unit tests.
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def task_payload() -> dict:
    return {
        "title": "Write report",
        "description": "Quarterly numbers",
        "due_date": "2026-11-01T09:30:00Z",
        "completed": False,
    }
