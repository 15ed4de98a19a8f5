"""Pytest configuration and fixtures for testing.

This module provides shared fixtures for database testing using in-memory SQLite
for fast and isolated test execution.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from taskboard_svc.models.base import Base
from taskboard_svc.api.app import app
from taskboard_svc.database import get_db
from taskboard_svc.schemas.board import BoardCreate
from taskboard_svc.services.board_service import create_board
import taskboard_svc.database


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite engine with all tables.

    Yields:
        SQLAlchemy Engine instance configured for in-memory SQLite.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing.

    Yields:
        SQLAlchemy Session instance for database operations.
    """
    SessionLocal = sessionmaker(
        bind=db_engine,
        autoflush=False,
        expire_on_commit=False
    )

    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a FastAPI test client with database dependency override.

    Yields:
        TestClient instance configured with test database session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def board(db_session) -> dict:
    """A freshly created board with its default statuses."""
    return create_board(BoardCreate(title="Sprint 1"), db_session)


@pytest.fixture(scope="function")
def clean_db_state():
    """Reset the module-level engine before and after the test."""
    taskboard_svc.database._reset_db_state()

    yield

    taskboard_svc.database._reset_db_state()
