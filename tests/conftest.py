# /tests/conftest.py

import os

# Point the application at a throwaway database before anything imports it.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.database import get_db
from app.db.models.generation_models import Generation
from app.db.models.user_models import User
from app.services.database_service import DatabaseService


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test, shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(session_factory):
    """A TestClient whose requests use the in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_gemini(monkeypatch):
    """Replaces the Gemini call with an AsyncMock that returns a small snippet."""
    mock = AsyncMock(return_value="print('hi')")
    monkeypatch.setattr("app.services.gemini_service.generate_code_text", mock)
    return mock


@pytest.fixture
def seed_generations(db_session):
    """
    Returns a helper that inserts `count` generations one minute apart, so
    that the newest-first order is unambiguous.
    """
    base_time = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def _seed(count, language="Python", user_id=None, start=0):
        records = [
            Generation(
                id=f"gen_{start + i:03d}",
                prompt=f"prompt {start + i}",
                language=language,
                code=f"code {start + i}",
                user_id=user_id,
                created_at=base_time + timedelta(minutes=start + i),
            )
            for i in range(count)
        ]
        db_session.add_all(records)
        db_session.commit()
        return records

    return _seed


@pytest.fixture
def seed_user(db_session):
    """
    Returns a helper that writes a User row directly. Registration is not
    part of this service, so the application has no way to create users.
    """
    def _seed(user_id, email=None, name=None):
        user = User(id=user_id, email=email, name=name)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _seed
