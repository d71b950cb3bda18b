"""Shared pytest fixtures for the gallery API tests."""

import os
import tempfile

# Must be set before artgallery modules read them at import time
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="artgallery-logs-"))

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from artgallery.core.dependencies import get_db
from artgallery.core.jwt import create_principal_token
from artgallery.db.session import Base
from artgallery.main import app
from artgallery.models.user import User
from artgallery.services import user_service


@pytest.fixture
def session_factory() -> Generator[sessionmaker, None, None]:
    """In-memory SQLite database shared by every session in one test.

    Yields:
        Session factory bound to a fresh schema
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield factory
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """TestClient whose ``get_db`` dependency uses the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    """Factory creating committed users directly in the author directory."""

    def _make_user(nickname: str, email: str | None = None, contact: str | None = "010-0000-0000") -> User:
        user = user_service.create_user(
            db_session,
            nickname=nickname,
            email=email or f"{nickname}@gallery.io",
            contact=contact,
            password_hash="not-a-real-hash",
        )
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def auth_headers() -> Callable[[User], dict]:
    """Build a bearer header the way /auth/login would for ``user``."""

    def _auth_headers(user: User) -> dict:
        token = create_principal_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
