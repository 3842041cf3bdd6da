# tests/conftest.py
from __future__ import annotations

import os
import uuid
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from profile_stage.core.security import create_access_token
from profile_stage.db.session import Base
from profile_stage.db.session import get_db as app_get_session
from profile_stage.main import app as fastapi_app
from profile_stage.models import (
    FOLLOW_STATUS_ACCEPTED,
    VISIBILITY_PRIVATE,
    Follow,
    Post,
    PrivacySetting,
    Profile,
)

TEST_DB_URL = "sqlite://"

_POST_TIME_BASE = datetime(2024, 1, 1, tzinfo=UTC)
_POST_MINUTES = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_profile(db_session: Session) -> Callable[..., Profile]:
    """Return a factory persisting profiles, optionally private."""

    def _make(username: str, *, private: bool = False, **fields: Any) -> Profile:
        profile = Profile(id=uuid.uuid4(), username=username, display_name=username.title(), **fields)
        db_session.add(profile)
        if private:
            db_session.add(PrivacySetting(user_id=profile.id, profile_visibility=VISIBILITY_PRIVATE))
        db_session.flush()
        db_session.refresh(profile)
        return profile

    return _make


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory persisting content items with increasing timestamps."""

    def _make(
        author: Profile,
        text: str = "hello",
        *,
        media: list[dict[str, Any]] | None = None,
        created_at: datetime | None = None,
    ) -> Post:
        if created_at is None:
            created_at = _POST_TIME_BASE + timedelta(minutes=next(_POST_MINUTES))
        post = Post(user_id=author.id, text=text, media=media, created_at=created_at)
        db_session.add(post)
        db_session.flush()
        db_session.refresh(post)
        return post

    return _make


@pytest.fixture()
def follow(db_session: Session) -> Callable[..., Follow]:
    """Return a factory persisting follow edges."""

    def _make(follower: Profile, following: Profile, status: str = FOLLOW_STATUS_ACCEPTED) -> Follow:
        edge = Follow(follower_id=follower.id, following_id=following.id, status=status)
        db_session.add(edge)
        db_session.flush()
        return edge

    return _make


@pytest.fixture()
def alice(make_profile: Callable[..., Profile]) -> Profile:
    """A private profile."""
    return make_profile("alice", private=True, follower_count=2, following_count=None)


@pytest.fixture()
def bob(make_profile: Callable[..., Profile]) -> Profile:
    """A public profile."""
    return make_profile("bob")


@pytest.fixture()
def auth_headers() -> Callable[[Profile], dict[str, str]]:
    """Return a helper building authorization headers for a profile."""

    def _headers(profile: Profile) -> dict[str, str]:
        token = create_access_token(profile.id)
        return {"Authorization": f"Bearer {token}"}

    return _headers
