"""Pytest configuration and shared fixtures for scheduling tests.

Provides common fixtures for:
- A fixed clock (Monday 2025-01-06 09:00 UTC)
- An in-memory SQLite session with all tables created
- Case / judge factories
- A FastAPI TestClient authenticated as a judge
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-signing-tokens-0001")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import uuid
from datetime import date, datetime, timedelta
from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.v1.deps import get_current_user
from app.db.database import Base, SessionLocal, engine, get_db
from app.db.models import Case, CaseStatus, Document, User, UserRole
from app.main import app

MONDAY = date(2025, 1, 6)
SATURDAY = date(2025, 1, 4)
NOW = datetime(2025, 1, 6, 9, 0, 0)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for pure scheduling components")
    config.addinivalue_line(
        "markers", "integration: Tests that touch the database or the HTTP layer"
    )
    config.addinivalue_line("markers", "edge_case: Edge case and boundary condition tests")


def build_case(
    title: str = "Civil suit",
    age_days: float = 0,
    ipc_tags: Optional[List[str]] = None,
    entities: Optional[List[str]] = None,
    documents: int = 0,
    now: datetime = NOW,
    case_number: Optional[str] = None,
    status: CaseStatus = CaseStatus.pending,
) -> Case:
    """Transient (unsaved) case, usable by the pure scoring functions."""
    case_id = uuid.uuid4()
    return Case(
        id=case_id,
        case_number=case_number or f"CASE-{case_id.hex[:8].upper()}",
        title=title,
        status=status,
        ipc_tags=list(ipc_tags or []),
        entities=list(entities or []),
        documents=[Document(title=f"Doc {i + 1}") for i in range(documents)],
        estimated_duration=30,
        previous_hearings=[],
        created_at=now - timedelta(days=age_days),
        updated_at=now - timedelta(days=age_days),
    )


@pytest.fixture
def case_builder() -> Callable[..., Case]:
    """Factory for transient cases (nothing is saved)."""
    return build_case


@pytest.fixture
def now() -> datetime:
    """Fixed clock used for scoring."""
    return NOW


@pytest.fixture
def db_session():
    """Fresh schema per test on the shared in-memory engine."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def judge(db_session) -> User:
    user = User(email="judge@court.test", full_name="Hon. Test Judge", role=UserRole.judge)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def make_case(db_session) -> Callable[..., Case]:
    """Factory that persists a case and returns it."""

    def _make(**kwargs) -> Case:
        case = build_case(**kwargs)
        db_session.add(case)
        db_session.commit()
        db_session.refresh(case)
        return case

    return _make


@pytest.fixture
def client(db_session, judge):
    """TestClient with the database and caller identity overridden."""

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_current_user] = lambda: judge
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
