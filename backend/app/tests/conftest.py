"""
Shared fixtures: an isolated in-memory database and a controllable calendar day.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.api.dependencies import get_today
from app.core.security import create_access_token, get_password_hash
from app.db.session import build_engine, get_db, init_db
from app.models.mood import MoodType, Reason
from app.models.user import User


class FakeCalendar:
    """Holds the day the API treats as today."""

    def __init__(self, day: date):
        self.day = day

    def advance(self, days: int = 1) -> date:
        self.day = self.day + timedelta(days=days)
        return self.day


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://")
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def file_sessions(tmp_path):
    """Session factory on a file-backed database, one connection per session."""
    engine = build_engine(f"sqlite:///{tmp_path / 'moods.db'}")
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def calendar():
    return FakeCalendar(date(2024, 5, 1))


@pytest.fixture
def client(db_session, calendar):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: calendar.day
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mood_types(db_session):
    types = {name: MoodType(name=name) for name in ("Happy", "Sad", "Calm")}
    db_session.add_all(types.values())
    db_session.add_all([Reason(name="Work"), Reason(name="Family")])
    db_session.commit()
    return types


@pytest.fixture
def user(db_session):
    user = User(email="mood@example.com", hashed_password=get_password_hash("secret123"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
