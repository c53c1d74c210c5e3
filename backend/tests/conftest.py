"""Shared fixtures: in-memory database, API client, users and catalog."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  registers tables on Base.metadata
from database import Base, get_db, get_session_factory
from main import app
from models.locations import Location, LocationRecommendation, Mission
from models.user import User
from routers.rate_limit import limiter
from services.auth import create_access_token
from tests.fixtures.test_data import (
    ALL_LOCATIONS,
    INACTIVE_RECOMMENDATIONS,
    MISSIONS,
    RECOMMENDATIONS,
)


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_jwt_token(user: User) -> str:
    return create_access_token(user)


@pytest.fixture
def db_session() -> Session:
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session: Session) -> TestClient:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: TestingSessionLocal
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture(autouse=True)
def mock_sendgrid():
    """Keep tests off the network; individual tests may patch more narrowly."""
    with patch("services.email_service.SendGridAPIClient") as mock_class:
        mock_class.return_value.send.return_value = MagicMock(status_code=202)
        yield mock_class


@pytest.fixture
def test_user(db_session: Session) -> User:
    user = User(username="explorer", email="explorer@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> User:
    user = User(username="wanderer", email="wanderer@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def valid_jwt_token(test_user: User) -> str:
    return create_jwt_token(test_user)


@pytest.fixture
def auth_headers(valid_jwt_token: str) -> dict:
    return {"Authorization": f"Bearer {valid_jwt_token}"}


@pytest.fixture
def catalog(db_session: Session) -> dict:
    """Seed locations, missions and recommendations; returns rows keyed by id."""
    rows = {}
    for data in ALL_LOCATIONS:
        location = Location(**data)
        db_session.add(location)
        rows[location.id] = location
    db_session.flush()

    for data in MISSIONS:
        mission = Mission(**data)
        db_session.add(mission)
        rows[mission.id] = mission

    for rec_id, source, recommended, priority, reason in RECOMMENDATIONS:
        db_session.add(LocationRecommendation(
            id=rec_id,
            source_location_id=source,
            recommended_location_id=recommended,
            priority=priority,
            reason=reason,
            active=rec_id not in INACTIVE_RECOMMENDATIONS,
        ))

    db_session.commit()
    return rows
