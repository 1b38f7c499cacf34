# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from src.database import get_db
from src.events import event_bus
from src.main import app
from src.models import Staff
from src.models.base import Base
from src.models.enums import Position, StaffRole
from src.services import auth_service

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Drop handlers subscribed by a test."""
    yield
    event_bus.clear()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_staff(db_session):
    """Factory creating persisted staff members."""

    def _make_staff(
        username: str,
        role: StaffRole,
        position: Position | None = None,
        department: str | None = None,
        permission_overrides: list[str] | None = None,
    ) -> Staff:
        staff = Staff(
            username=username,
            email=f"{username}@example.com",
            full_name=username.replace("_", " ").title(),
            role=role,
            position=position,
            department=department or role.value,
            permission_overrides=permission_overrides or [],
            is_active=True,
        )
        db_session.add(staff)
        db_session.commit()
        db_session.refresh(staff)
        return staff

    return _make_staff


@pytest.fixture
def admin_staff(make_staff) -> Staff:
    return make_staff("admin", StaffRole.ADMIN, Position.MANAGER)


@pytest.fixture
def reception_staff(make_staff) -> Staff:
    return make_staff("front_desk", StaffRole.RECEPTION, Position.RECEPTION_STAFF)


@pytest.fixture
def fitness_trainer(make_staff) -> Staff:
    return make_staff("trainer_kim", StaffRole.FITNESS, Position.TRAINER)


@pytest.fixture
def fitness_lead(make_staff) -> Staff:
    return make_staff("lead_park", StaffRole.FITNESS, Position.TEAM_LEAD)


@pytest.fixture
def tennis_coach(make_staff) -> Staff:
    return make_staff("coach_lee", StaffRole.TENNIS, Position.TENNIS_COACH)


@pytest.fixture
def login(client, db_session):
    """Return a function that switches the test client to a staff member's session."""

    def _login(staff: Staff) -> TestClient:
        token = auth_service.create_session(db_session, staff.id)
        client.cookies.set("session", token)
        return client

    return _login
