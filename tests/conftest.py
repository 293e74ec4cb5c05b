from __future__ import annotations

from datetime import datetime, timedelta

import pytest
import pytz
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings
from repositories.storage import MemStorage


class FakeClock:
    """Controllable time source for storage timestamps."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 1, 9, 0, tzinfo=pytz.UTC))


@pytest.fixture
def storage(clock: FakeClock) -> MemStorage:
    return MemStorage(clock=clock)


@pytest.fixture
def app():
    return create_app(Settings(seed_sample_data=False, timezone="UTC"))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload() -> dict:
    return {
        "username": "jdoe",
        "password": "secret",
        "email": "jdoe@company.com",
        "firstName": "Jane",
        "lastName": "Doe",
    }


@pytest.fixture
def employee_payload() -> dict:
    return {
        "userId": 1,
        "employeeId": "EMP-100",
        "hireDate": "2024-01-01",
        "department": "hr",
        "position": "Recruiter",
        "employmentType": "full_time",
    }
