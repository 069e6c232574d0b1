"""Shared fixtures: an in-memory employee repository and a TestClient bound to it."""
import pytest
from fastapi.testclient import TestClient

from restaurant_staff.core.config import settings
from restaurant_staff.core.exceptions import StoreError
from restaurant_staff.domains.employees.service import employee_service
from restaurant_staff.main import app
from tests.fakes import FakeEmployeeRepository


@pytest.fixture
def fake_repo(monkeypatch):
    repo = FakeEmployeeRepository()
    monkeypatch.setattr(employee_service, "employee_repo", repo)
    return repo


@pytest.fixture
def client(fake_repo):
    return TestClient(app)


@pytest.fixture
def standard_envelope(monkeypatch):
    monkeypatch.setattr(settings, "RESPONSE_ENVELOPE", "standard")


@pytest.fixture
def store_failure(fake_repo):
    """Make every repository call fail the way an unreachable database would."""
    fake_repo.fail_with = StoreError("connection refused")
    return fake_repo
