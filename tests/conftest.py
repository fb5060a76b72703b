"""Shared fixtures: a freshly seeded store and an app serving it."""

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.main import create_app
from employee_api.app.services.employee_store import EmployeeStore

SEED_COUNT = 5


@pytest.fixture
def store() -> EmployeeStore:
    return EmployeeStore.seeded(SEED_COUNT, "ENG")


@pytest.fixture
def client(store):
    app = create_app(Settings(project_name="Test Directory", api_version="9.9.9"), store=store)
    with TestClient(app) as test_client:
        yield test_client
