import pytest
from fastapi.testclient import TestClient

from totp_demo.core.config import settings
from totp_demo.main import app
from totp_demo.registry import AccountRegistry
from totp_demo.routes import accounts as account_routes
from totp_demo.services.account_service import AccountService


@pytest.fixture(autouse=True)
def event_log(tmp_path, monkeypatch):
    """Keep audit rows out of the working directory"""
    path = tmp_path / "events.csv"
    monkeypatch.setattr(settings, "EVENT_LOG_FILE", str(path))
    return path


@pytest.fixture
def registry():
    return AccountRegistry()


@pytest.fixture
def service(registry):
    return AccountService(registry=registry)


@pytest.fixture
def client(service, monkeypatch):
    # Fresh registry behind the routes for every test
    monkeypatch.setattr(account_routes, "service", service)
    return TestClient(app)
