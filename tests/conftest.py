# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.repositories.mem_storage import MemStorage


class RecordingSender:
    """Stands in for SMTP delivery; records every call."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[dict] = []

    def __call__(self, **kwargs):
        if self.fail:
            raise ConnectionError("SMTP server unreachable")
        self.sent.append(kwargs)
        return "<test@example.com>"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=None,
        SMTP_USERNAME="exports@example.com",
        SMTP_PASSWORD="secret",
        BUSINESS_EMAIL="sales@example.com",
    )


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def client(settings, storage, sender):
    app = create_app(settings, storage=storage, email_sender=sender)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_sender() -> RecordingSender:
    return RecordingSender(fail=True)
