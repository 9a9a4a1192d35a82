from __future__ import annotations

from contextlib import contextmanager
from typing import Any, BinaryIO, Callable, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from main import app
from ntools.config import ClientSettings
from ntools.services import get_file_service, get_mail_service
from ntools.types import MailMessage

API_URL = "https://ntools.example.com"


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("NTOOLS_API_URL", API_URL)
    monkeypatch.setenv("NTOOLS_TIMEOUT", "5")


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def client_settings() -> ClientSettings:
    return ClientSettings(api_url=API_URL, timeout_seconds=5.0, verify_ssl=True)


class FakeStorage:
    """In-memory FileStorage that records calls."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.objects: dict[tuple[str, str], bytes] = {}
        self.content_types: dict[tuple[str, str], Optional[str]] = {}
        self.calls = 0

    def get_file_url(self, bucket: str, file_name: Optional[str]) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        return f"https://storage.example.com/{bucket}/{file_name}" if file_name else ""

    def insert_from_stream(
        self, stream: BinaryIO, bucket: str, name: str, content_type: Optional[str] = None
    ) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        self.objects[(bucket, name)] = stream.read()
        self.content_types[(bucket, name)] = content_type
        return name


class FakeMailer:
    """MailSender that records messages instead of sending them."""

    def __init__(self, result: bool = True, error: Optional[Exception] = None) -> None:
        self.result = result
        self.error = error
        self.sent: List[MailMessage] = []

    def send_mail(self, message: MailMessage) -> bool:
        if self.error:
            raise self.error
        self.sent.append(message)
        return self.result


@contextmanager
def override_dependency(dependency: Callable[..., Any], fake: Any) -> Generator[Any, None, None]:
    """Swap a FastAPI dependency for a fake for the duration of the block."""
    app.dependency_overrides[dependency] = lambda: fake
    try:
        yield fake
    finally:
        app.dependency_overrides.pop(dependency, None)


@pytest.fixture()
def storage() -> Generator[FakeStorage, None, None]:
    with override_dependency(get_file_service, FakeStorage()) as fake:
        yield fake


@pytest.fixture()
def mailer() -> Generator[FakeMailer, None, None]:
    with override_dependency(get_mail_service, FakeMailer()) as fake:
        yield fake
