"""Clients talking to the real FastAPI app in-process (TestClient is an httpx.Client)."""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from main import app
from ntools.clients import ClientRegistry, DocumentClient, FileClient, MailClient, StringClient
from ntools.config import ClientSettings
from ntools.services import get_mail_service
from ntools.types import RemoteOperationError, TransportError
from tests.conftest import FakeMailer, FakeStorage, override_dependency
from tests.fixtures.envelopes import mail_message

BASE = "http://testserver"


@pytest.fixture()
def http() -> Generator[TestClient, None, None]:
    with TestClient(app, base_url=BASE) as test_client:
        yield test_client


@pytest.fixture()
def settings() -> ClientSettings:
    return ClientSettings(api_url=BASE)


def test_document_round_trip(http: TestClient, settings: ClientSettings) -> None:
    documents = DocumentClient(settings, http)
    assert documents.validate_tax_id("123.456.789-09") is True
    assert documents.validate_tax_id("11.222.333/0001-81") is True
    with pytest.raises(RemoteOperationError) as exc:
        documents.validate_tax_id("11.111.111/1111-11")
    assert exc.value.message == "Invalid CPF or CNPJ"


def test_string_round_trip(http: TestClient, settings: ClientSettings) -> None:
    strings = StringClient(settings, http)
    assert strings.generate_slug("Ação / Reação 2024") == "acao-reacao-2024"
    assert strings.generate_slug("") == ""
    assert strings.only_digits("(11) 98765-4321") == "11987654321"
    assert strings.only_digits("no digits") == ""
    assert strings.generate_short_unique_string()


def test_file_round_trip(
    http: TestClient, settings: ClientSettings, storage: FakeStorage
) -> None:
    files = FileClient(settings, http)
    assert files.upload_file("docs", "a b.txt", "text/plain", b"hello") == "a b.txt"
    assert storage.objects[("docs", "a b.txt")] == b"hello"
    assert (
        files.get_file_url("docs", "notes/a b.txt")
        == "https://storage.example.com/docs/notes/a b.txt"
    )


def test_empty_upload_surfaces_as_transport_error(
    http: TestClient, settings: ClientSettings, storage: FakeStorage
) -> None:
    files = FileClient(settings, http)
    with pytest.raises(TransportError) as exc:
        files.upload_file("docs", "a.txt", "text/plain", b"")
    assert exc.value.status_code == 400
    assert storage.calls == 0


def test_mail_round_trip(http: TestClient, settings: ClientSettings, mailer: FakeMailer) -> None:
    mail = ClientRegistry.get("mail", settings, http)
    assert isinstance(mail, MailClient)
    assert mail.is_valid_email("ana.souza+news@example.com.br") is True
    assert mail.send_mail(mail_message()) is True
    assert mailer.sent[0].subject == "Test Subject"


def test_backing_exception_reaches_caller_as_transport_error(
    http: TestClient, settings: ClientSettings
) -> None:
    mail = MailClient(settings, http)
    with override_dependency(get_mail_service, FakeMailer(error=RuntimeError("boom"))):
        with pytest.raises(TransportError) as exc:
            mail.send_mail(mail_message())
    assert exc.value.status_code == 500
    assert exc.value.body == "boom"


@pytest.mark.parametrize("text", [".", ".."])
def test_dot_only_segments_reach_their_route(
    http: TestClient, settings: ClientSettings, storage: FakeStorage, text: str
) -> None:
    strings = StringClient(settings, http)
    assert strings.generate_slug(text) == ""
    assert strings.only_digits(text) == ""
    files = FileClient(settings, http)
    assert files.get_file_url("bucket", text) == f"https://storage.example.com/bucket/{text}"
    assert files.get_file_url("bucket", f"docs/{text}") == (
        f"https://storage.example.com/bucket/docs/{text}"
    )
