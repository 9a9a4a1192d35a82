from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ntools.routers import document as document_routes
from ntools.routers import mail as mail_routes
from ntools.routers import string as string_routes


def test_validate_valid_cpf(client: TestClient) -> None:
    r = client.get("/Document/validarCpfOuCnpj/12345678909")
    assert r.status_code == 200
    assert r.json() == {"success": True}


def test_validate_formatted_cnpj_with_slash(client: TestClient) -> None:
    r = client.get("/Document/validarCpfOuCnpj/11.222.333%2F0001-81")
    assert r.status_code == 200
    assert r.json() == {"success": True}


def test_invalid_document_collapses_into_success_false(client: TestClient) -> None:
    r = client.get("/Document/validarCpfOuCnpj/11111111111")
    assert r.status_code == 200
    assert r.json() == {"success": False, "message": "Invalid CPF or CNPJ"}


def test_is_valid_email(client: TestClient) -> None:
    assert client.get("/Mail/isValidEmail/ana%40example.com").json() == {"success": True}
    body = client.get("/Mail/isValidEmail/not-an-email").json()
    assert body["success"] is False
    assert body["message"]


def test_generate_slug(client: TestClient) -> None:
    r = client.get("/String/generateSlug/Ol%C3%A1%2C%20Mundo%21")
    assert r.json() == {"success": True, "value": "ola-mundo"}


def test_generate_slug_of_empty_text(client: TestClient) -> None:
    r = client.get("/String/generateSlug/")
    assert r.status_code == 200
    assert r.json() == {"success": True, "value": ""}


def test_only_numbers(client: TestClient) -> None:
    r = client.get("/String/onlyNumbers/123.456.789-09")
    assert r.json() == {"success": True, "value": "12345678909"}


def test_generate_short_unique_string(client: TestClient) -> None:
    first = client.get("/String/generateShortUniqueString").json()["value"]
    second = client.get("/String/generateShortUniqueString").json()["value"]
    assert first and second and first != second


@pytest.mark.parametrize(
    "module, attribute, path",
    [
        (document_routes, "validate_cpf_or_cnpj", "/Document/validarCpfOuCnpj/123"),
        (mail_routes, "is_valid_email", "/Mail/isValidEmail/a%40b.com"),
        (string_routes, "generate_slug", "/String/generateSlug/x"),
        (string_routes, "only_numbers", "/String/onlyNumbers/x"),
        (string_routes, "generate_short_unique_string", "/String/generateShortUniqueString"),
    ],
)
def test_backing_failure_is_plain_text_500(
    client: TestClient, monkeypatch: pytest.MonkeyPatch, module, attribute: str, path: str  # type: ignore[no-untyped-def]
) -> None:
    def _boom(*_args: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(module, attribute, _boom)

    r = client.get(path)
    assert r.status_code == 500
    assert r.text == "boom"
    assert r.headers["content-type"].startswith("text/plain")


def test_unknown_route_is_plain_text_404(client: TestClient) -> None:
    r = client.get("/Nope")
    assert r.status_code == 404
    assert r.headers["content-type"].startswith("text/plain")
