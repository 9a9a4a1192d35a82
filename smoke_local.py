"""Simple script to exercise a locally running ntools server through the clients."""

from typing import Callable, List, Tuple

from ntools.clients import DocumentClient, MailClient, StringClient
from ntools.config import ClientSettings, get_client_settings
from ntools.types import NToolsError, TransportError


def run_check(name: str, call: Callable[[], object]) -> bool:
    print(f"\n{'='*60}")
    print(f"Checking: {name}")
    print(f"{'='*60}")
    try:
        print(f"Result: {call()!r}")
        return True
    except TransportError as e:
        if e.status_code is None:
            print("❌ ERROR: Could not connect to server!")
            print("   Make sure the server is running:")
            print("   hypercorn main:app --reload --log-level debug")
        else:
            print(f"❌ HTTP {e.status_code}: {e.body}")
        return False
    except NToolsError as e:
        print(f"✗ {type(e).__name__}: {e}")
        return False


def main() -> None:
    settings: ClientSettings = get_client_settings()
    print("🧪 Testing ntools locally")
    print("=" * 60)
    print(f"Server: {settings.base_url}")
    print("=" * 60)

    with DocumentClient(settings) as documents, StringClient(settings) as strings, MailClient(
        settings
    ) as mail:
        checks: List[Tuple[str, Callable[[], object]]] = [
            ("valid CPF", lambda: documents.validate_tax_id("123.456.789-09")),
            ("valid CNPJ", lambda: documents.validate_tax_id("11.222.333/0001-81")),
            ("invalid CPF", lambda: documents.validate_tax_id("111.111.111-11")),
            ("valid e-mail", lambda: mail.is_valid_email("ana@example.com")),
            ("slug", lambda: strings.generate_slug("Olá, Mundo!")),
            ("only digits", lambda: strings.only_digits("(11) 98765-4321")),
            ("short unique string", strings.generate_short_unique_string),
        ]
        results = [(name, run_check(name, call)) for name, call in checks]

    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    for name, ok in results:
        print(f"{'✓' if ok else '✗'} {name}")


if __name__ == "__main__":
    main()
