"""
Pytest configuration for snowman.

Provides fixtures for:
- Building connection intents from plain strings
- Replacing the Snowflake client with a recording fake
- Generating real RSA key material for client tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from snowman.domain.models import ConnectionIntent
from snowman.infrastructure import connection as connection_module

KEY_PASSPHRASE = b"correct horse"


class FakeSnowflakeClient:
    """Records constructor arguments instead of validating credentials."""

    def __init__(self, username: str, auth_method: Any, config: Any) -> None:
        self.username = username
        self.auth_method = auth_method
        self.config = config


@pytest.fixture
def make_intent() -> Callable[..., ConnectionIntent]:
    """
    Build a ConnectionIntent with sensible required fields.

    Keyword arguments override or add fields; strings are taken as literals.
    """

    def _make(**overrides: Any) -> ConnectionIntent:
        fields: dict[str, Any] = {
            "user": "ME",
            "account": "xy12345",
            "warehouse": "COMPUTE_WH",
            "role": "ANALYST",
            "database": "ANALYTICS",
        }
        fields.update(overrides)
        return ConnectionIntent.model_validate(fields)

    return _make


@pytest.fixture
def fake_client(monkeypatch) -> list[FakeSnowflakeClient]:
    """
    Replace SnowflakeClient in the connection module; returns created clients.
    """
    created: list[FakeSnowflakeClient] = []

    class _Recording(FakeSnowflakeClient):
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            super().__init__(*args, **kwargs)
            created.append(self)

    monkeypatch.setattr(connection_module, "SnowflakeClient", _Recording)
    return created


@pytest.fixture(scope="session")
def key_passphrase() -> bytes:
    return KEY_PASSPHRASE


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def plain_pem(rsa_key: rsa.RSAPrivateKey) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture(scope="session")
def encrypted_pem(rsa_key: rsa.RSAPrivateKey) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.BestAvailableEncryption(KEY_PASSPHRASE),
    ).decode("utf-8")


@pytest.fixture
def key_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write PEM text to a file under tmp_path and return its path."""

    def _write(contents: str) -> Path:
        path = tmp_path / "rsa_key.p8"
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
