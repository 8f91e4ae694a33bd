"""
Connection establishment: pick one authentication method and build a
`Connection`.

Methods are tried in a fixed order and the first source that resolves wins:

1. `private_key`       -> KeyPair
2. `private_key_path`  -> KeyPairFromFile (file read as UTF-8)
3. `password`          -> Password (required at this point)

Only *resolution* failures fall through. Once a source resolves, any later
failure (unreadable key file, malformed PEM, rejected credentials) is final.
"""

from __future__ import annotations

from pathlib import Path

from snowman.domain.models import AuthMethod, ConnectionIntent, KeyPair, KeyPairFromFile, Password
from snowman.domain.values import resolve_optional, resolve_required
from snowman.errors import PrivateKeyReadError
from snowman.infrastructure.client import SnowflakeClientConfig
from snowman.infrastructure.connection import Connection
from snowman.utils.logging import get_logger

log = get_logger(__name__)


def resolve_passphrase(intent: ConnectionIntent) -> bytes:
    """Passphrase as bytes; empty when absent or unresolvable."""
    passphrase = resolve_optional(intent.private_key_passphrase)
    return (passphrase or "").encode("utf-8")


def expand_key_path(raw_path: str) -> Path:
    """
    Expand `~` in a private key path.

    Raises
    ------
    PrivateKeyReadError
        If the home directory cannot be determined.
    """
    try:
        return Path(raw_path).expanduser()
    except RuntimeError as exc:
        raise PrivateKeyReadError(raw_path, "cannot expand home directory") from exc


def read_private_key(path: Path) -> str:
    """
    Read a whole private key file as UTF-8 text.

    Raises
    ------
    PrivateKeyReadError
        If the file is missing, unreadable or not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PrivateKeyReadError(path, "file is not valid UTF-8") from exc
    except OSError as exc:
        raise PrivateKeyReadError(path, exc.strerror or str(exc)) from exc


def select_auth_method(intent: ConnectionIntent) -> AuthMethod:
    """
    Choose the authentication method for `intent`.

    Raises
    ------
    PrivateKeyReadError
        If `private_key_path` resolved but the file could not be read.
    ResolutionError
        If neither key source resolved and `password` does not resolve either.
    """
    private_key = resolve_optional(intent.private_key)
    if private_key is not None:
        return KeyPair(pem=private_key, passphrase=resolve_passphrase(intent))

    private_key_path = resolve_optional(intent.private_key_path)
    if private_key_path is not None:
        path = expand_key_path(private_key_path)
        pem = read_private_key(path)
        return KeyPairFromFile(path=path, pem=pem, passphrase=resolve_passphrase(intent))

    return Password(password=resolve_required("password", intent.password))


def establish(intent: ConnectionIntent) -> Connection:
    """
    Resolve `intent` and build an authenticated `Connection`.

    Raises
    ------
    ResolutionError
        A required field (user, account, warehouse, role, database, or the
        password fallback) did not resolve. The error names the field.
    PrivateKeyReadError
        The selected key file could not be read.
    AuthenticationError
        The client rejected the resolved credentials or settings.
    """
    username = resolve_required("user", intent.user)
    config = SnowflakeClientConfig(
        account=resolve_required("account", intent.account),
        warehouse=resolve_required("warehouse", intent.warehouse),
        role=resolve_required("role", intent.role),
        database=resolve_required("database", intent.database),
        schema=resolve_optional(intent.schema_),
    )

    method = select_auth_method(intent)
    log.info(f"Connecting to account {config.account} using {method.kind} authentication")

    if isinstance(method, Password):
        return Connection.from_password(username, method, config)
    return Connection.from_key_pair(username, method, config)


__all__ = [
    "establish",
    "expand_key_path",
    "read_private_key",
    "resolve_passphrase",
    "select_auth_method",
]
