"""
Thin async client over snowflake-connector-python.

`SnowflakeClient` validates credentials up front (key material is parsed when
the client is built) but does not talk to the network until
`create_session()` is awaited. The connector is blocking, so its calls run in
worker threads.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import snowflake.connector
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from snowflake.connector import DictCursor

from snowman.domain.models import AuthMethod, KeyPair, KeyPairFromFile, Password
from snowman.errors import AuthenticationError

SnowflakeRow = Dict[str, Any]

KEY_PAIR_AUTHENTICATOR = "SNOWFLAKE_JWT"


@dataclass(frozen=True)
class SnowflakeClientConfig:
    """Non-secret session settings."""

    account: str
    warehouse: Optional[str] = None
    role: Optional[str] = None
    database: Optional[str] = None
    schema: Optional[str] = None


def load_private_key(pem: str, passphrase: bytes = b"") -> bytes:
    """
    Parse PEM key material into the PKCS#8 DER bytes the connector expects.

    An empty passphrase means the key is not encrypted.

    Raises
    ------
    AuthenticationError
        If the PEM cannot be parsed or decrypted.
    """
    try:
        key = serialization.load_pem_private_key(
            pem.encode("utf-8"),
            password=passphrase or None,
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise AuthenticationError(f"Invalid private key: {exc}") from exc

    return key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


class SnowflakeSession:
    """One open connector connection."""

    def __init__(self, conn: Any) -> None:
        self._conn = conn

    def _run(self, sql: str) -> List[SnowflakeRow]:
        with self._conn.cursor(DictCursor) as cur:
            cur.execute(sql)
            return list(cur.fetchall())

    async def query(self, sql: str) -> List[SnowflakeRow]:
        """Run `sql` and return every row as a column-name keyed dict."""
        return await asyncio.to_thread(self._run, sql)

    async def close(self) -> None:
        await asyncio.to_thread(self._conn.close)


class SnowflakeClient:
    """
    Credentials plus session settings, ready to open sessions.

    Parameters
    ----------
    username : str
        Snowflake login name.
    auth_method : AuthMethod
        One of `KeyPair`, `KeyPairFromFile` or `Password`.
    config : SnowflakeClientConfig
        Account and session defaults.

    Raises
    ------
    AuthenticationError
        If the username or account is empty, or key material is invalid.
    """

    def __init__(
        self,
        username: str,
        auth_method: AuthMethod,
        config: SnowflakeClientConfig,
    ) -> None:
        if not username:
            raise AuthenticationError("Username must not be empty")
        if not config.account:
            raise AuthenticationError("Account must not be empty")

        self.username = username
        self.config = config
        self._auth_kwargs = self._build_auth_kwargs(auth_method)

    @staticmethod
    def _build_auth_kwargs(auth_method: AuthMethod) -> Dict[str, Any]:
        if isinstance(auth_method, (KeyPair, KeyPairFromFile)):
            return {
                "authenticator": KEY_PAIR_AUTHENTICATOR,
                "private_key": load_private_key(auth_method.pem, auth_method.passphrase),
            }
        if isinstance(auth_method, Password):
            return {"password": auth_method.password}
        raise AuthenticationError(f"Unsupported authentication method: {type(auth_method).__name__}")

    @property
    def auth_kind(self) -> str:
        return "key_pair" if "private_key" in self._auth_kwargs else "password"

    def connect_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for `snowflake.connector.connect`."""
        kwargs: Dict[str, Any] = {"user": self.username, "account": self.config.account}
        for name in ("warehouse", "role", "database", "schema"):
            value = getattr(self.config, name)
            if value is not None:
                kwargs[name] = value
        kwargs.update(self._auth_kwargs)
        return kwargs

    async def create_session(self) -> SnowflakeSession:
        """Log in and return a new session."""
        conn = await asyncio.to_thread(snowflake.connector.connect, **self.connect_kwargs())
        return SnowflakeSession(conn)


__all__ = [
    "SnowflakeRow",
    "SnowflakeClientConfig",
    "SnowflakeClient",
    "SnowflakeSession",
    "load_private_key",
]
