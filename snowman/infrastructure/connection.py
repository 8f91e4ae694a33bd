"""
Connection handle for snowman.

A `Connection` owns one `SnowflakeClient`. It is built through
`from_key_pair` or `from_password`, which log the (masked) settings they were
given before constructing the client, and it exposes a single operation:
`execute`.
"""

from __future__ import annotations

from typing import List, Union

from snowman.domain.models import KeyPair, KeyPairFromFile, Password
from snowman.infrastructure.client import SnowflakeClient, SnowflakeClientConfig, SnowflakeRow
from snowman.utils.logging import get_logger
from snowman.utils.masking import mask_secret

log = get_logger(__name__)


def _log_settings(config: SnowflakeClientConfig) -> None:
    log.debug(f"account: {config.account}")
    log.debug(f"warehouse: {config.warehouse}")
    log.debug(f"role: {config.role}")
    log.debug(f"database: {config.database}")
    log.debug(f"schema: {config.schema}")


class Connection:
    """
    Authenticated handle used to run queries.

    Each `execute` call opens its own session; nothing is cached between calls.
    Not safe for concurrent use unless the caller serializes access.
    """

    def __init__(self, client: SnowflakeClient) -> None:
        self._client = client

    @property
    def client(self) -> SnowflakeClient:
        return self._client

    @classmethod
    def from_password(
        cls,
        username: str,
        method: Password,
        config: SnowflakeClientConfig,
    ) -> "Connection":
        log.debug("Using password authentication")
        log.debug(f"username: {username}")
        log.debug(f"password: {mask_secret(method.password)}")
        _log_settings(config)

        return cls(SnowflakeClient(username, method, config))

    @classmethod
    def from_key_pair(
        cls,
        username: str,
        method: Union[KeyPair, KeyPairFromFile],
        config: SnowflakeClientConfig,
    ) -> "Connection":
        log.debug("Using key pair authentication")
        if isinstance(method, KeyPairFromFile):
            log.debug(f"private key path: {method.path}")
        log.debug(f"username: {username}")
        log.debug(f"passphrase provided: {bool(method.passphrase)}")
        _log_settings(config)

        return cls(SnowflakeClient(username, method, config))

    async def execute(self, query: str) -> List[SnowflakeRow]:
        """
        Open a session, run `query` and return its rows in server order.

        Connector errors from login or query execution propagate unchanged.
        """
        session = await self._client.create_session()
        try:
            return await session.query(query)
        finally:
            try:
                await session.close()
            except Exception:
                log.warning("Failed to close Snowflake session", exc_info=True)


__all__ = ["Connection"]
