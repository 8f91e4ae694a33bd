"""
Infrastructure package for snowman.

Centralizes Snowflake connectivity: the connector-backed client, the
connection handle and the logic that chooses how to authenticate.
"""

from snowman.infrastructure.client import (
    SnowflakeClient,
    SnowflakeClientConfig,
    SnowflakeRow,
    SnowflakeSession,
)
from snowman.infrastructure.connection import Connection
from snowman.infrastructure.establisher import establish, resolve_passphrase, select_auth_method

__all__ = [
    "SnowflakeClient",
    "SnowflakeClientConfig",
    "SnowflakeRow",
    "SnowflakeSession",
    "Connection",
    "establish",
    "resolve_passphrase",
    "select_auth_method",
]
