"""
Adapter between the configuration file model and the rest of snowman.

Usage:
    from snowman.adapter import get_snowflake_connection
    from snowman.domain.config import load_config

    config = load_config("snowman.toml")
    connection = get_snowflake_connection(config)
    rows = await connection.execute("SELECT CURRENT_VERSION()")
"""

from __future__ import annotations

from pathlib import Path

from snowman.domain.config import SnowmanConfig
from snowman.domain.models import ConnectionIntent, PydanticOptions
from snowman.infrastructure.connection import Connection
from snowman.infrastructure.establisher import establish, resolve_passphrase


def get_pydantic_options(config: SnowmanConfig) -> PydanticOptions:
    return PydanticOptions(
        model_name_prefix=config.pydantic.model_name_prefix,
        model_name_suffix=config.pydantic.model_name_suffix,
    )


def get_model_output_dirpath(config: SnowmanConfig) -> Path:
    return config.model.output_dir


def extract_connection_intent(config: SnowmanConfig) -> ConnectionIntent:
    """Project the connection section onto a fresh `ConnectionIntent`."""
    connection = config.connection
    return ConnectionIntent(
        user=connection.user,
        account=connection.account,
        warehouse=connection.warehouse,
        role=connection.role,
        database=connection.database,
        schema_=connection.schema_,
        private_key=connection.private_key,
        private_key_path=connection.private_key_path,
        private_key_passphrase=connection.private_key_passphrase,
        password=connection.password,
    )


def get_passphrase(config: SnowmanConfig) -> bytes:
    """Private key passphrase as bytes, or b"" when absent or unresolvable."""
    return resolve_passphrase(extract_connection_intent(config))


def get_snowflake_connection(config: SnowmanConfig) -> Connection:
    """
    Build an authenticated `Connection` from `config`.

    See `snowman.infrastructure.establisher.establish` for the errors raised.
    """
    return establish(extract_connection_intent(config))


__all__ = [
    "extract_connection_intent",
    "get_model_output_dirpath",
    "get_passphrase",
    "get_pydantic_options",
    "get_snowflake_connection",
]
