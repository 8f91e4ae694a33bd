"""
Schema and loader for the `snowman.toml` configuration file.

The loader only parses and validates; no deferred value is resolved here.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from snowman.domain.values import DeferredValue
from snowman.errors import ConfigurationError

DEFAULT_CONFIG_FILENAME = "snowman.toml"


class PydanticConfig(BaseModel):
    """Naming options for generated pydantic models."""

    model_name_prefix: str = ""
    model_name_suffix: str = ""

    model_config = {"extra": "forbid", "protected_namespaces": ()}


class ModelConfig(BaseModel):
    """Where generated model files are written."""

    output_dir: Path = Field(Path("src/models"), description="Output directory for models.")

    model_config = {"extra": "forbid"}


class ConnectionConfig(BaseModel):
    """Snowflake connection section; every field is a deferred value."""

    user: DeferredValue
    account: DeferredValue
    warehouse: DeferredValue
    role: DeferredValue
    database: DeferredValue
    schema_: Optional[DeferredValue] = Field(None, alias="schema")
    private_key: Optional[DeferredValue] = None
    private_key_path: Optional[DeferredValue] = None
    private_key_passphrase: Optional[DeferredValue] = None
    password: Optional[DeferredValue] = None

    model_config = {"extra": "forbid", "populate_by_name": True}


class SnowmanConfig(BaseModel):
    """Shape of the whole configuration file."""

    pydantic: PydanticConfig = Field(default_factory=PydanticConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)
    connection: ConnectionConfig

    model_config = {"extra": "forbid"}


def load_config(path: Path | str = DEFAULT_CONFIG_FILENAME) -> SnowmanConfig:
    """
    Read and validate a configuration file.

    Raises
    ------
    ConfigurationError
        If the file is missing, is not valid TOML, or fails validation.
    """
    config_path = Path(path).expanduser()
    try:
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {exc}") from exc

    try:
        return SnowmanConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config in {config_path}: {exc}") from exc


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "PydanticConfig",
    "ModelConfig",
    "ConnectionConfig",
    "SnowmanConfig",
    "load_config",
]
