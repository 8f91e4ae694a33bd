"""
Domain package for snowman.

Exports the configuration schema, deferred values and connection models. Keep
this package free of I/O beyond reading the configuration file.
"""

from snowman.domain.config import (
    ConnectionConfig,
    ModelConfig,
    PydanticConfig,
    SnowmanConfig,
    load_config,
)
from snowman.domain.models import (
    AuthMethod,
    ConnectionIntent,
    KeyPair,
    KeyPairFromFile,
    Password,
    PydanticOptions,
)
from snowman.domain.values import DeferredValue, EnvValue, LiteralValue

__all__ = [
    "ConnectionConfig",
    "ModelConfig",
    "PydanticConfig",
    "SnowmanConfig",
    "load_config",
    "AuthMethod",
    "ConnectionIntent",
    "KeyPair",
    "KeyPairFromFile",
    "Password",
    "PydanticOptions",
    "DeferredValue",
    "EnvValue",
    "LiteralValue",
]
