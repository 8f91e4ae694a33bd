"""
snowman - resolve a declarative configuration into an authenticated Snowflake
connection.

The package covers:

- Loading `snowman.toml` and its deferred values (literals or environment variables)
- Choosing one authentication method: key material, key file, then password
- Building a `Connection` whose `execute` runs queries asynchronously

Secrets never reach the logs in full; passwords are shown masked and key pairs
only report whether a passphrase was provided.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from snowman.adapter import (
    get_model_output_dirpath,
    get_passphrase,
    get_pydantic_options,
    get_snowflake_connection,
)
from snowman.config import Settings, get_settings
from snowman.domain.config import SnowmanConfig, load_config
from snowman.errors import (
    AuthenticationError,
    ConfigurationError,
    PrivateKeyReadError,
    ResolutionError,
    SnowmanError,
)
from snowman.infrastructure.connection import Connection
from snowman.utils.logging import configure_logging, get_logger
from snowman.utils.masking import mask_secret

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Settings and configuration file
    "Settings",
    "get_settings",
    "SnowmanConfig",
    "load_config",
    # Adapter
    "get_model_output_dirpath",
    "get_passphrase",
    "get_pydantic_options",
    "get_snowflake_connection",
    # Connection
    "Connection",
    # Errors
    "SnowmanError",
    "ConfigurationError",
    "ResolutionError",
    "PrivateKeyReadError",
    "AuthenticationError",
    # Logging
    "configure_logging",
    "get_logger",
    "mask_secret",
]
