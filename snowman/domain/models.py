"""
Domain models for snowman.

`ConnectionIntent` is the normalized slice of the configuration needed to
authenticate. The `AuthMethod` variants are the three mutually exclusive ways
of doing so; which one is used is decided by
`snowman.infrastructure.establisher.select_auth_method`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from snowman.domain.values import DeferredValue


class PydanticOptions(BaseModel):
    """Affixes applied to generated model class names."""

    model_name_prefix: str = Field("", description="Prepended to every model name.")
    model_name_suffix: str = Field("", description="Appended to every model name.")

    model_config = {"frozen": True, "protected_namespaces": ()}


class ConnectionIntent(BaseModel):
    """
    Unresolved connection fields for a single connection attempt.
    """

    user: DeferredValue
    account: DeferredValue
    warehouse: DeferredValue
    role: DeferredValue
    database: DeferredValue
    schema_: Optional[DeferredValue] = None
    private_key: Optional[DeferredValue] = None
    private_key_path: Optional[DeferredValue] = None
    private_key_passphrase: Optional[DeferredValue] = None
    password: Optional[DeferredValue] = None

    model_config = {"frozen": True}


class KeyPair(BaseModel):
    """Key-pair auth with PEM material given directly."""

    kind: Literal["key_pair"] = "key_pair"
    pem: str = Field(..., repr=False)
    passphrase: bytes = Field(b"", repr=False)

    model_config = {"frozen": True}


class KeyPairFromFile(BaseModel):
    """Key-pair auth with PEM material read from `path`."""

    kind: Literal["key_pair_from_file"] = "key_pair_from_file"
    path: Path
    pem: str = Field(..., repr=False)
    passphrase: bytes = Field(b"", repr=False)

    model_config = {"frozen": True}


class Password(BaseModel):
    """Username/password auth."""

    kind: Literal["password"] = "password"
    password: str = Field(..., repr=False)

    model_config = {"frozen": True}


AuthMethod = Union[KeyPair, KeyPairFromFile, Password]


__all__ = [
    "PydanticOptions",
    "ConnectionIntent",
    "KeyPair",
    "KeyPairFromFile",
    "Password",
    "AuthMethod",
]
