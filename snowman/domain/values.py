"""
Deferred configuration values.

A deferred value is either written inline in the configuration file or points
at an environment variable. Nothing is read until `resolve()` is called, and
every call can fail independently with a `ResolutionError`.

    user = "ME"                                 -> LiteralValue(value="ME")
    password = { env = "SNOWFLAKE_PASSWORD" }   -> EnvValue(env="SNOWFLAKE_PASSWORD")
"""

from __future__ import annotations

import os
from typing import Annotated, Any, Mapping, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field

from snowman.errors import ResolutionError


class LiteralValue(BaseModel):
    """Value given directly in the configuration. An empty string is unresolved."""

    value: str

    model_config = {"frozen": True, "extra": "forbid"}

    def resolve(self) -> str:
        if self.value == "":
            raise ResolutionError("literal value is empty")
        return self.value

    def describe(self) -> str:
        return "literal"


class EnvValue(BaseModel):
    """Value read from an environment variable at resolution time."""

    env: str = Field(..., min_length=1, description="Environment variable name.")

    model_config = {"frozen": True, "extra": "forbid"}

    def resolve(self, environ: Optional[Mapping[str, str]] = None) -> str:
        source = os.environ if environ is None else environ
        value = source.get(self.env)
        if value is None:
            raise ResolutionError(f"environment variable {self.env} is not set")
        if value == "":
            raise ResolutionError(f"environment variable {self.env} is empty")
        return value

    def describe(self) -> str:
        return f"env:{self.env}"


def _coerce_deferred(raw: Any) -> Any:
    # Bare strings in the config file are literals.
    if isinstance(raw, str):
        return {"value": raw}
    return raw


DeferredValue = Annotated[
    Union[LiteralValue, EnvValue],
    BeforeValidator(_coerce_deferred),
]


def resolve_required(field: str, value: Optional[DeferredValue]) -> str:
    """
    Resolve a value that must be present.

    Raises
    ------
    ResolutionError
        If the value is absent or its source cannot be read. The error names
        `field`.
    """
    if value is None:
        raise ResolutionError("value is not configured", field=field)
    try:
        return value.resolve()
    except ResolutionError as exc:
        raise exc.for_field(field) from exc


def resolve_optional(value: Optional[DeferredValue]) -> Optional[str]:
    """Resolve a value whose absence is not an error; any failure yields None."""
    if value is None:
        return None
    try:
        return value.resolve()
    except ResolutionError:
        return None


__all__ = [
    "LiteralValue",
    "EnvValue",
    "DeferredValue",
    "resolve_required",
    "resolve_optional",
]
