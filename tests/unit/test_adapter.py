from __future__ import annotations

from pathlib import Path

import pytest

from snowman.adapter import (
    extract_connection_intent,
    get_model_output_dirpath,
    get_passphrase,
    get_pydantic_options,
    get_snowflake_connection,
)
from snowman.domain.config import SnowmanConfig
from snowman.domain.models import KeyPairFromFile, Password, PydanticOptions
from snowman.domain.values import LiteralValue
from snowman.errors import PrivateKeyReadError

MISSING_ENV = "SNOWMAN_TEST_MISSING"


def _config(**connection: object) -> SnowmanConfig:
    return SnowmanConfig.model_validate(
        {
            "pydantic": {"model_name_prefix": "Sf", "model_name_suffix": "Model"},
            "model": {"output_dir": "generated/models"},
            "connection": {
                "user": "ME",
                "account": "xy12345",
                "warehouse": "WH",
                "role": "ROLE",
                "database": "DB",
                **connection,
            },
        }
    )


def test_get_pydantic_options_copies_affixes() -> None:
    assert get_pydantic_options(_config()) == PydanticOptions(
        model_name_prefix="Sf", model_name_suffix="Model"
    )


def test_get_model_output_dirpath() -> None:
    assert get_model_output_dirpath(_config()) == Path("generated/models")


def test_extract_connection_intent_keeps_deferred_values() -> None:
    intent = extract_connection_intent(_config(schema="PUBLIC", password={"env": "PW"}))

    assert intent.schema_ == LiteralValue(value="PUBLIC")
    assert intent.password is not None
    assert intent.password.describe() == "env:PW"
    assert intent.private_key is None


def test_get_passphrase(monkeypatch) -> None:
    monkeypatch.delenv(MISSING_ENV, raising=False)

    assert get_passphrase(_config(private_key_passphrase="pp")) == b"pp"
    assert get_passphrase(_config(private_key_passphrase={"env": MISSING_ENV})) == b""
    assert get_passphrase(_config()) == b""


def test_get_snowflake_connection_with_password(fake_client) -> None:
    get_snowflake_connection(_config(password="secretpw"))

    assert fake_client[0].auth_method == Password(password="secretpw")


def test_get_snowflake_connection_with_key_file(fake_client, key_file) -> None:
    path = key_file("PEMDATA")

    get_snowflake_connection(_config(private_key_path=str(path), password="ignored"))

    method = fake_client[0].auth_method
    assert isinstance(method, KeyPairFromFile)
    assert method.pem == "PEMDATA"


def test_get_snowflake_connection_missing_key_file(fake_client, tmp_path) -> None:
    with pytest.raises(PrivateKeyReadError):
        get_snowflake_connection(
            _config(private_key_path=str(tmp_path / "missing.pem"), password="ignored")
        )

    assert fake_client == []
