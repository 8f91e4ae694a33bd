from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from snowflake.connector.errors import Error as SnowflakeError

from snowman.adapter import (
    extract_connection_intent,
    get_model_output_dirpath,
    get_passphrase,
    get_pydantic_options,
    get_snowflake_connection,
)
from snowman.config import get_settings
from snowman.domain.config import SnowmanConfig, load_config
from snowman.domain.values import resolve_optional
from snowman.errors import SnowmanError
from snowman.utils.logging import configure_logging
from snowman.utils.masking import mask_secret

app = typer.Typer(help="Snowflake connection tooling for snowman.")

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to snowman.toml (default from SNOWMAN_CONFIG).",
)


def _load(config_path: Optional[Path]) -> SnowmanConfig:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return load_config(config_path or settings.config_path)


def _rows_table(rows: List[dict[str, Any]]) -> Table:
    table = Table(box=box.SIMPLE_HEAVY)
    if not rows:
        table.add_column("(no rows)")
        return table
    for column in rows[0]:
        table.add_column(str(column))
    for row in rows:
        table.add_row(*("" if value is None else str(value) for value in row.values()))
    return table


@app.command()
def info(config_path: Optional[Path] = ConfigOption) -> None:
    """
    Show effective configuration values (secrets masked).
    """
    try:
        config = _load(config_path)
    except SnowmanError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    intent = extract_connection_intent(config)
    options = get_pydantic_options(config)
    password = resolve_optional(intent.password)

    lines = [
        f"output_dir={get_model_output_dirpath(config)}",
        f"model_name_prefix={options.model_name_prefix!r} model_name_suffix={options.model_name_suffix!r}",
    ]
    for field in ("user", "account", "warehouse", "role", "database", "schema_"):
        value = resolve_optional(getattr(intent, field))
        lines.append(f"{field.rstrip('_')}={value if value is not None else '<unresolved>'}")
    lines.append(f"private_key={'set' if resolve_optional(intent.private_key) else '<unresolved>'}")
    lines.append(f"private_key_path={resolve_optional(intent.private_key_path) or '<unresolved>'}")
    lines.append(f"passphrase provided={bool(get_passphrase(config))}")
    lines.append(f"password={mask_secret(password) if password is not None else '<unresolved>'}")
    typer.echo("\n".join(lines))


@app.command()
def query(
    sql: str = typer.Argument(..., help="SQL statement to run."),
    config_path: Optional[Path] = ConfigOption,
    as_json: bool = typer.Option(False, "--json", help="Print rows as JSON."),
) -> None:
    """
    Connect using the configuration file and run one query.
    """
    try:
        config = _load(config_path)
        connection = get_snowflake_connection(config)
    except SnowmanError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    try:
        rows = asyncio.run(connection.execute(sql))
    except SnowflakeError as exc:
        typer.echo(f"Query failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(rows, indent=2, default=str))
    else:
        Console().print(_rows_table(rows))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
