"""Shared plumbing for the CLI commands."""

from collections.abc import Callable

import click

from lintbase.connectors import build_connector
from lintbase.core.models import ScanResult
from lintbase.exceptions import ConfigError


def connector_options(func: Callable) -> Callable:
    """Attach the --key / --file options every command needs to reach a database."""
    func = click.option(
        "--file", "file", type=click.Path(dir_okay=False), help="JSON export to scan (json connector)"
    )(func)
    func = click.option(
        "--key", type=click.Path(dir_okay=False), help="Service account JSON (firestore connector)"
    )(func)
    return func


def validate_limit(limit: int) -> int:
    if limit < 1:
        raise ConfigError(
            f"--limit must be a positive integer (got {limit}).",
            hint="Example: --limit 100",
        )
    return limit


def sample_database(
    database: str,
    key: str | None,
    file: str | None,
    limit: int,
    collections: list[str] | None = None,
) -> ScanResult:
    """Build the connector for DATABASE and sample it."""
    connector = build_connector(database, key=key, file=file)
    return connector.scan(validate_limit(limit), collections or None)
