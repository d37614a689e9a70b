"""Connector registry.

Maps a database name (the CLI's DATABASE argument) to its connector class.
"""

from lintbase.connectors.base import (
    UNDEFINED,
    BaseConnector,
    calculate_depth,
    estimate_size_bytes,
    infer_type,
    map_document,
)
from lintbase.connectors.firestore import FirestoreConnector
from lintbase.connectors.json_file import JsonFileConnector
from lintbase.exceptions import ConnectorError

CONNECTOR_REGISTRY: dict[str, type[BaseConnector]] = {
    FirestoreConnector.name: FirestoreConnector,
    JsonFileConnector.name: JsonFileConnector,
}


def build_connector(
    database: str, key: str | None = None, file: str | None = None
) -> BaseConnector:
    """Instantiate the connector for `database` from CLI-style options."""
    name = database.lower()
    if name not in CONNECTOR_REGISTRY:
        raise ConnectorError(
            f'"{database}" is not a supported database.',
            hint=f"Supported connectors: {', '.join(CONNECTOR_REGISTRY)}",
        )

    if name == FirestoreConnector.name:
        if not key:
            raise ConnectorError(
                "A service account key is required for Firestore.",
                hint="Usage: lintbase scan firestore --key ./service-account.json",
            )
        return FirestoreConnector(key)

    if not file:
        raise ConnectorError(
            "An export file is required for the json connector.",
            hint="Usage: lintbase scan json --file ./export.json",
        )
    return JsonFileConnector(file)


__all__ = [
    "CONNECTOR_REGISTRY",
    "UNDEFINED",
    "BaseConnector",
    "FirestoreConnector",
    "JsonFileConnector",
    "build_connector",
    "calculate_depth",
    "estimate_size_bytes",
    "infer_type",
    "map_document",
]
