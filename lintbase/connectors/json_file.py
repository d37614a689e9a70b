"""Offline connector reading a JSON export of a document database.

Accepted layouts:
    {"collections": {"users": [{"id": "u1", "name": "Ada"}, ...], ...}}
    {"users": [{"id": "u1", "name": "Ada"}, ...], ...}

A document's "id" key is used as its identifier and is not treated as a
field; documents without one are identified by their position.
"""

import json
from pathlib import Path

from lintbase.connectors.base import BaseConnector, map_document
from lintbase.core.models import NormalizedDocument
from lintbase.exceptions import ConnectorError
from lintbase.utils.logging import logger

ID_KEY = "id"


class JsonFileConnector(BaseConnector):
    name = "json"

    def __init__(self, path: str | Path):
        self.path = Path(path).resolve()
        self._collections: dict[str, list] = {}

    def connect(self) -> None:
        if not self.path.exists():
            raise ConnectorError(
                f"Export file not found: {self.path}",
                hint="Pass the correct path with --file <path>",
            )
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConnectorError(
                f"Failed to parse export file: {self.path} ({e})",
                hint="The export must be a JSON object mapping collection names to document lists.",
            ) from e

        if isinstance(data, dict) and isinstance(data.get("collections"), dict):
            data = data["collections"]

        if not isinstance(data, dict) or not all(isinstance(v, list) for v in data.values()):
            raise ConnectorError(
                f"Unexpected export layout in {self.path}",
                hint='Expected {"<collection>": [ {...}, ... ]}',
            )

        self._collections = data
        logger.info("loaded export {path} ({n} collections)", path=str(self.path), n=len(data))

    def get_collections(self) -> list[str]:
        return list(self._collections)

    def sample_documents(self, collection: str, limit: int) -> list[NormalizedDocument]:
        documents = []
        for index, raw in enumerate(self._collections.get(collection, [])[:limit]):
            if not isinstance(raw, dict):
                raw = {"value": raw}
            data = {k: v for k, v in raw.items() if k != ID_KEY}
            documents.append(map_document(raw.get(ID_KEY, index), collection, data))
        return documents
