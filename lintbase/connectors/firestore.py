"""Google Cloud Firestore connector (firebase-admin)."""

import json
from pathlib import Path

from lintbase.connectors.base import BaseConnector, map_document
from lintbase.core.models import NormalizedDocument
from lintbase.exceptions import ConnectorError
from lintbase.utils.logging import logger


class FirestoreConnector(BaseConnector):
    """Reads collections through a service-account credential file."""

    name = "firestore"

    def __init__(self, key_path: str | Path):
        self.key_path = Path(key_path).resolve()
        self._db = None

    def connect(self) -> None:
        import firebase_admin
        from firebase_admin import credentials, firestore

        if not self.key_path.exists():
            raise ConnectorError(
                f"Service account file not found: {self.key_path}",
                hint="Pass the correct path with --key <path>",
            )

        try:
            with open(self.key_path, encoding="utf-8") as f:
                service_account = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConnectorError(
                f"Failed to parse service account JSON: {self.key_path}",
                hint="Make sure the file is valid JSON exported from the Firebase console.",
            ) from e

        try:
            app = firebase_admin.get_app()
        except ValueError:
            try:
                app = firebase_admin.initialize_app(credentials.Certificate(service_account))
            except ValueError as e:
                raise ConnectorError(
                    f"Invalid service account credential: {e}",
                    hint="Export a fresh key from Project settings > Service accounts.",
                ) from e

        self._db = firestore.client(app)
        logger.info("connected to firestore project {project}", project=app.project_id)

    @property
    def db(self):
        if self._db is None:
            raise ConnectorError("Firestore connector used before connect()")
        return self._db

    def get_collections(self) -> list[str]:
        from google.api_core import exceptions as google_exceptions

        try:
            return [c.id for c in self.db.collections()]
        except google_exceptions.GoogleAPIError as e:
            raise ConnectorError(
                f"Failed to list collections: {e}",
                hint="Make sure the service account has the Cloud Datastore User role.",
            ) from e

    def sample_documents(self, collection: str, limit: int) -> list[NormalizedDocument]:
        from google.api_core import exceptions as google_exceptions

        try:
            snapshots = self.db.collection(collection).limit(limit).stream()
            return [map_document(snap.id, collection, snap.to_dict() or {}) for snap in snapshots]
        except google_exceptions.GoogleAPIError as e:
            raise ConnectorError(f'Failed to sample documents from "{collection}": {e}') from e
