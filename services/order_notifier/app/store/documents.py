"""
Document store access: point lookups by collection + id.

FirestoreDocumentStore wraps a single google-cloud-firestore AsyncClient that
is created once per process (in the app lifespan) and shared by every
invocation; the client is safe for concurrent use.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

from google.cloud import firestore

from app.config import Settings

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return the document's fields, or None when it does not exist."""
        ...

    async def aclose(self) -> None:
        ...


class FirestoreDocumentStore:
    def __init__(self, client: firestore.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> FirestoreDocumentStore:
        client = firestore.AsyncClient(
            project=settings.firestore_project,
            database=settings.firestore_database,
        )
        logger.info(
            "Firestore client ready (project=%s, database=%s)",
            client.project, settings.firestore_database,
        )
        return cls(client)

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        snapshot = await self._client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    async def aclose(self) -> None:
        # AsyncClient.close() is synchronous and releases the HTTP session
        self._client.close()
