"""Firestore-backed document store."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import AsyncClient, AsyncWriteBatch

from itinerary_store.domain.documents import (
    CollectionGroupQuery,
    DocumentPath,
    StoredDocument,
)
from itinerary_store.domain.errors import StoreUnavailableError
from itinerary_store.services.documents import DocumentStore, WriteBatch


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except GoogleAPIError as exc:
        raise StoreUnavailableError(f"Firestore {action} failed: {exc}") from exc


def _to_document(snapshot) -> StoredDocument:  # type: ignore[no-untyped-def]
    return StoredDocument(
        path=DocumentPath.parse(snapshot.reference.path),
        fields=snapshot.to_dict() or {},
    )


@dataclass
class FirestoreWriteBatch(WriteBatch):
    """Atomic Firestore batch limited to deletes."""

    client: AsyncClient
    batch: AsyncWriteBatch

    def delete(self, path: DocumentPath) -> None:
        """Stage a delete for the document at ``path``."""
        self.batch.delete(self.client.document(str(path)))

    async def commit(self) -> None:
        """Commit every staged delete in a single request."""
        with _store_errors("batch commit"):
            await self.batch.commit()


@dataclass
class FirestoreDocumentStore(DocumentStore):
    """Document store implemented with the async Firestore client."""

    client: AsyncClient

    @classmethod
    def create(
        cls, project_id: str | None, credentials_path: str | None = None
    ) -> "FirestoreDocumentStore":
        """Initialise the default Firebase app once and wrap its client."""
        try:
            app = firebase_admin.get_app()
        except ValueError:
            cred = (
                credentials.Certificate(credentials_path)
                if credentials_path
                else credentials.ApplicationDefault()
            )
            options = {"projectId": project_id} if project_id else None
            app = firebase_admin.initialize_app(cred, options)
        return cls(client=firestore_async.client(app))

    async def get(self, path: DocumentPath) -> StoredDocument | None:
        """Return the document at ``path``, if present."""
        with _store_errors("get"):
            snapshot = await self.client.document(str(path)).get()
        if not snapshot.exists:
            return None
        return _to_document(snapshot)

    async def set(self, path: DocumentPath, fields: dict[str, object]) -> None:
        """Overwrite the document at ``path``."""
        with _store_errors("set"):
            await self.client.document(str(path)).set(fields)

    async def delete(self, path: DocumentPath) -> None:
        """Delete the document at ``path``."""
        with _store_errors("delete"):
            await self.client.document(str(path)).delete()

    async def list_documents(self, collection_path: str) -> list[StoredDocument]:
        """Return all documents in a collection."""
        with _store_errors("list"):
            return [
                _to_document(snapshot)
                async for snapshot in self.client.collection(collection_path).stream()
            ]

    async def query_collection_group(
        self, query: CollectionGroupQuery
    ) -> list[StoredDocument]:
        """Return documents from every collection named ``query.collection_id``."""
        group = self.client.collection_group(query.collection_id)
        with _store_errors("collection group query"):
            return [_to_document(snapshot) async for snapshot in group.stream()]

    def batch(self) -> FirestoreWriteBatch:
        """Start a new write batch."""
        return FirestoreWriteBatch(client=self.client, batch=self.client.batch())
