"""Document store interfaces used by the itinerary services."""

from typing import Protocol

from itinerary_store.domain.documents import (
    CollectionGroupQuery,
    DocumentPath,
    StoredDocument,
)


class WriteBatch(Protocol):
    """Deletes staged together and committed as one atomic unit."""

    def delete(self, path: DocumentPath) -> None:
        """Stage a delete for the document at ``path``."""

    async def commit(self) -> None:
        """Apply every staged delete, or none of them."""


class DocumentStore(Protocol):
    """Persistence interface over a hierarchical document database."""

    async def get(self, path: DocumentPath) -> StoredDocument | None:
        """Return the document at ``path``, if present."""

    async def set(self, path: DocumentPath, fields: dict[str, object]) -> None:
        """Replace the document at ``path`` with ``fields``."""

    async def delete(self, path: DocumentPath) -> None:
        """Delete the document at ``path``; missing documents are ignored."""

    async def list_documents(self, collection_path: str) -> list[StoredDocument]:
        """Return every document directly inside a collection."""

    async def query_collection_group(
        self, query: CollectionGroupQuery
    ) -> list[StoredDocument]:
        """Return matching documents from every partition of the store."""

    def batch(self) -> WriteBatch:
        """Start a new atomic write batch."""
