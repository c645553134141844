"""Shared test fixtures."""

import copy
from dataclasses import dataclass, field

import pytest

from itinerary_store.config import Settings
from itinerary_store.containers import AppContainer, build_container
from itinerary_store.domain.documents import (
    CollectionGroupQuery,
    DocumentPath,
    StoredDocument,
)
from itinerary_store.domain.errors import StoreUnavailableError
from itinerary_store.services.admin import AdminService
from itinerary_store.services.documents import DocumentStore, WriteBatch
from itinerary_store.services.itineraries import ItineraryRepository


@dataclass
class InMemoryWriteBatch(WriteBatch):
    """Batch that applies its staged deletes only on a successful commit."""

    store: "InMemoryDocumentStore"
    staged: list[DocumentPath] = field(default_factory=list)

    def delete(self, path: DocumentPath) -> None:
        self.staged.append(path)

    async def commit(self) -> None:
        self.store.check("commit")
        for path in self.staged:
            self.store.documents.pop(str(path), None)
        self.store.commits.append(list(self.staged))


@dataclass
class InMemoryDocumentStore(DocumentStore):
    """In-memory hierarchical document store for tests.

    Operation names listed in ``failing`` raise ``StoreUnavailableError``.
    """

    documents: dict[str, dict[str, object]] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)
    commits: list[list[DocumentPath]] = field(default_factory=list)

    def check(self, operation: str) -> None:
        if operation in self.failing:
            raise StoreUnavailableError(f"Simulated {operation} failure")

    def put(self, raw_path: str, fields: dict[str, object]) -> None:
        """Seed a document directly, bypassing fault injection."""
        self.documents[str(DocumentPath.parse(raw_path))] = fields

    def _snapshot(self, raw_path: str) -> StoredDocument:
        return StoredDocument(
            path=DocumentPath.parse(raw_path),
            fields=copy.deepcopy(self.documents[raw_path]),
        )

    async def get(self, path: DocumentPath) -> StoredDocument | None:
        self.check("get")
        if str(path) not in self.documents:
            return None
        return self._snapshot(str(path))

    async def set(self, path: DocumentPath, fields: dict[str, object]) -> None:
        self.check("set")
        self.documents[str(path)] = copy.deepcopy(fields)

    async def delete(self, path: DocumentPath) -> None:
        self.check("delete")
        self.documents.pop(str(path), None)

    async def list_documents(self, collection_path: str) -> list[StoredDocument]:
        self.check("list")
        return [
            self._snapshot(raw_path)
            for raw_path in self.documents
            if DocumentPath.parse(raw_path).collection_path == collection_path
        ]

    async def query_collection_group(
        self, query: CollectionGroupQuery
    ) -> list[StoredDocument]:
        self.check("query")
        return [
            self._snapshot(raw_path)
            for raw_path in self.documents
            if query.matches(DocumentPath.parse(raw_path))
        ]

    def batch(self) -> InMemoryWriteBatch:
        return InMemoryWriteBatch(store=self)


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token", firebase_project_id="test-project")


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def repository(store: InMemoryDocumentStore) -> ItineraryRepository:
    return ItineraryRepository(store)


@pytest.fixture
def admin_service(
    store: InMemoryDocumentStore, repository: ItineraryRepository
) -> AdminService:
    return AdminService(store=store, itinerary_repository=repository)


@pytest.fixture
def container(settings: Settings, store: InMemoryDocumentStore) -> AppContainer:
    return build_container(settings, store=store)
