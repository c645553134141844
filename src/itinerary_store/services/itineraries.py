"""Per-user itinerary persistence."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from itinerary_store.domain.documents import PATH_SEPARATOR, DocumentPath
from itinerary_store.domain.errors import InvalidKeyError, ItineraryNotFoundError
from itinerary_store.domain.itineraries import (
    DayRecord,
    ItineraryDocument,
    ItineraryFile,
    file_id_from_name,
    file_name_for_id,
)
from itinerary_store.services.documents import DocumentStore

_logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    """Return the current time as an ISO-8601 UTC string ending in ``Z``."""
    now = datetime.now(tz=UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ItineraryLayout:
    """Naming convention for users/{username}/itineraries/{file_id}."""

    users_collection: str = "users"
    itineraries_collection: str = "itineraries"

    def user_path(self, username: str) -> DocumentPath:
        return DocumentPath.of(self.users_collection, _check_key(username))

    def itineraries_path(self, username: str) -> str:
        return f"{self.user_path(username)}/{self.itineraries_collection}"

    def itinerary_path(self, username: str, file_id: str) -> DocumentPath:
        return DocumentPath.of(
            self.users_collection,
            _check_key(username),
            self.itineraries_collection,
            _check_key(file_id),
        )

    def owner_of(self, path: DocumentPath) -> str | None:
        """Return the username owning an itinerary path, if well formed."""
        if path.collection_id != self.itineraries_collection:
            return None
        return path.parent_document_id


def _check_key(value: str) -> str:
    if not value or PATH_SEPARATOR in value:
        raise InvalidKeyError(f"Invalid document key: {value!r}")
    return value


@dataclass
class ItineraryRepository:
    """CRUD over a user's itinerary documents."""

    store: DocumentStore
    layout: ItineraryLayout = ItineraryLayout()

    async def list_files(self, username: str) -> list[ItineraryFile]:
        """Return every itinerary file stored for the user."""
        documents = await self.store.list_documents(
            self.layout.itineraries_path(username)
        )
        return [
            ItineraryFile(id=document.id, name=file_name_for_id(document.id))
            for document in documents
        ]

    async def get(self, username: str, file_id: str) -> ItineraryDocument:
        """Return the full itinerary document."""
        document = await self.store.get(self.layout.itinerary_path(username, file_id))
        if document is None:
            raise ItineraryNotFoundError(username, file_id)
        fields = document.fields
        return ItineraryDocument(
            username=username,
            id=document.id,
            data=list(fields.get("data") or []),
            updated_at=_optional_str(fields.get("updatedAt")),
            title=title_of(fields),
        )

    async def load(self, username: str, file_id: str) -> list[DayRecord]:
        """Return the day records of one itinerary."""
        return (await self.get(username, file_id)).data

    async def save(
        self,
        username: str,
        data: list[DayRecord],
        file_name: str,
        existing_file_id: str | None = None,
        title: str | None = None,
    ) -> str:
        """Overwrite an itinerary and return its file id.

        ``existing_file_id`` wins over ``file_name`` so an open file is
        updated in place rather than copied under a new id.
        """
        file_id = existing_file_id or file_id_from_name(file_name)
        fields: dict[str, object] = {"data": data, "updatedAt": utc_now_iso()}
        if title:
            fields["metadata"] = {"title": title}
        await self.store.set(self.layout.itinerary_path(username, file_id), fields)
        _logger.info("Saved itinerary: user=%s file_id=%s", username, file_id)
        return file_id

    async def delete(self, username: str, file_id: str) -> None:
        """Delete one itinerary; deleting a missing one is not an error."""
        await self.store.delete(self.layout.itinerary_path(username, file_id))
        _logger.info("Deleted itinerary: user=%s file_id=%s", username, file_id)


def title_of(fields: dict[str, object]) -> str | None:
    """Return ``metadata.title`` from stored fields, if present."""
    metadata = fields.get("metadata")
    if isinstance(metadata, dict):
        return _optional_str(metadata.get("title"))
    return None


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None
