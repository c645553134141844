"""Admin aggregation and moderation across all users."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from itinerary_store.domain.admin import ItineraryDescriptor, UserSummary
from itinerary_store.domain.documents import (
    CollectionGroupQuery,
    DocumentPath,
    StoredDocument,
)
from itinerary_store.domain.errors import (
    AggregationFailedError,
    DeletionFailedError,
    InvalidKeyError,
)
from itinerary_store.domain.itineraries import ItineraryDocument
from itinerary_store.services.documents import DocumentStore
from itinerary_store.services.itineraries import (
    ItineraryRepository,
    title_of,
    utc_now_iso,
)

_logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """Service behind the admin moderation view."""

    store: DocumentStore
    itinerary_repository: ItineraryRepository

    async def list_all_users(self) -> list[UserSummary]:
        """Return one summary per user, most recently active first."""
        layout = self.itinerary_repository.layout
        query = CollectionGroupQuery(layout.itineraries_collection)
        try:
            documents = await self.store.query_collection_group(query)
            summaries = _group_by_owner(documents, layout.owner_of)
        except Exception as exc:
            _logger.exception("Failed to list users with itineraries")
            raise AggregationFailedError("Failed to list users") from exc
        _logger.info(
            "Aggregated itineraries: documents=%s users=%s",
            len(documents),
            len(summaries),
        )
        return sorted(summaries, key=lambda item: item.last_updated, reverse=True)

    async def delete_user(self, username: str) -> None:
        """Delete every itinerary of a user in one batch, then the user doc."""
        layout = self.itinerary_repository.layout
        try:
            documents = await self.store.list_documents(
                layout.itineraries_path(username)
            )
            batch = self.store.batch()
            for document in documents:
                batch.delete(document.path)
            await batch.commit()
        except InvalidKeyError:
            raise
        except Exception as exc:
            _logger.exception("Failed to delete user data: user=%s", username)
            raise DeletionFailedError(username) from exc
        _logger.info(
            "Deleted user itineraries: user=%s count=%s", username, len(documents)
        )

        # The user document is often a phantom parent with no stored fields.
        try:
            await self.store.delete(layout.user_path(username))
        except Exception:
            _logger.warning(
                "Failed to delete user document: user=%s", username, exc_info=True
            )

    async def delete_itinerary(self, username: str, file_id: str) -> None:
        """Delete a single itinerary of a user."""
        await self.itinerary_repository.delete(username, file_id)

    async def get_itinerary(self, username: str, file_id: str) -> ItineraryDocument:
        """Return one itinerary for inspection."""
        return await self.itinerary_repository.get(username, file_id)


def _group_by_owner(
    documents: list[StoredDocument],
    owner_of: Callable[[DocumentPath], str | None],
) -> list[UserSummary]:
    summaries: dict[str, UserSummary] = {}
    for document in documents:
        username = owner_of(document.path)
        if not username:
            continue
        descriptor = _describe(document)
        summary = summaries.get(username)
        if summary is None:
            summary = UserSummary(
                username=username,
                itinerary_count=0,
                last_updated=descriptor.updated_at,
            )
            summaries[username] = summary
        summary.add(descriptor)
    return list(summaries.values())


def _describe(document: StoredDocument) -> ItineraryDescriptor:
    updated_at = document.fields.get("updatedAt")
    if not isinstance(updated_at, str) or not updated_at:
        updated_at = utc_now_iso()
    return ItineraryDescriptor(
        id=document.id,
        name=title_of(document.fields) or document.id,
        updated_at=updated_at,
    )
