"""Dependency container wiring for the application."""

from dataclasses import dataclass

from itinerary_store.adapters.firestore_document_store import FirestoreDocumentStore
from itinerary_store.config import Settings
from itinerary_store.services.admin import AdminService
from itinerary_store.services.documents import DocumentStore
from itinerary_store.services.itineraries import ItineraryLayout, ItineraryRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: DocumentStore
    itinerary_repository: ItineraryRepository
    admin_service: AdminService


def build_container(
    settings: Settings | None = None, store: DocumentStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or FirestoreDocumentStore.create(
        project_id=resolved_settings.firebase_project_id,
        credentials_path=resolved_settings.firebase_credentials_path,
    )
    layout = ItineraryLayout(
        users_collection=resolved_settings.users_collection,
        itineraries_collection=resolved_settings.itineraries_collection,
    )
    itinerary_repository = ItineraryRepository(store=resolved_store, layout=layout)
    admin_service = AdminService(
        store=resolved_store,
        itinerary_repository=itinerary_repository,
    )

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        itinerary_repository=itinerary_repository,
        admin_service=admin_service,
    )
