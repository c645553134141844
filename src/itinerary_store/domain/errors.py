"""Error types raised by the itinerary store."""


class ItineraryStoreError(Exception):
    """Base class for itinerary store failures."""


class ItineraryNotFoundError(ItineraryStoreError):
    """Raised when a requested itinerary document does not exist."""

    def __init__(self, username: str, file_id: str) -> None:
        super().__init__(f"Itinerary not found: {username}/{file_id}")
        self.username = username
        self.file_id = file_id


class InvalidKeyError(ItineraryStoreError, ValueError):
    """Raised when a username or file id cannot be used as a document id."""


class StoreUnavailableError(ItineraryStoreError):
    """Raised when the document store cannot be reached or rejects a call."""


class AggregationFailedError(ItineraryStoreError):
    """Raised when the cross-user listing cannot be built."""


class DeletionFailedError(ItineraryStoreError):
    """Raised when a bulk delete could not be committed."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Failed to delete data for user {username}")
        self.username = username
