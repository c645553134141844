"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from itinerary_store.api.admin import router as admin_router
from itinerary_store.api.itineraries import router as itineraries_router
from itinerary_store.app_logging import configure_logging
from itinerary_store.containers import AppContainer
from itinerary_store.domain.errors import (
    AggregationFailedError,
    DeletionFailedError,
    InvalidKeyError,
    ItineraryNotFoundError,
    ItineraryStoreError,
    StoreUnavailableError,
)

_ERROR_STATUS: list[tuple[type[ItineraryStoreError], int]] = [
    (ItineraryNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidKeyError, status.HTTP_400_BAD_REQUEST),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (AggregationFailedError, status.HTTP_502_BAD_GATEWAY),
    (DeletionFailedError, status.HTTP_502_BAD_GATEWAY),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(itineraries_router)
    app.include_router(admin_router)

    @app.exception_handler(ItineraryStoreError)
    async def store_error_handler(
        request: Request, exc: ItineraryStoreError
    ) -> JSONResponse:
        status_code = error_status(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning(
                "Request failed: %s %s: %s", request.method, request.url.path, exc
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def error_status(exc: ItineraryStoreError) -> int:
    """Return the HTTP status for a store error."""
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
