"""Itinerary editor endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from itinerary_store.api.models import SaveItineraryRequest  # noqa: TC001

if TYPE_CHECKING:
    from itinerary_store.containers import AppContainer

router = APIRouter(prefix="/users/{username}/itineraries", tags=["itineraries"])


@router.get("")
async def list_files(username: str, request: Request) -> dict[str, object]:
    """Return the user's itinerary files."""
    container: AppContainer = request.app.state.container
    files = await container.itinerary_repository.list_files(username)
    return {
        "userFolderId": username,
        "files": [{"id": item.id, "name": item.name} for item in files],
    }


@router.get("/{file_id}")
async def load_file(username: str, file_id: str, request: Request) -> dict[str, object]:
    """Return the day records of one itinerary."""
    container: AppContainer = request.app.state.container
    data = await container.itinerary_repository.load(username, file_id)
    return {"fileId": file_id, "data": data}


@router.put("")
async def save_file(
    username: str, payload: SaveItineraryRequest, request: Request
) -> dict[str, str]:
    """Save an itinerary and return its resolved file id."""
    container: AppContainer = request.app.state.container
    file_id = await container.itinerary_repository.save(
        username,
        payload.data,
        payload.file_name,
        payload.existing_file_id,
        title=payload.title,
    )
    return {"fileId": file_id}


@router.delete("/{file_id}")
async def delete_file(username: str, file_id: str, request: Request) -> dict[str, str]:
    """Delete one itinerary."""
    container: AppContainer = request.app.state.container
    await container.itinerary_repository.delete(username, file_id)
    return {"status": "deleted"}
