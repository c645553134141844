"""Domain models for stored itineraries."""

from dataclasses import dataclass
from typing import Any

# Day records are interpreted only by the editor; this layer stores them as-is.
DayRecord = dict[str, Any]

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class ItineraryFile:
    """Lightweight listing entry for a user's itinerary."""

    id: str
    name: str


@dataclass(frozen=True)
class ItineraryDocument:
    """Full itinerary document as stored for a user."""

    username: str
    id: str
    data: list[DayRecord]
    updated_at: str | None
    title: str | None = None

    @property
    def display_name(self) -> str:
        """Return the title, falling back to the file id."""
        return self.title or self.id


def file_id_from_name(file_name: str) -> str:
    """Strip a trailing ``.json`` suffix from a file name."""
    if file_name.endswith(JSON_SUFFIX):
        return file_name[: -len(JSON_SUFFIX)]
    return file_name


def file_name_for_id(file_id: str) -> str:
    return f"{file_id}{JSON_SUFFIX}"
