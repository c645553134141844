"""Pydantic models for itinerary editor payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SaveItineraryRequest(BaseModel):
    """Body of an itinerary save from the editor."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: list[dict[str, Any]]
    file_name: str = Field(min_length=1)
    existing_file_id: str | None = None
    title: str | None = None
