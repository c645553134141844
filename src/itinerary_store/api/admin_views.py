"""Read-only projections of user summaries for the admin UI."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from itinerary_store.domain.admin import UserSummary


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItineraryDescriptorView(_CamelModel):
    """One expandable row under a user."""

    id: str
    name: str
    updated_at: str


class UserSummaryView(_CamelModel):
    """Admin list entry for a user."""

    username: str
    itinerary_count: int
    last_updated: str
    last_updated_display: str
    itineraries: list[ItineraryDescriptorView]

    @classmethod
    def from_summary(cls, summary: UserSummary) -> "UserSummaryView":
        return cls(
            username=summary.username,
            itinerary_count=summary.itinerary_count,
            last_updated=summary.last_updated,
            last_updated_display=humanize_timestamp(summary.last_updated),
            itineraries=[
                ItineraryDescriptorView(
                    id=item.id, name=item.name, updated_at=item.updated_at
                )
                for item in summary.itineraries
            ],
        )


def humanize_timestamp(value: str) -> str:
    """Format an ISO-8601 timestamp as ``YYYY-MM-DD HH:MM UTC``."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.strftime("%Y-%m-%d %H:%M UTC")
