"""Tests for admin summary projections."""

from itinerary_store.api.admin_views import UserSummaryView, humanize_timestamp
from itinerary_store.domain.admin import ItineraryDescriptor, UserSummary


def test_user_summary_view_uses_camel_case() -> None:
    summary = UserSummary(
        username="alice",
        itinerary_count=0,
        last_updated="2024-01-01T00:00:00.000Z",
    )
    summary.add(ItineraryDescriptor("a", "a", "2024-01-01T00:00:00.000Z"))
    summary.add(ItineraryDescriptor("b", "Winter", "2024-03-05T08:30:00.000Z"))

    payload = UserSummaryView.from_summary(summary).model_dump(by_alias=True)

    assert payload["itineraryCount"] == 2
    assert payload["lastUpdated"] == "2024-03-05T08:30:00.000Z"
    assert payload["lastUpdatedDisplay"] == "2024-03-05 08:30 UTC"
    assert payload["itineraries"][1] == {
        "id": "b",
        "name": "Winter",
        "updatedAt": "2024-03-05T08:30:00.000Z",
    }


def test_humanize_timestamp_converts_offsets_to_utc() -> None:
    assert humanize_timestamp("2024-06-01T09:00:00+09:00") == "2024-06-01 00:00 UTC"


def test_humanize_timestamp_keeps_unparsable_values() -> None:
    assert humanize_timestamp("yesterday") == "yesterday"
