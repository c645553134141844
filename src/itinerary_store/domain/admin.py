"""Admin domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ItineraryDescriptor:
    """Admin view of a single itinerary."""

    id: str
    name: str
    updated_at: str


@dataclass
class UserSummary:
    """Aggregated itinerary activity for one user."""

    username: str
    itinerary_count: int
    last_updated: str
    itineraries: list[ItineraryDescriptor] = field(default_factory=list)

    def add(self, descriptor: ItineraryDescriptor) -> None:
        """Record an itinerary and keep ``last_updated`` at the latest value."""
        self.itineraries.append(descriptor)
        self.itinerary_count += 1
        if descriptor.updated_at > self.last_updated:
            self.last_updated = descriptor.updated_at
