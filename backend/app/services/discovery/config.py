"""Discovery pipeline configuration, the single source for limits and lookup tables."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class KeywordRules:
    """How a weekly theme is reduced to search terms."""
    max_keywords: int = 5
    min_length: int = 4          # tokens of length <= 3 are dropped
    stop_words: frozenset[str] = frozenset({"the", "and", "of", "in", "to", "a", "an"})


@dataclass(frozen=True)
class DriveEstimate:
    """Straight-line drive-time model. Not a routing engine."""
    earth_radius_km: float = 6371.0
    average_speed_kmh: float = 50.0   # assumed urban average


@dataclass(frozen=True)
class DiscoveryLimits:
    """Caps applied per weekly discovery."""
    max_events: int = 8
    window_days: int = 7
    description_max_chars: int = 500
    ticketed_max_keywords: int = 3
    places_max_keywords: int = 2
    places_results_per_type: int = 3
    visit_offset_days: int = 7        # suggested visits land one week out


@dataclass(frozen=True)
class TicketedCategories:
    """Eventbrite category ids searched and how they map to our vocabulary."""
    allowlist: tuple[str, ...] = ("103", "110", "113", "105")  # education, science, art, family
    mapping: dict[str, str] = field(default_factory=lambda: {
        "103": "education",
        "110": "science",
        "113": "art",
        "105": "family",
        "108": "history",
        "109": "education",
    })
    default: str = "education"

    def category_for(self, category_id: str | None) -> str:
        return self.mapping.get(category_id or "", self.default)


@dataclass(frozen=True)
class PlaceTypes:
    """Google Places types searched for self-guided visits."""
    searched: tuple[str, ...] = ("tourist_attraction", "museum")
    history_types: frozenset[str] = frozenset({"museum"})

    def category_for(self, place_type: str) -> str:
        return "history" if place_type in self.history_types else "education"


KEYWORDS = KeywordRules()
DRIVE = DriveEstimate()
LIMITS = DiscoveryLimits()
TICKETED_CATEGORIES = TicketedCategories()
PLACE_TYPES = PlaceTypes()
