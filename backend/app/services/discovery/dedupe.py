"""First-seen-wins deduplication across discovery sources."""

from app.services.discovery.models import CanonicalEvent


def dedup_key(event: CanonicalEvent) -> str:
    # Exact match only: "123 Main St" and "123 Main Street" are different keys.
    return f"{event.event_name.lower()}-{event.location.lower()}"


def deduplicate_events(events: list[CanonicalEvent]) -> list[CanonicalEvent]:
    """Drop any event whose name+location key was already seen, keeping order."""
    seen = set()
    unique = []
    for e in events:
        key = dedup_key(e)
        if key not in seen:
            seen.add(key)
            unique.append(e)
    return unique
