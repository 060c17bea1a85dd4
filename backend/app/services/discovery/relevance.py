"""Relevance annotation: drive time plus a one-line "why it fits"."""

from dataclasses import replace

from app.services.discovery.geo import estimate_drive_time
from app.services.discovery.keywords import extract_keywords
from app.services.discovery.models import CanonicalEvent


def generate_why_it_fits(theme: str, event_name: str) -> str:
    """
    Explain how an event relates to the week's theme.

    Purely lexical: a theme keyword must appear inside the event name.
    Relevant events with no literal overlap get the generic sentence.
    """
    name = event_name.lower()
    matching = [w for w in extract_keywords(theme) if w in name]
    if matching:
        return f'Connects to your "{theme}" theme through {", ".join(matching)}'
    return f"Enriches your learning about {theme}"


def annotate_event(
    event: CanonicalEvent,
    theme: str,
    home_lat: float | None = None,
    home_lng: float | None = None,
    family_id: str | None = None,
) -> CanonicalEvent:
    """Return a copy of ``event`` with family, drive time and rationale attached."""
    drive_minutes = None
    if home_lat is not None and home_lng is not None and event.has_coordinates:
        drive_minutes = estimate_drive_time(home_lat, home_lng, event.latitude, event.longitude)

    return replace(
        event,
        family_id=family_id if family_id is not None else event.family_id,
        drive_minutes=drive_minutes,
        why_it_fits=generate_why_it_fits(theme, event.event_name),
    )
