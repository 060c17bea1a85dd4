"""Weekly discovery orchestrator — fans out to event sources and merges results."""

import asyncio
import logging
from datetime import date, datetime, time, timedelta

from app.services.discovery.config import LIMITS
from app.services.discovery.dedupe import deduplicate_events
from app.services.discovery.keywords import extract_keywords
from app.services.discovery.models import CanonicalEvent
from app.services.discovery.relevance import annotate_event
from app.services.eventbrite_client import EventbriteClient, eventbrite_client
from app.services.google_places_client import GooglePlacesClient, google_places_client

logger = logging.getLogger(__name__)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


class WeeklyDiscoveryOrchestrator:
    """Discovers local opportunities that fit a family's weekly theme."""

    def __init__(
        self,
        ticketed: EventbriteClient | None = None,
        places: GooglePlacesClient | None = None,
    ):
        self.ticketed = ticketed if ticketed is not None else eventbrite_client
        self.places = places if places is not None else google_places_client

    async def discover(
        self,
        family_id: str,
        lat: float,
        lng: float,
        radius_km: float,
        week_theme: str,
        week_start_date: date | datetime,
    ) -> list[CanonicalEvent]:
        """
        Run one weekly discovery.

        Both sources are queried concurrently; ticketed events come first,
        then place visits. Duplicates are dropped first-seen-wins, the list
        is capped, and survivors get family, drive time and rationale.
        Source failures come back as empty lists, so this does not raise
        for upstream problems.
        """
        week_start = _as_datetime(week_start_date)
        week_end = week_start + timedelta(days=LIMITS.window_days)
        keywords = extract_keywords(week_theme)

        ticketed_task = asyncio.create_task(
            self.ticketed.search_events(lat, lng, radius_km, keywords, week_start, week_end)
        )
        places_task = asyncio.create_task(
            self.places.search_places(lat, lng, radius_km * 1000, week_theme, keywords)
        )
        ticketed_events, place_events = await asyncio.gather(ticketed_task, places_task)

        unique = deduplicate_events([*ticketed_events, *place_events])
        selected = unique[:LIMITS.max_events]

        logger.info(
            f"Discovery for family {family_id}: {len(ticketed_events)} ticketed, "
            f"{len(place_events)} places, {len(unique)} unique, returning {len(selected)}"
        )

        return [
            annotate_event(e, week_theme, home_lat=lat, home_lng=lng, family_id=family_id)
            for e in selected
        ]


weekly_discovery = WeeklyDiscoveryOrchestrator()
