"""Events router — weekly local opportunity discovery for a family."""

import logging
from datetime import date, timedelta

from fastapi import APIRouter, HTTPException, Query

from app.schemas.events import DiscoveryRequest
from app.services.cache_service import cache_service
from app.services.discovery.config import LIMITS
from app.services.discovery.geo import radius_km_from_travel_minutes
from app.services.discovery.models import CanonicalEvent
from app.services.discovery.orchestrator import weekly_discovery

logger = logging.getLogger(__name__)

router = APIRouter()

CURRICULUM_WEEKS = 12


async def _discover_week(
    family_id: str,
    latitude: float,
    longitude: float,
    radius_km: float,
    theme: str,
    week_start: date,
    refresh: bool = False,
) -> dict:
    """Serve a family's week from cache, discovering and caching on a miss."""
    week_end = week_start + timedelta(days=LIMITS.window_days)
    fingerprint = cache_service.discovery_fingerprint(theme, latitude, longitude, radius_km)

    if refresh:
        await cache_service.clear_week_events(family_id, week_start, fingerprint)
    else:
        cached = await cache_service.get_week_events(family_id, week_start, fingerprint)
        if cached:
            logger.info(f"Cache hit: {len(cached)} events for family {family_id} week of {week_start}")
            events = [CanonicalEvent.from_dict(e).to_dict() for e in cached]
            return {
                "family_id": family_id,
                "week_start_date": week_start.isoformat(),
                "week_end_date": week_end.isoformat(),
                "events": events,
                "cached": True,
            }

    discovered = await weekly_discovery.discover(
        family_id=family_id,
        lat=latitude,
        lng=longitude,
        radius_km=radius_km,
        week_theme=theme,
        week_start_date=week_start,
    )
    events = [e.to_dict() for e in discovered]

    # An empty week is retried next time rather than cached
    if events:
        await cache_service.set_week_events(family_id, week_start, fingerprint, events)

    return {
        "family_id": family_id,
        "week_start_date": week_start.isoformat(),
        "week_end_date": week_end.isoformat(),
        "events": events,
        "cached": False,
    }


@router.post("/discover")
async def discover_events(req: DiscoveryRequest):
    """Discover local opportunities for an explicit week and theme."""
    return await _discover_week(
        family_id=req.family_id,
        latitude=req.latitude,
        longitude=req.longitude,
        radius_km=req.radius_km,
        theme=req.week_theme,
        week_start=req.week_start_date,
        refresh=req.refresh,
    )


@router.get("/week/{week_number}")
async def get_week_events(
    week_number: int,
    family_id: str = Query(..., min_length=1),
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    travel_radius_minutes: int = Query(30, gt=0, description="How far the family will drive"),
    theme: str = Query("education", description="The week's curriculum theme"),
    refresh: bool = Query(False),
):
    """Local opportunities for week N of the rolling curriculum (week 1 starts today)."""
    if week_number < 1 or week_number > CURRICULUM_WEEKS:
        raise HTTPException(status_code=400, detail="Invalid week number")

    week_start = date.today() + timedelta(days=(week_number - 1) * 7)
    radius_km = radius_km_from_travel_minutes(travel_radius_minutes)
    logger.info(f"Week {week_number} theme: \"{theme}\" ({radius_km:.1f} km radius)")

    return await _discover_week(
        family_id=family_id,
        latitude=latitude,
        longitude=longitude,
        radius_km=radius_km,
        theme=theme,
        week_start=week_start,
        refresh=refresh,
    )
