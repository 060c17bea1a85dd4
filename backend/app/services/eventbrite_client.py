"""Eventbrite API client — ticketed events adapter for weekly discovery."""

import logging
from datetime import datetime, timezone

import httpx

from app.config import settings
from app.services.discovery.config import LIMITS, TICKETED_CATEGORIES
from app.services.discovery.models import (
    AdapterResult,
    CanonicalEvent,
    EventbriteListing,
    EventSource,
    FailureKind,
)

logger = logging.getLogger(__name__)


def _utc_timestamp(value: datetime) -> str:
    """Eventbrite wants UTC with a Z suffix; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class EventbriteClient:
    """Adapter for the Eventbrite event search API."""

    def __init__(
        self,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = settings.eventbrite_api_key if api_key is None else api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.eventbrite_base_url,
                timeout=settings.http_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    @staticmethod
    def build_params(
        lat: float,
        lng: float,
        radius_km: float,
        keywords: list[str],
        start: datetime,
        end: datetime,
    ) -> dict:
        """Query string for one search; ``q`` is omitted when there are no keywords."""
        params: dict = {
            "location.latitude": str(lat),
            "location.longitude": str(lng),
            "location.within": f"{radius_km:g}km",
            "start_date.range_start": _utc_timestamp(start),
            "start_date.range_end": _utc_timestamp(end),
            "expand": "venue,ticket_availability",
            "categories": ",".join(TICKETED_CATEGORIES.allowlist),
        }
        query = " OR ".join(keywords[:LIMITS.ticketed_max_keywords])
        if query:
            params["q"] = query
        return params

    async def fetch_events(
        self,
        lat: float,
        lng: float,
        radius_km: float,
        keywords: list[str],
        start: datetime,
        end: datetime,
    ) -> AdapterResult:
        """Search ticketed events; failures are returned, never raised."""
        if not self._api_key:
            return AdapterResult.failed(
                EventSource.TICKETED, FailureKind.MISSING_CREDENTIALS,
                "EVENTBRITE_API_KEY not configured",
            )

        try:
            client = await self._get_client()
            resp = await client.get(
                "/events/search/",
                params=self.build_params(lat, lng, radius_km, keywords, start, end),
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            return AdapterResult.failed(
                EventSource.TICKETED, FailureKind.HTTP_STATUS,
                f"Eventbrite API error: {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            return AdapterResult.failed(EventSource.TICKETED, FailureKind.TRANSPORT, str(e))
        except ValueError as e:
            return AdapterResult.failed(EventSource.TICKETED, FailureKind.PARSE, f"Invalid JSON: {e}")
        except Exception as e:
            return AdapterResult.failed(EventSource.TICKETED, FailureKind.UNEXPECTED, repr(e))

        try:
            events = self.map_events(data)
        except Exception as e:
            return AdapterResult.failed(
                EventSource.TICKETED, FailureKind.PARSE, f"Unexpected payload: {e!r}"
            )
        return AdapterResult(source=EventSource.TICKETED, events=events)

    @staticmethod
    def map_events(data: dict) -> list[CanonicalEvent]:
        """Map a search response body to canonical events, in response order."""
        events = []
        for raw in data.get("events") or []:
            listing = EventbriteListing.from_payload(raw)
            if not listing.name:
                logger.debug(f"Skipping unnamed Eventbrite event {listing.id}")
                continue
            events.append(listing.to_canonical())
        return events

    async def search_events(
        self,
        lat: float,
        lng: float,
        radius_km: float,
        keywords: list[str],
        start: datetime,
        end: datetime,
    ) -> list[CanonicalEvent]:
        """Ticketed events for the window, or ``[]`` if the source is unavailable."""
        result = await self.fetch_events(lat, lng, radius_km, keywords, start, end)
        if not result.ok:
            logger.warning(
                f"Eventbrite skipped ({result.failure.kind.value}): {result.failure.message}"
            )
            return []
        logger.info(f"Found {len(result.events)} Eventbrite events")
        return result.events

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


eventbrite_client = EventbriteClient()
