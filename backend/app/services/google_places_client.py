"""Google Places client — suggests self-guided visits to theme-related venues."""

import logging
from datetime import datetime, timedelta, timezone

import httpx

from app.config import settings
from app.services.discovery.config import LIMITS, PLACE_TYPES
from app.services.discovery.keywords import extract_keywords
from app.services.discovery.models import (
    AdapterResult,
    CanonicalEvent,
    EventSource,
    FailureKind,
    PlaceResult,
)

logger = logging.getLogger(__name__)


class GooglePlacesClient:
    """Adapter for the Places nearby-search API."""

    def __init__(
        self,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = settings.google_maps_api_key if api_key is None else api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.google_places_base_url,
                timeout=settings.http_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def fetch_places(
        self,
        lat: float,
        lng: float,
        radius_m: float,
        theme: str,
        keywords: list[str] | None = None,
        now: datetime | None = None,
    ) -> AdapterResult:
        """
        Search each place type in turn and turn the top hits into visit events.

        A type whose body reports ``ZERO_RESULTS`` just contributes nothing.
        Any other non-OK body status, or an HTTP error on any call, fails the
        whole search.
        """
        if not self._api_key:
            return AdapterResult.failed(
                EventSource.PLACES, FailureKind.MISSING_CREDENTIALS,
                "GOOGLE_MAPS_API_KEY not configured",
            )

        if keywords is None:
            keywords = extract_keywords(theme)
        keyword = " ".join(keywords[:LIMITS.places_max_keywords])
        visit_date = (now or datetime.now(timezone.utc)) + timedelta(days=LIMITS.visit_offset_days)

        events: list[CanonicalEvent] = []
        try:
            client = await self._get_client()
            for place_type in PLACE_TYPES.searched:
                resp = await client.get(
                    "/nearbysearch/json",
                    params={
                        "location": f"{lat},{lng}",
                        "radius": str(int(radius_m)),
                        "type": place_type,
                        "keyword": keyword,
                        "key": self._api_key,
                    },
                )
                resp.raise_for_status()
                data = resp.json()

                status = data.get("status")
                if status == "ZERO_RESULTS":
                    logger.debug(f"Places search for {place_type} returned no results")
                    continue
                if status != "OK":
                    # REQUEST_DENIED, OVER_QUERY_LIMIT, INVALID_REQUEST arrive as HTTP 200
                    return AdapterResult.failed(
                        EventSource.PLACES, FailureKind.HTTP_STATUS,
                        f"Places status {status}: {data.get('error_message')}",
                    )

                events.extend(self.map_places(data, place_type, visit_date))
        except httpx.HTTPStatusError as e:
            return AdapterResult.failed(
                EventSource.PLACES, FailureKind.HTTP_STATUS,
                f"Places API error: {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            # Don't echo the request URL here, it carries the API key
            return AdapterResult.failed(EventSource.PLACES, FailureKind.TRANSPORT, type(e).__name__)
        except ValueError as e:
            return AdapterResult.failed(EventSource.PLACES, FailureKind.PARSE, f"Invalid payload: {e}")
        except Exception as e:
            return AdapterResult.failed(EventSource.PLACES, FailureKind.UNEXPECTED, repr(e))

        return AdapterResult(source=EventSource.PLACES, events=events)

    @staticmethod
    def map_places(data: dict, place_type: str, visit_date: datetime) -> list[CanonicalEvent]:
        visits = []
        for raw in (data.get("results") or [])[:LIMITS.places_results_per_type]:
            place = PlaceResult.from_payload(raw)
            if not place.name:
                continue
            visits.append(place.to_visit(place_type, visit_date))
        return visits

    async def search_places(
        self,
        lat: float,
        lng: float,
        radius_m: float,
        theme: str,
        keywords: list[str] | None = None,
    ) -> list[CanonicalEvent]:
        """Visit suggestions near the family, or ``[]`` if the source is unavailable."""
        result = await self.fetch_places(lat, lng, radius_m, theme, keywords)
        if not result.ok:
            logger.warning(
                f"Google Places skipped ({result.failure.kind.value}): {result.failure.message}"
            )
            return []
        logger.info(f"Found {len(result.events)} Google Places visits")
        return result.events

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


google_places_client = GooglePlacesClient()
