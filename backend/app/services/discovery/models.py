"""Canonical event record and the upstream payload shapes mapped into it."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from app.services.discovery.config import LIMITS, PLACE_TYPES, TICKETED_CATEGORIES


class EventSource(str, Enum):
    TICKETED = "ticketed"
    PLACES = "places"


@dataclass
class CanonicalEvent:
    """One discoverable activity, regardless of which provider produced it.

    Adapters fill the descriptive fields only. ``family_id``, ``drive_minutes``
    and ``why_it_fits`` are attached by the orchestrator after merging.
    """
    event_name: str
    event_date: datetime
    location: str
    cost: str
    category: str
    source: EventSource
    external_id: str | None = None
    description: str | None = None
    end_date: datetime | None = None
    latitude: float | None = None
    longitude: float | None = None
    ticket_url: str | None = None
    # Derived
    family_id: str | None = None
    drive_minutes: int | None = None
    why_it_fits: str | None = None

    def __post_init__(self):
        if not self.event_name:
            raise ValueError("event_name must be non-empty")
        if not self.location:
            raise ValueError("location must be non-empty")
        if self.end_date is not None and self.end_date < self.event_date:
            self.end_date = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict; unset optional fields are left out entirely."""
        data = asdict(self)
        data["source"] = self.source.value
        data["event_date"] = self.event_date.isoformat()
        if self.end_date is not None:
            data["end_date"] = self.end_date.isoformat()
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CanonicalEvent":
        """Inverse of ``to_dict``, used when reading cached weeks back."""
        values = dict(data)
        values["source"] = EventSource(values["source"])
        values["event_date"] = datetime.fromisoformat(values["event_date"])
        if values.get("end_date"):
            values["end_date"] = datetime.fromisoformat(values["end_date"])
        return cls(**values)


class FailureKind(str, Enum):
    MISSING_CREDENTIALS = "missing_credentials"
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    PARSE = "parse"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class AdapterFailure:
    kind: FailureKind
    message: str


@dataclass
class AdapterResult:
    """Outcome of one adapter call: events, or the reason there are none."""
    source: EventSource
    events: list[CanonicalEvent] = field(default_factory=list)
    failure: AdapterFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, source: EventSource, kind: FailureKind, message: str) -> "AdapterResult":
        return cls(source=source, failure=AdapterFailure(kind, message))


def _truncate(text: str | None, limit: int = LIMITS.description_max_chars) -> str | None:
    if text is None:
        return None
    return text[:limit]


def _to_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class EventbriteListing:
    """The parts of an Eventbrite event payload we use."""
    id: str
    name: str
    start: datetime
    end: datetime | None
    url: str | None
    is_free: bool
    min_price_display: str | None
    category_id: str | None
    address: str | None
    latitude: float | None
    longitude: float | None
    description: str | None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "EventbriteListing":
        venue = raw.get("venue") or {}
        address = (venue.get("address") or {}).get("localized_address_display")
        price = ((raw.get("ticket_availability") or {}).get("minimum_ticket_price") or {})
        end = (raw.get("end") or {}).get("local")
        return cls(
            id=str(raw["id"]),
            name=((raw.get("name") or {}).get("text") or "").strip(),
            start=datetime.fromisoformat(raw["start"]["local"]),
            end=datetime.fromisoformat(end) if end else None,
            url=raw.get("url"),
            is_free=bool(raw.get("is_free", False)),
            min_price_display=price.get("display"),
            category_id=raw.get("category_id"),
            address=address,
            latitude=_to_float(venue.get("latitude")),
            longitude=_to_float(venue.get("longitude")),
            description=(raw.get("description") or {}).get("text"),
        )

    @property
    def cost(self) -> str:
        if self.is_free:
            return "FREE"
        return self.min_price_display or "Paid"

    def to_canonical(self) -> CanonicalEvent:
        return CanonicalEvent(
            event_name=self.name,
            event_date=self.start,
            end_date=self.end,
            location=self.address or "Online",
            latitude=self.latitude,
            longitude=self.longitude,
            cost=self.cost,
            category=TICKETED_CATEGORIES.category_for(self.category_id),
            description=_truncate(self.description),
            ticket_url=self.url,
            source=EventSource.TICKETED,
            external_id=self.id,
        )


@dataclass(frozen=True)
class PlaceResult:
    """One result row from a Places nearby search."""
    place_id: str | None
    name: str
    vicinity: str | None
    latitude: float | None
    longitude: float | None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "PlaceResult":
        loc = (raw.get("geometry") or {}).get("location") or {}
        return cls(
            place_id=raw.get("place_id"),
            name=(raw.get("name") or "").strip(),
            vicinity=raw.get("vicinity"),
            latitude=_to_float(loc.get("lat")),
            longitude=_to_float(loc.get("lng")),
        )

    def to_visit(self, place_type: str, visit_date: datetime) -> CanonicalEvent:
        """Self-guided visit suggestion; places have no schedule of their own."""
        return CanonicalEvent(
            event_name=f"Visit: {self.name}",
            event_date=visit_date,
            location=self.vicinity or self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            cost="Varies",
            category=PLACE_TYPES.category_for(place_type),
            description=_truncate(f"Self-guided visit to {self.name}"),
            source=EventSource.PLACES,
            external_id=self.place_id,
        )
