"""
Shared pytest fixtures for the discovery test suite.

Provides CanonicalEvent factories and canned upstream payloads.
"""

from datetime import datetime

import pytest

from app.services.discovery.models import CanonicalEvent, EventSource


@pytest.fixture
def make_event():
    """
    Return a function that creates CanonicalEvent objects with sensible defaults.

    Example:
        event = make_event(event_name="Star Party", location="Observatory Hill")
    """

    def _make_event(
        event_name: str = "Test Event",
        location: str = "100 Main St, Springfield",
        source: EventSource = EventSource.TICKETED,
        **kwargs,
    ) -> CanonicalEvent:
        defaults = {
            "event_name": event_name,
            "location": location,
            "source": source,
            "event_date": datetime(2026, 10, 20, 10, 0),
            "cost": "FREE",
            "category": "education",
        }
        defaults.update(kwargs)
        return CanonicalEvent(**defaults)

    return _make_event


@pytest.fixture
def eventbrite_payload():
    """A search response with one free, one paid and one venue-less event."""
    return {
        "events": [
            {
                "id": "eb-1",
                "name": {"text": "Rome Engineering Workshop"},
                "start": {"local": "2026-10-21T10:00:00"},
                "end": {"local": "2026-10-21T12:00:00"},
                "venue": {
                    "address": {"localized_address_display": "12 Forum Way, Springfield"},
                    "latitude": "39.7900",
                    "longitude": "-89.6500",
                },
                "is_free": True,
                "url": "https://www.eventbrite.com/e/eb-1",
                "description": {"text": "Build a working aqueduct model."},
                "category_id": "110",
            },
            {
                "id": "eb-2",
                "name": {"text": "Family Mosaic Night"},
                "start": {"local": "2026-10-23T18:00:00"},
                "venue": {
                    "address": {"localized_address_display": "5 Art Ave, Springfield"},
                },
                "is_free": False,
                "ticket_availability": {"minimum_ticket_price": {"display": "$10.00"}},
                "url": "https://www.eventbrite.com/e/eb-2",
                "category_id": "999",
            },
            {
                "id": "eb-3",
                "name": {"text": "Latin Storytime"},
                "start": {"local": "2026-10-24T09:00:00"},
                "is_free": False,
                "category_id": "108",
            },
        ]
    }


@pytest.fixture
def places_payload():
    """One OK nearby-search body with four results."""
    return {
        "status": "OK",
        "results": [
            {
                "place_id": f"pl-{i}",
                "name": f"Roman Gallery {i}",
                "vicinity": f"{i} Museum Row, Springfield",
                "geometry": {"location": {"lat": 39.78 + i / 100, "lng": -89.64}},
            }
            for i in range(1, 5)
        ],
    }

