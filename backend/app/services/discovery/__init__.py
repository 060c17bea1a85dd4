"""Weekly local-opportunity discovery.

Modules:
    config        Limits, category tables and drive-time constants
    models        CanonicalEvent, adapter results, upstream payload shapes
    keywords      Theme -> search keywords
    geo           Haversine distance and drive-time estimate
    dedupe        First-seen-wins name+location deduplication
    relevance     Drive time and "why it fits" annotation
    orchestrator  Concurrent fan-out to Eventbrite and Google Places

Pipeline:
    extract_keywords → EventbriteClient ∥ GooglePlacesClient
    → deduplicate_events → cap → annotate_event
"""
