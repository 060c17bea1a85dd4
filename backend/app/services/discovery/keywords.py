"""Theme keyword extraction."""

from app.services.discovery.config import KEYWORDS


def extract_keywords(theme: str, limit: int = KEYWORDS.max_keywords) -> list[str]:
    """
    Reduce a free-text weekly theme to search terms.

    Lowercases, splits on whitespace, drops short tokens and stop words,
    and keeps the first ``limit`` survivors in their original order.
    """
    words = (theme or "").lower().split()
    keep = [
        w for w in words
        if len(w) >= KEYWORDS.min_length and w not in KEYWORDS.stop_words
    ]
    return keep[:limit]
