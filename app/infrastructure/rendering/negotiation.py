"""Content negotiation for rendered responses."""

from enum import Enum
from typing import Optional


class MediaType(str, Enum):
    """Output formats of the renderer, in order of preference."""

    HTML = "text/html"
    JSON = "application/json"
    TEXT = "text/plain"


# Formats matched against the Accept header, TEXT is also the fallback
OFFERED = (MediaType.HTML, MediaType.JSON, MediaType.TEXT)


def parse_accept(header: Optional[str]) -> list[str]:
    """Parse an Accept header into media ranges by preference.

    Handles formats like "text/html,application/json;q=0.9,*/*;q=0.8".
    Ranges with q=0 are dropped and malformed quality values count as 1.0.

    Args:
        header: The Accept header value.

    Returns:
        Lowercase media ranges, highest quality first.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        media_range = part.split(";")[0].strip().lower()
        if not media_range:
            continue
        quality = 1.0

        for param in part.split(";")[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0

        if quality > 0:
            preferences.append((media_range, quality))

    return [media for media, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


def _matches(media_range: str, media_type: MediaType) -> bool:
    if media_range == "*/*":
        return True
    kind, _, subtype = media_range.partition("/")
    offered_kind, _, offered_subtype = media_type.value.partition("/")
    if subtype == "*":
        return kind == offered_kind
    return kind == offered_kind and subtype == offered_subtype


def negotiate(accept: Optional[str]) -> MediaType:
    """Pick the output format for an Accept header.

    Without an Accept header, or for wildcards, HTML is chosen. Headers
    matching none of the offered formats fall through to plain text.

    Args:
        accept: The Accept header value.

    Returns:
        The negotiated MediaType.
    """
    if not accept or not accept.strip():
        return OFFERED[0]
    for media_range in parse_accept(accept):
        for media_type in OFFERED:
            if _matches(media_range, media_type):
                return media_type
    return MediaType.TEXT
