"""Data models for the static catalog."""

from __future__ import annotations

from halisaha.core.types import JsonRecord


class Venue(JsonRecord):
    """A pitch that matches can be organised at."""

    name: str
    location: str
    imageUrl: str
    amenities: list[str]
    available: int


class Testimonial(JsonRecord):
    """A quote from a player shown on the landing page."""

    name: str
    quote: str
    matchCount: int
    avatarUrl: str
