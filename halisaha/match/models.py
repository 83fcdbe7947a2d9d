"""Data models for the match blueprint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TypedDict

from halisaha.core.types import JsonRecord


class Feedback(TypedDict):
    """A review left on a match."""

    userId: str
    comment: str
    rating: int


class Match(JsonRecord, total=False):
    """A match record in matches.json."""

    venueName: str
    location: str
    date: str
    time: str
    maxPlayers: int
    currentPlayers: int
    skillLevel: str
    price: int
    requiredPositions: list[str]
    participantIds: list[str]
    organizerId: str
    feedback: list[Feedback]
    venueId: Optional[str]
    imageUrl: Optional[str]

    # Only present on responses to a participant
    organizerPhone: Optional[str]


@dataclass
class MatchSubmission:
    """Dataclass for a new match listing."""

    venue_name: str
    location: str
    date: str
    time: str
    max_players: int
    skill_level: str
    price: int
    required_positions: list[str] = field(default_factory=list)
    venue_id: Optional[str] = None
    image_url: Optional[str] = None


@dataclass
class MatchFilters:
    """Optional predicates for listing matches. Unset filters match everything."""

    location: Optional[str] = None
    position: Optional[str] = None
    date: Optional[str] = None
    skill_level: Optional[str] = None

    def matches(self, match: Match) -> bool:
        """Return True if ``match`` satisfies every set filter."""
        if self.location and (
            self.location.lower() not in (match.get("location") or "").lower()
        ):
            return False
        if self.position:
            wanted = self.position.lower()
            if not any(
                p.lower() == wanted for p in match.get("requiredPositions") or []
            ):
                return False
        if self.date and self.date not in (match.get("date") or ""):
            return False
        if self.skill_level and (
            self.skill_level.lower() != (match.get("skillLevel") or "").lower()
        ):
            return False
        return True
