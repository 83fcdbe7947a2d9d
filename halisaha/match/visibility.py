"""Decide how much of a match a viewer may see.

The projection is recomputed on every read: joining or leaving changes a
viewer's role between requests, so nothing here is cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from halisaha.user.services import UserService

if TYPE_CHECKING:
    from halisaha.storage import Database

    from .models import Match

ROLE_ORGANIZER = "organizer"
ROLE_PARTICIPANT = "participant"
ROLE_GUEST = "guest"

PUBLIC_FIELDS = (
    "id",
    "venueName",
    "location",
    "date",
    "time",
    "maxPlayers",
    "currentPlayers",
    "skillLevel",
    "price",
    "requiredPositions",
    "venueId",
    "imageUrl",
)


def viewer_role(match: Match, viewer_id: Optional[str]) -> str:
    """Return the viewer's relationship to the match."""
    if viewer_id is None:
        return ROLE_GUEST
    if viewer_id == match.get("organizerId"):
        return ROLE_ORGANIZER
    if viewer_id in (match.get("participantIds") or []):
        return ROLE_PARTICIPANT
    return ROLE_GUEST


def project_match(
    db: Database, match: Match, viewer_id: Optional[str]
) -> dict[str, Any]:
    """Return the part of ``match`` that ``viewer_id`` may see.

    Guests get the listing fields only. The organizer gets the full record.
    Participants get the full record plus the organizer's phone number.
    """
    role = viewer_role(match, viewer_id)
    if role == ROLE_GUEST:
        return {k: match.get(k) for k in PUBLIC_FIELDS}

    projected: dict[str, Any] = dict(match)
    projected.pop("organizerPhone", None)
    if role == ROLE_PARTICIPANT:
        organizer_id = match.get("organizerId")
        organizer = UserService.get_by_id(db, organizer_id) if organizer_id else None
        projected["organizerPhone"] = organizer.get("phone") if organizer else None
    return projected


def project_matches(
    db: Database, matches: list[Match], viewer_id: Optional[str]
) -> list[dict[str, Any]]:
    """Project a list of matches for one viewer."""
    return [project_match(db, m, viewer_id) for m in matches]
