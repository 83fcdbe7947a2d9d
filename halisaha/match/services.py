"""Service layer for match data access and membership."""

from __future__ import annotations

import copy
import uuid
from typing import TYPE_CHECKING, Any, Callable, cast

from flask import current_app

from halisaha.constants import LEAVE_PENALTY
from halisaha.errors import PersistenceError
from halisaha.user.services import UserService

from .models import Feedback, Match, MatchFilters, MatchSubmission

if TYPE_CHECKING:
    from halisaha.core.types import Records
    from halisaha.storage import Database


def _with_defaults(record: dict[str, Any]) -> Match:
    """Fill list fields that older records may be missing."""
    record.setdefault("participantIds", [])
    record.setdefault("requiredPositions", [])
    record.setdefault("feedback", [])
    record.setdefault("venueId", None)
    record.setdefault("imageUrl", None)
    return cast("Match", record)


def _find(records: Records, match_id: str) -> Match | None:
    for record in records:
        if record.get("id") == match_id:
            return _with_defaults(record)
    return None


def _recount(match: Match) -> None:
    # The organizer fills the first slot and is never in participantIds.
    match["currentPlayers"] = len(match["participantIds"]) + 1


class MatchService:
    """Service class for match-related operations.

    Every mutation loads the whole collection, changes it and writes it back
    while holding the collection lock.
    """

    @staticmethod
    def _mutate(
        db: Database, match_id: str, change: Callable[[Match], bool]
    ) -> Match | None:
        """Apply ``change`` to one match and persist if it reports a change."""
        with db.matches.lock:
            records = db.matches.load_all()
            match = _find(records, match_id)
            if match is None:
                return None
            if change(match):
                db.matches.save_all(records)
            return match

    @staticmethod
    def create(
        db: Database, submission: MatchSubmission, organizer_id: str
    ) -> Match:
        """Store a new open match organised by ``organizer_id``."""
        match: Match = {
            "id": str(uuid.uuid4()),
            "venueName": submission.venue_name,
            "location": submission.location,
            "date": submission.date,
            "time": submission.time,
            "maxPlayers": submission.max_players,
            "currentPlayers": 1,
            "skillLevel": submission.skill_level,
            "price": submission.price,
            "requiredPositions": list(submission.required_positions),
            "participantIds": [],
            "organizerId": organizer_id,
            "feedback": [],
            "venueId": submission.venue_id,
            "imageUrl": submission.image_url,
        }
        with db.matches.lock:
            records = db.matches.load_all()
            records.append(dict(match))
            db.matches.save_all(records)

        current_app.logger.info(f"Match {match['id']} created by {organizer_id}")
        return match

    @staticmethod
    def list_matches(
        db: Database, filters: MatchFilters | None = None
    ) -> list[Match]:
        """Return matches in storage order, narrowed by ``filters``."""
        matches = [_with_defaults(r) for r in db.matches.load_all()]
        if filters is None:
            return matches
        return [m for m in matches if filters.matches(m)]

    @staticmethod
    def get_by_id(db: Database, match_id: str) -> Match | None:
        """Fetch a match by its ID."""
        return _find(db.matches.load_all(), match_id)

    @staticmethod
    def join(db: Database, match_id: str, user_id: str) -> Match | None:
        """Add ``user_id`` to the match.

        Joining twice, or joining a match you organise, changes nothing.
        Capacity is not checked.
        """

        def add(match: Match) -> bool:
            if user_id == match.get("organizerId"):
                return False
            if user_id in match["participantIds"]:
                return False
            match["participantIds"].append(user_id)
            _recount(match)
            return True

        match = MatchService._mutate(db, match_id, add)
        if match is not None:
            current_app.logger.info(f"User {user_id} joined match {match_id}")
        return match

    @staticmethod
    def leave(db: Database, match_id: str, user_id: str) -> Match | None:
        """Remove ``user_id`` from the match and apply the leave penalty.

        The penalty is charged on every call for an existing match, whether
        or not the user was a participant. If the penalty cannot be saved,
        the match is written back as it was and the error propagates.
        """
        with db.matches.lock:
            records = db.matches.load_all()
            previous = copy.deepcopy(records)
            match = _find(records, match_id)
            if match is None:
                return None

            match["participantIds"] = [
                pid for pid in match["participantIds"] if pid != user_id
            ]
            _recount(match)
            db.matches.save_all(records)

            # Lock order is always matches, then users.
            try:
                UserService.adjust_reliability(db, user_id, LEAVE_PENALTY)
            except PersistenceError:
                current_app.logger.error(
                    f"Leave of match {match_id} by {user_id} rolled back"
                )
                db.matches.save_all(previous)
                raise

        current_app.logger.info(
            f"User {user_id} left match {match_id} ({LEAVE_PENALTY} reliability)"
        )
        return match

    @staticmethod
    def add_feedback(
        db: Database, match_id: str, reviewer_id: str, comment: str, rating: int
    ) -> Match | None:
        """Append a feedback entry. Input is validated by the caller."""
        entry: Feedback = {"userId": reviewer_id, "comment": comment, "rating": rating}

        def append(match: Match) -> bool:
            match["feedback"].append(entry)
            return True

        match = MatchService._mutate(db, match_id, append)
        if match is not None:
            current_app.logger.info(
                f"Feedback added: match {match_id}, user {reviewer_id}"
            )
        return match

    @staticmethod
    def delete(db: Database, match_id: str) -> bool:
        """Remove a match. Returns False if it did not exist."""
        with db.matches.lock:
            records = db.matches.load_all()
            remaining = [r for r in records if r.get("id") != match_id]
            if len(remaining) == len(records):
                return False
            db.matches.save_all(remaining)
        return True

    @staticmethod
    def matches_for_user(
        db: Database, user_id: str
    ) -> tuple[list[Match], list[Match]]:
        """Return (organizing, joined) matches for a user."""
        organizing = []
        joined = []
        for match in MatchService.list_matches(db):
            if match.get("organizerId") == user_id:
                organizing.append(match)
            elif user_id in match["participantIds"]:
                joined.append(match)
        return organizing, joined
