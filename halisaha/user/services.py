"""Service layer for user data access."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any, cast

from flask import current_app

from halisaha.constants import DEFAULT_RELIABILITY_SCORE
from halisaha.errors import DuplicateUsernameError

from .models import PublicUser, User

if TYPE_CHECKING:
    from halisaha.storage import Database

OPTIONAL_FIELDS = ("height", "weight", "age", "profilePicture")


def _with_defaults(record: dict[str, Any]) -> User:
    """Fill fields that older records may be missing."""
    record.setdefault("reliabilityScore", DEFAULT_RELIABILITY_SCORE)
    for field in OPTIONAL_FIELDS:
        record.setdefault(field, None)
    return cast("User", record)


class UserService:
    """Service class for user-related operations."""

    @staticmethod
    def get_by_id(db: Database, user_id: str) -> User | None:
        """Fetch a user by their ID."""
        for record in db.users.load_all():
            if record.get("id") == user_id:
                return _with_defaults(record)
        return None

    @staticmethod
    def get_by_username(db: Database, username: str) -> User | None:
        """Fetch a user by exact, case-sensitive username."""
        for record in db.users.load_all():
            if record.get("username") == username:
                return _with_defaults(record)
        return None

    @staticmethod
    def create(db: Database, fields: dict[str, Any]) -> User:
        """Store a new user.

        ``fields["password"]`` must already be hashed. Raises
        DuplicateUsernameError if the username is taken.
        """
        with db.users.lock:
            users = db.users.load_all()
            if any(u.get("username") == fields["username"] for u in users):
                raise DuplicateUsernameError()

            user: User = {
                "id": str(uuid.uuid4()),
                "username": fields["username"],
                "password": fields["password"],
                "fullName": fields["fullName"],
                "phone": fields["phone"],
                "position": fields.get("position"),
                "height": fields.get("height"),
                "weight": fields.get("weight"),
                "age": fields.get("age"),
                "profilePicture": fields.get("profilePicture"),
                "reliabilityScore": DEFAULT_RELIABILITY_SCORE,
            }
            users.append(dict(user))
            db.users.save_all(users)

        current_app.logger.info(f"User registered: {user['username']} ({user['id']})")
        return user

    @staticmethod
    def adjust_reliability(db: Database, user_id: str, delta: int) -> User | None:
        """Add ``delta`` to a user's reliability score. No bounds are applied."""
        with db.users.lock:
            users = db.users.load_all()
            for record in users:
                if record.get("id") == user_id:
                    user = _with_defaults(record)
                    user["reliabilityScore"] += delta
                    db.users.save_all(users)
                    return user
        return None

    @staticmethod
    def public_profile(user: User) -> PublicUser:
        """Return the user record without its credential."""
        return cast(
            "PublicUser", {k: v for k, v in user.items() if k != "password"}
        )
