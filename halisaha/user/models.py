"""Data models for the user blueprint."""

from __future__ import annotations

from typing import Optional, TypedDict

from halisaha.core.types import JsonRecord


class User(JsonRecord, total=False):
    """A user record in users.json."""

    username: str
    password: str
    fullName: str
    phone: str
    position: str
    height: Optional[int]
    weight: Optional[int]
    age: Optional[int]
    profilePicture: Optional[str]
    reliabilityScore: int


class PublicUser(JsonRecord, total=False):
    """A user record without its credential."""

    username: str
    fullName: str
    phone: str
    position: str
    height: Optional[int]
    weight: Optional[int]
    age: Optional[int]
    profilePicture: Optional[str]
    reliabilityScore: int
