"""Core data types for the halisaha application."""

from typing import Any, Dict, List, TypedDict  # noqa: UP035


class JsonRecord(TypedDict):
    """A record stored in one of the JSON collections."""

    id: str


Records = List[Dict[str, Any]]  # noqa: UP006
