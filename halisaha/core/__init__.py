"""Core module for the halisaha application."""

from .types import JsonRecord, Records

__all__ = ["JsonRecord", "Records"]
