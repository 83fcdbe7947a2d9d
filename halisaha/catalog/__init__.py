"""The catalog blueprint: read-only venues and testimonials."""

from flask import Blueprint

bp = Blueprint("catalog", __name__, url_prefix="/api", cli_group=None)

from . import commands, routes  # noqa: E402

__all__ = ["commands", "routes"]
