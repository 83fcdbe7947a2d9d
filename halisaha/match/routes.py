"""Routes for the match blueprint.

``/maclar`` and ``/matches`` are two spellings of the same registry; they
differ only in the query-parameter names their clients send.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import current_app, g, jsonify, request

from halisaha.auth.decorators import login_required
from halisaha.errors import NotFoundError
from halisaha.storage import get_db
from halisaha.user.services import UserService

from . import bp
from .forms import FeedbackForm, MatchForm
from .models import MatchFilters
from .services import MatchService
from .visibility import project_match, project_matches

MATCH_NOT_FOUND = "Maç bulunamadı"


def _viewer_id() -> Optional[str]:
    user = g.get("user")
    return user["id"] if user else None


def _arg(*names: str) -> Optional[str]:
    """Return the first non-blank query parameter among ``names``."""
    for name in names:
        value = request.args.get(name, "").strip()
        if value:
            return value
    return None


def _list_response(filters: MatchFilters) -> Any:
    db = get_db()
    matches = MatchService.list_matches(db, filters)
    return jsonify(project_matches(db, matches, _viewer_id()))


@bp.route("/maclar", methods=["GET"])
def list_maclar():
    """List matches filtered by konum, mevki and tarih."""
    filters = MatchFilters(
        location=_arg("konum"),
        position=_arg("mevki"),
        date=_arg("tarih"),
        skill_level=_arg("seviye"),
    )
    return _list_response(filters)


@bp.route("/matches", methods=["GET"])
def list_matches():
    """List matches filtered by location, date, skillLevel and position."""
    filters = MatchFilters(
        location=_arg("location"),
        position=_arg("position"),
        date=_arg("date"),
        skill_level=_arg("skillLevel"),
    )
    return _list_response(filters)


@bp.route("/maclar", methods=["POST"])
@bp.route("/matches", methods=["POST"])
@login_required
def create_match():
    """Create a match organised by the logged-in user."""
    form = MatchForm.from_request()
    form.validate_or_raise()

    db = get_db()
    match = MatchService.create(db, form.to_submission(), g.user["id"])
    return (
        jsonify(
            {
                "message": "Maç ilanı başarıyla oluşturuldu!",
                "match": project_match(db, match, g.user["id"]),
            }
        ),
        201,
    )


@bp.route("/maclar/<string:match_id>", methods=["GET"])
@bp.route("/matches/<string:match_id>", methods=["GET"])
def view_match(match_id):
    """Return one match as the caller is allowed to see it."""
    db = get_db()
    match = MatchService.get_by_id(db, match_id)
    if match is None:
        raise NotFoundError(MATCH_NOT_FOUND)
    return jsonify(project_match(db, match, _viewer_id()))


@bp.route("/maclar/<string:match_id>/katil", methods=["POST"])
@login_required
def join_match(match_id):
    """Join a match. Joining again is harmless."""
    db = get_db()
    match = MatchService.join(db, match_id, g.user["id"])
    if match is None:
        raise NotFoundError(MATCH_NOT_FOUND)
    return jsonify(
        {"message": "Maça katıldınız", "match": project_match(db, match, g.user["id"])}
    )


@bp.route("/maclar/<string:match_id>/ayril", methods=["POST"])
@login_required
def leave_match(match_id):
    """Leave a match and take the reliability penalty."""
    db = get_db()
    user_id = g.user["id"]
    match = MatchService.leave(db, match_id, user_id)
    if match is None:
        raise NotFoundError(MATCH_NOT_FOUND)

    user = UserService.get_by_id(db, user_id)
    return jsonify(
        {
            "message": "Maçtan ayrıldınız",
            "match": project_match(db, match, user_id),
            "reliabilityScore": user["reliabilityScore"] if user else None,
        }
    )


@bp.route("/maclar/<string:match_id>/geri-bildirim", methods=["POST"])
@login_required
def add_feedback(match_id):
    """Rate a match from 1 to 5 with a comment."""
    form = FeedbackForm.from_request()
    form.validate_or_raise()

    db = get_db()
    match = MatchService.add_feedback(
        db, match_id, g.user["id"], form.comment.data, form.rating.data
    )
    if match is None:
        raise NotFoundError(MATCH_NOT_FOUND)
    return jsonify(
        {
            "message": "Geri bildiriminiz kaydedildi",
            "match": project_match(db, match, g.user["id"]),
        }
    )


@bp.route("/maclarim", methods=["GET"])
@login_required
def my_matches():
    """Matches the caller organises and matches they joined."""
    db = get_db()
    user_id = g.user["id"]
    organizing, joined = MatchService.matches_for_user(db, user_id)
    current_app.logger.debug(
        f"User {user_id}: {len(organizing)} organizing, {len(joined)} joined"
    )
    return jsonify(
        {
            "organizing": project_matches(db, organizing, user_id),
            "joined": project_matches(db, joined, user_id),
        }
    )
