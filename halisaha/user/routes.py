"""Routes for the user blueprint."""

from flask import g, jsonify

from halisaha.auth.decorators import login_required

from . import bp
from .services import UserService


@bp.route("/profil", methods=["GET"])
@login_required
def profile():
    """Return the logged-in user without the password hash."""
    return jsonify(UserService.public_profile(g.user))
