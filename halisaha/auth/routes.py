"""Routes for the auth blueprint."""

from flask import current_app, g, jsonify, session
from werkzeug.security import check_password_hash, generate_password_hash

from halisaha.constants import (
    PASSWORD_HASH_METHOD,
    SESSION_USER_ID,
    SESSION_USERNAME,
)
from halisaha.errors import UnauthorizedError
from halisaha.storage import get_db
from halisaha.user.services import UserService

from . import bp
from .forms import LoginForm, RegisterForm

INVALID_CREDENTIALS = "Hatalı Kullanıcı Adı veya Şifre"


@bp.route("/kayit", methods=["POST"])
def register():
    """Create an account. The password is hashed before it reaches storage."""
    form = RegisterForm.from_request()
    form.validate_or_raise()

    hashed_password = generate_password_hash(
        form.password.data, method=PASSWORD_HASH_METHOD
    )
    user = UserService.create(get_db(), form.to_fields(hashed_password))

    return (
        jsonify(
            {
                "message": "Kayıt başarılı! Giriş yapabilirsiniz.",
                "user": UserService.public_profile(user),
            }
        ),
        201,
    )


@bp.route("/giris", methods=["POST"])
def login():
    """Start a session.

    Unknown usernames and wrong passwords get the same answer so the
    response does not reveal which usernames exist.
    """
    form = LoginForm.from_request()
    form.validate_or_raise()

    user = UserService.get_by_username(get_db(), form.username.data)
    if user is None or not check_password_hash(user["password"], form.password.data):
        current_app.logger.info(f"Failed login for {form.username.data}")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    session.clear()
    session[SESSION_USER_ID] = user["id"]
    session[SESSION_USERNAME] = user["username"]

    return jsonify(
        {"message": "Giriş başarılı!", "user": UserService.public_profile(user)}
    )


@bp.route("/cikis", methods=["POST"])
def logout():
    """Clear the server-side session."""
    session.clear()
    return jsonify({"message": "Çıkış yapıldı"})


@bp.route("/auth/durum", methods=["GET"])
def status():
    """Report whether the caller has a live session."""
    user = g.get("user")
    if user is None:
        return jsonify({"authenticated": False})
    return jsonify({"authenticated": True, "username": user["username"]})
