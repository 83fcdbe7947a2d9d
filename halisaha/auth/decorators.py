"""Decorators for the auth blueprint."""

from functools import wraps

from flask import g

from halisaha.errors import UnauthorizedError


def login_required(f):
    """Reject the request with 401 if no user is logged in.

    Usage:
    @login_required
    def protected_view():
        ...
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if g.get("user") is None:
            raise UnauthorizedError()
        return f(*args, **kwargs)

    return decorated_function
