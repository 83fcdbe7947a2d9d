"""Initialize the Flask app and its storage."""

import os

from flask import Flask, current_app, g, session
from werkzeug.middleware.proxy_fix import ProxyFix

from . import storage
from .constants import MATCHES_FILE, SESSION_USER_ID, USERS_FILE


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        DATA_DIR=os.environ.get("DATA_DIR") or app.instance_path,
        USERS_FILE=os.environ.get("USERS_FILE") or USERS_FILE,
        MATCHES_FILE=os.environ.get("MATCHES_FILE") or MATCHES_FILE,
        LOG_LEVEL=(os.environ.get("LOG_LEVEL") or "INFO").upper(),
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE=os.environ.get("SESSION_COOKIE_SAMESITE") or "Lax",
        SESSION_COOKIE_SECURE=(os.environ.get("SESSION_COOKIE_SECURE") or "false")
        .lower()
        in ["true", "1", "t"],
    )

    if test_config:
        app.config.update(test_config)

    app.json.sort_keys = False
    app.logger.setLevel(app.config["LOG_LEVEL"])
    if app.config["SECRET_KEY"] == "dev" and not app.config.get("TESTING"):
        app.logger.warning("SECRET_KEY is not set; sessions use the dev key.")

    # Ensure the data folder exists
    os.makedirs(app.config["DATA_DIR"], exist_ok=True)
    storage.init_app(app)

    # Register blueprints
    from . import auth as auth_bp

    app.register_blueprint(auth_bp.bp)

    from . import user as user_bp

    app.register_blueprint(user_bp.bp)

    from . import match as match_bp

    app.register_blueprint(match_bp.bp)

    from . import catalog as catalog_bp

    app.register_blueprint(catalog_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    @app.before_request
    def load_logged_in_user():
        """If a user_id is in the session, load the user record into g."""
        from .user.services import UserService

        user_id = session.get(SESSION_USER_ID)
        g.user = None
        if user_id is None:
            return

        user = UserService.get_by_id(storage.get_db(), user_id)
        if user is None:
            # User ID in session but no user in storage. Clear the session.
            session.clear()
            current_app.logger.warning(f"User {user_id} in session but not found.")
            return
        g.user = user

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
