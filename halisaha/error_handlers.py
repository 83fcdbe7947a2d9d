from flask import Blueprint, current_app, jsonify
from werkzeug.exceptions import HTTPException

from .errors import AppError

error_handlers_bp = Blueprint("error_handlers", __name__)


@error_handlers_bp.app_errorhandler(AppError)
def handle_app_error(error):
    """Turn any AppError into a JSON body with its status code."""
    if error.status_code >= 500:
        current_app.logger.error(f"Application Error: {error.message}")
    else:
        current_app.logger.warning(f"{type(error).__name__}: {error.message}")
    return jsonify({"error": error.message}), error.status_code


@error_handlers_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    """Answer werkzeug HTTP errors (404, 405, bad JSON...) in JSON."""
    return jsonify({"error": e.description}), e.code


@error_handlers_bp.app_errorhandler(500)
def handle_500(e):
    """Handles unexpected server errors."""
    original = getattr(e, "original_exception", None) or e
    current_app.logger.error(f"Internal Server Error: {original}")
    # Avoid exposing raw error details to the client
    return jsonify({"error": "Beklenmeyen bir hata oluştu"}), 500
