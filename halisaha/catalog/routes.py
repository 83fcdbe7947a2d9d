"""Routes for the catalog blueprint."""

from flask import jsonify

from halisaha.errors import NotFoundError

from . import bp
from .services import CatalogService


@bp.route("/venues", methods=["GET"])
def list_venues():
    """Return every venue."""
    return jsonify(CatalogService.get_venues())


@bp.route("/venues/<string:venue_id>", methods=["GET"])
def view_venue(venue_id):
    """Return one venue."""
    venue = CatalogService.get_venue(venue_id)
    if venue is None:
        raise NotFoundError("Saha bulunamadı")
    return jsonify(venue)


@bp.route("/testimonials", methods=["GET"])
def list_testimonials():
    """Return every testimonial."""
    return jsonify(CatalogService.get_testimonials())
