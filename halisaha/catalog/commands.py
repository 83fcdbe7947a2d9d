"""CLI commands for the catalog blueprint."""

import click
from flask import current_app

from halisaha.storage import get_db
from halisaha.user.services import UserService

from . import bp
from .services import CatalogService


@bp.cli.command("seed-matches")
@click.option(
    "--organizer",
    required=True,
    help="Username of the registered user who will organise the seed matches.",
)
def seed_matches(organizer):
    """Create one open match per catalog venue."""
    db = get_db()
    user = UserService.get_by_username(db, organizer)
    if user is None:
        raise click.ClickException(f"No user named {organizer!r}.")

    created = CatalogService.seed_matches(db, user["id"])
    current_app.logger.info(f"Seeded {len(created)} matches for {organizer}")
    click.echo(f"Created {len(created)} matches organised by {organizer}.")
