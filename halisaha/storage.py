"""Whole-collection JSON file storage."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from flask import current_app

from .constants import MATCHES_FILE, USERS_FILE
from .errors import PersistenceError

if TYPE_CHECKING:
    from flask import Flask

    from .core.types import Records

logger = logging.getLogger(__name__)

EXTENSION_KEY = "halisaha.db"


class JsonCollection:
    """A list of records persisted as a single JSON array file.

    Callers read the whole collection, mutate it in memory and write the
    whole collection back. ``lock`` must be held across that cycle so two
    writers on the same collection cannot overwrite each other.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Bind the collection to its file."""
        self.path = Path(path)
        self.lock = threading.RLock()

    def load_all(self) -> Records:
        """Return every record, creating an empty store if none exists.

        Parse failures are logged and read as an empty collection.
        """
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("[]", encoding="utf-8")
                return []
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Error reading {self.path}: top level is not a list")
            return []
        return data

    def save_all(self, records: Records) -> None:
        """Replace the stored collection with ``records``.

        The file is swapped in atomically; on failure the previous content
        stays on disk and ``PersistenceError`` is raised.
        """
        tmp_path = None
        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(payload)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing to {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError() from e

    def __repr__(self) -> str:
        return f"<JsonCollection {self.path}>"


class Database:
    """The two collections owned by one application instance."""

    def __init__(
        self,
        data_dir: str | os.PathLike[str],
        users_file: str = USERS_FILE,
        matches_file: str = MATCHES_FILE,
    ) -> None:
        """Create the collections under ``data_dir``."""
        self.data_dir = Path(data_dir)
        self.users = JsonCollection(self.data_dir / users_file)
        self.matches = JsonCollection(self.data_dir / matches_file)


def init_app(app: Flask) -> Database:
    """Attach a Database built from the app config."""
    db = Database(
        app.config["DATA_DIR"],
        users_file=app.config["USERS_FILE"],
        matches_file=app.config["MATCHES_FILE"],
    )
    app.extensions[EXTENSION_KEY] = db
    return db


def get_db() -> Database:
    """Return the Database of the current application."""
    return current_app.extensions[EXTENSION_KEY]
