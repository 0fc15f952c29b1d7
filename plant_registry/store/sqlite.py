# -*- coding: utf-8 -*-

"""SQLite-backed record store."""

import contextlib
import datetime
import logging
import sqlite3

import plant_registry.core.errors as errors
import plant_registry.models.power_plant as plant_models

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS power_plants (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        owner TEXT NOT NULL,
        power REAL NOT NULL,
        valid_from TEXT NOT NULL,
        valid_to TEXT
    )
"""
_INSERT = "INSERT INTO power_plants (owner, power, valid_from, valid_to) VALUES (?, ?, ?, ?)"
_SELECT_BY_ID = "SELECT id, owner, power, valid_from, valid_to FROM power_plants WHERE id = ?"


class SQLiteRecordStore:
    """
    Store power plants in a single SQLite table.

    Each operation opens its own connection, so one store can serve the worker threads
    handling requests. Identifiers come from the table's AUTOINCREMENT key.
    """

    def __init__(self, database_path, /):
        self.database_path = str(database_path)
        try:
            with contextlib.closing(self._connect()) as conn, conn:
                conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise errors.RecordStoreError(f"Could not prepare database {self.database_path}: {exc}") from exc

    def insert(self, plant, /):
        values = (
            plant.owner,
            float(plant.power),
            plant.valid_from.isoformat(),
            plant.valid_to.isoformat() if plant.valid_to is not None else None,
        )
        try:
            # The connection context manager rolls the insert back on failure.
            with contextlib.closing(self._connect()) as conn, conn:
                cursor = conn.execute(_INSERT, values)
        except sqlite3.Error as exc:
            logger.error("Failed to insert power plant", extra={"database_path": self.database_path})
            raise errors.RecordStoreError(f"Could not insert power plant: {exc}") from exc
        return plant.model_copy(update={"id": int(cursor.lastrowid)})

    def find_by_id(self, plant_id, /):
        try:
            with contextlib.closing(self._connect()) as conn:
                row = conn.execute(_SELECT_BY_ID, (plant_id,)).fetchone()
        except sqlite3.Error as exc:
            raise errors.RecordStoreError(f"Could not read power plant {plant_id}: {exc}") from exc
        return _row_to_plant(row) if row is not None else None

    def _connect(self):
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn


def _row_to_plant(row, /):
    valid_to = row["valid_to"]
    return plant_models.PowerPlant(
        id=row["id"],
        owner=row["owner"],
        power=row["power"],
        valid_from=datetime.datetime.fromisoformat(row["valid_from"]),
        valid_to=datetime.datetime.fromisoformat(valid_to) if valid_to is not None else None,
    )
