# -*- coding: utf-8 -*-

"""Process-local record store, the default backend and the one used by tests."""

import itertools
import threading


class InMemoryRecordStore:
    """Keep power plants in a dictionary keyed by their assigned identifier."""

    def __init__(self):
        self._records = {}
        self._ids = itertools.count(start=1)
        self._lock = threading.Lock()

    def insert(self, plant, /):
        with self._lock:
            stored = plant.model_copy(update={"id": next(self._ids)})
            self._records[stored.id] = stored
        return stored.model_copy()

    def find_by_id(self, plant_id, /):
        stored = self._records.get(plant_id)
        return stored.model_copy() if stored is not None else None

    def __len__(self):
        return len(self._records)
