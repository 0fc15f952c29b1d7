# -*- coding: utf-8 -*-

import plant_registry.store.memory as memory
import plant_registry.store.sqlite as sqlite
from plant_registry.store.base import RecordStore


def build_record_store(settings, /):
    """
    Build the record store selected by the settings.

    :param plant_registry.core.config.Settings settings: The runtime settings.

    :return: The configured record store.
    :retype: RecordStore
    """

    if settings.store_backend == "sqlite":
        return sqlite.SQLiteRecordStore(settings.database_path)
    return memory.InMemoryRecordStore()


__all__ = ["RecordStore", "build_record_store"]
