# -*- coding: utf-8 -*-

import fastapi

from plant_registry.store import RecordStore


def get_record_store(request: fastapi.Request) -> RecordStore:
    """Return the record store attached to the running application."""
    return request.app.state.record_store
