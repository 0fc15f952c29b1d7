"""Shared fixtures for the power plant registry tests."""

import datetime

import pytest
from fastapi.testclient import TestClient

import plant_registry.core.errors as errors
import plant_registry.main as main
import plant_registry.models.power_plant as plant_models
from plant_registry.store.memory import InMemoryRecordStore


class FailingRecordStore:
    """Record store double whose inserts always fail."""

    def __init__(self):
        self.insert_calls = 0

    def insert(self, plant, /):
        self.insert_calls += 1
        raise errors.RecordStoreError("disk full")

    def find_by_id(self, plant_id, /):
        return None


@pytest.fixture
def yesterday():
    return datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=1)


@pytest.fixture
def valid_payload(yesterday):
    """The payload of a well-formed power plant."""
    return plant_models.PowerPlantPayload(
        id=0,
        owner="John Doe",
        power=50.0,
        valid_from=yesterday,
        valid_to=None,
    )


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def failing_store():
    return FailingRecordStore()


@pytest.fixture
def client(store):
    """HTTP client for an app backed by a fresh in-memory store."""
    app = main.create_application(record_store=store)
    with TestClient(app) as test_client:
        yield test_client
