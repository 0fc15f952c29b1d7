# -*- coding: utf-8 -*-

"""Create and look up power plant records."""

import logging

import plant_registry.core.errors as errors
import plant_registry.models.power_plant as plant_models
import plant_registry.services.validation as validation

MISSING_PAYLOAD_MESSAGE = "Power plant data is required"

logger = logging.getLogger(__name__)


def create_power_plant(payload, store, /):
    """
    Validate a creation request and persist the resulting power plant.

    Any identifier supplied by the caller is ignored, the store assigns a new one.

    :param plant_models.PowerPlantPayload payload: The creation request, None when absent.
    :param plant_registry.store.RecordStore store: The record store receiving the plant.

    :raises errors.MissingPayloadError: If no payload was submitted.
    :raises errors.PowerPlantValidationError: If any business rule is violated.
    :raises errors.StoreFailureError: If the store could not persist the plant.

    :return: The stored power plant, including its assigned identifier.
    :retype: plant_models.PowerPlant
    """

    if payload is None:
        raise errors.MissingPayloadError(MISSING_PAYLOAD_MESSAGE)

    failures = validation.validate_power_plant(payload)
    if failures:
        raise errors.PowerPlantValidationError(failures)

    plant = plant_models.PowerPlant(
        owner=payload.owner,
        power=payload.power,
        valid_from=payload.valid_from,
        valid_to=payload.valid_to,
    )
    try:
        stored = store.insert(plant)
    except errors.RecordStoreError as exc:
        raise errors.StoreFailureError("Failed to store power plant.") from exc

    logger.info("Power plant created", extra={"plant_id": stored.id, "power": stored.power})
    return stored


def get_power_plant(plant_id, store, /):
    """
    Fetch a stored power plant.

    :param int plant_id: The identifier assigned on creation.
    :param plant_registry.store.RecordStore store: The record store to read from.

    :raises errors.PowerPlantNotFoundError: If no plant has this identifier.

    :return: The stored power plant.
    :retype: plant_models.PowerPlant
    """

    plant = store.find_by_id(plant_id)
    if plant is None:
        raise errors.PowerPlantNotFoundError(f"Power plant {plant_id} not found")
    return plant
