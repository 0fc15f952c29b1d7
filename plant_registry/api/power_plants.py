# -*- coding: utf-8 -*-

import logging
import typing

import fastapi

import plant_registry.api.dependencies as dependencies
import plant_registry.core.errors as errors
import plant_registry.models.power_plant as plant_models
import plant_registry.services.creation as creation_service

router = fastapi.APIRouter(prefix="/powerplants", tags=["power-plants"])
logger = logging.getLogger(__name__)


@router.post("", response_model=plant_models.PowerPlant, status_code=fastapi.status.HTTP_201_CREATED)
def add_power_plant(
    request: fastapi.Request,
    response: fastapi.Response,
    payload: typing.Optional[plant_models.PowerPlantPayload] = fastapi.Body(default=None),
    store=fastapi.Depends(dependencies.get_record_store),
) -> plant_models.PowerPlant:
    """Validate and store a new power plant."""

    try:
        plant = creation_service.create_power_plant(payload, store)
    except errors.MissingPayloadError as exc:
        logger.warning("Power plant creation request without body")
        raise fastapi.HTTPException(status_code=fastapi.status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except errors.PowerPlantValidationError as exc:
        logger.warning("Invalid power plant", extra={"errors": exc.errors})
        raise fastapi.HTTPException(
            status_code=fastapi.status.HTTP_400_BAD_REQUEST,
            detail=errors.validation_problem(exc.errors),
        ) from exc
    except errors.StoreFailureError as exc:
        logger.exception("Unexpected failure while storing power plant")
        raise fastapi.HTTPException(
            status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

    response.headers["Location"] = str(request.url_for("get_power_plant", plant_id=plant.id))
    return plant


@router.get("/{plant_id}", response_model=plant_models.PowerPlant, name="get_power_plant")
def get_power_plant(
    plant_id: int,
    store=fastapi.Depends(dependencies.get_record_store),
) -> plant_models.PowerPlant:
    """Return a stored power plant by identifier."""

    try:
        return creation_service.get_power_plant(plant_id, store)
    except errors.PowerPlantNotFoundError as exc:
        raise fastapi.HTTPException(status_code=fastapi.status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except errors.RecordStoreError as exc:
        logger.exception("Unexpected failure while reading power plant", extra={"plant_id": plant_id})
        raise fastapi.HTTPException(
            status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read power plant.",
        ) from exc
