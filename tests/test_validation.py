"""Tests for the power plant business rules."""

import datetime
import math

import pydantic
import pytest

import plant_registry.models.power_plant as plant_models
import plant_registry.services.validation as validation


def _fields(failures):
    return [failure.field for failure in failures]


def test_valid_payload_has_no_failures(valid_payload):
    assert validation.validate_power_plant(valid_payload) == []


@pytest.mark.parametrize("power", [0.0, 0.01, 100, 199.99, 200.0])
def test_power_within_bounds_is_accepted(valid_payload, power):
    payload = valid_payload.model_copy(update={"power": power})

    assert validation.validate_power_plant(payload) == []


@pytest.mark.parametrize("power", [-0.01, -50, 200.01, 1e6, math.inf, math.nan])
def test_power_out_of_bounds_is_rejected(valid_payload, power):
    payload = valid_payload.model_copy(update={"power": power})

    failures = validation.validate_power_plant(payload)

    assert failures == [plant_models.FieldFailure("power", "Power must be between 0 and 200")]


def test_missing_power_is_required(valid_payload):
    payload = valid_payload.model_copy(update={"power": None})

    assert validation.validate_power_plant(payload) == [
        plant_models.FieldFailure("power", "the Power field is required"),
    ]


@pytest.mark.parametrize(
    "owner",
    ["John", "John-Doe", "John Doe123", "John Ronald Doe", "John  Doe", "John\tDoe", "J0hn Doe", "John D."],
)
def test_malformed_owner_is_rejected(valid_payload, owner):
    payload = valid_payload.model_copy(update={"owner": owner})

    assert validation.validate_power_plant(payload) == [
        plant_models.FieldFailure("owner", "Owner must be two words, letters only"),
    ]


@pytest.mark.parametrize("owner", ["John Doe", "  John Doe  ", "Jürgen Müller", "Élodie Brontë", "jane doe"])
def test_well_formed_owner_is_accepted(valid_payload, owner):
    payload = valid_payload.model_copy(update={"owner": owner})

    assert validation.validate_power_plant(payload) == []


@pytest.mark.parametrize("owner", [None, "", "   ", "\t\n"])
def test_blank_owner_reports_only_required(valid_payload, owner):
    payload = valid_payload.model_copy(update={"owner": owner})

    failures = validation.validate_power_plant(payload)

    assert failures == [plant_models.FieldFailure("owner", "Owner is required")]


@pytest.mark.parametrize(
    "valid_from",
    [None, datetime.datetime.min, datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)],
)
def test_missing_valid_from_is_required(valid_payload, valid_from):
    payload = valid_payload.model_copy(update={"valid_from": valid_from})

    assert validation.validate_power_plant(payload) == [
        plant_models.FieldFailure("validFrom", "the ValidFrom field is required"),
    ]


def test_valid_to_is_not_checked(valid_payload):
    payload = valid_payload.model_copy(update={"valid_to": datetime.datetime.min})

    assert validation.validate_power_plant(payload) == []


def test_failures_accumulate_across_fields():
    payload = plant_models.PowerPlantPayload(owner=None, power=None, valid_from=None)

    failures = validation.validate_power_plant(payload)

    assert sorted(_fields(failures)) == ["owner", "power", "validFrom"]


def test_at_most_one_failure_per_field():
    payload = plant_models.PowerPlantPayload(owner="x", power=-1.0, valid_from=datetime.datetime.min)

    fields = _fields(validation.validate_power_plant(payload))

    assert len(fields) == len(set(fields)) == 3


def test_power_bounds_match_the_stored_model(yesterday):
    assert (validation.MIN_POWER, validation.MAX_POWER) == (plant_models.MIN_POWER, plant_models.MAX_POWER)

    with pytest.raises(pydantic.ValidationError):
        plant_models.PowerPlant(owner="John Doe", power=plant_models.MAX_POWER + 0.01, valid_from=yesterday)


@pytest.mark.parametrize("power", [True, "50"])
def test_payload_rejects_coerced_power(power):
    with pytest.raises(pydantic.ValidationError):
        plant_models.PowerPlantPayload(owner="John Doe", power=power)


def test_payload_rejects_epoch_valid_from():
    with pytest.raises(pydantic.ValidationError):
        plant_models.PowerPlantPayload(owner="John Doe", power=50.0, validFrom=0)
