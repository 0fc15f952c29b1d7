# -*- coding: utf-8 -*-

"""Business rules a power plant must satisfy before it is accepted."""

import datetime

import plant_registry.models.power_plant as plant_models

MIN_POWER = plant_models.MIN_POWER
MAX_POWER = plant_models.MAX_POWER
OWNER_WORD_COUNT = 2
DEFAULT_TIMESTAMP = datetime.datetime.min  # Unset timestamp sent by some clients (0001-01-01T00:00:00).

POWER_FIELD = "power"
OWNER_FIELD = "owner"
VALID_FROM_FIELD = "validFrom"

POWER_REQUIRED = "the Power field is required"
POWER_OUT_OF_RANGE = f"Power must be between {MIN_POWER:g} and {MAX_POWER:g}"
OWNER_REQUIRED = "Owner is required"
OWNER_FORMAT = "Owner must be two words, letters only"
VALID_FROM_REQUIRED = "the ValidFrom field is required"


def validate_power_plant(payload, /):
    """
    Evaluate every business rule against a candidate power plant.

    All rules are checked, so a payload breaking several of them gets a failure for each
    offending field. At most one failure is reported per field.

    :param plant_models.PowerPlantPayload payload: The candidate power plant.

    :return: The field failures, empty when the payload is acceptable.
    :retype: list
    """

    failures = []
    failures.extend(_check_power(payload.power))
    failures.extend(_check_owner(payload.owner))
    failures.extend(_check_valid_from(payload.valid_from))
    return failures


def _check_power(power, /):
    """
    Check the generation capacity.

    :param float power: The submitted power, None when missing.

    :return: The power failures.
    :retype: typing.Iterator
    """

    if power is None:
        yield plant_models.FieldFailure(POWER_FIELD, POWER_REQUIRED)
    elif not MIN_POWER <= power <= MAX_POWER:
        # NaN fails this check too.
        yield plant_models.FieldFailure(POWER_FIELD, POWER_OUT_OF_RANGE)


def _check_owner(owner, /):
    """
    Check the owner name.

    :param str owner: The submitted owner, None when missing.

    :return: The owner failures.
    :retype: typing.Iterator
    """

    if owner is None or not owner.strip():
        yield plant_models.FieldFailure(OWNER_FIELD, OWNER_REQUIRED)
    elif not is_valid_owner(owner):
        yield plant_models.FieldFailure(OWNER_FIELD, OWNER_FORMAT)


def _check_valid_from(valid_from, /):
    if valid_from is None or _is_default_timestamp(valid_from):
        yield plant_models.FieldFailure(VALID_FROM_FIELD, VALID_FROM_REQUIRED)


def is_valid_owner(owner, /):
    """
    Tell whether an owner is exactly two single-space separated words made of letters.

    Letters are whatever ``str.isalpha`` accepts, so accented names pass while hyphens,
    digits and punctuation do not.

    :param str owner: The owner name.

    :return: True if the owner is well formed.
    :retype: bool
    """

    words = owner.strip().split(" ")
    return len(words) == OWNER_WORD_COUNT and all(word.isalpha() for word in words)


def _is_default_timestamp(value, /):
    return value.replace(tzinfo=None) == DEFAULT_TIMESTAMP
