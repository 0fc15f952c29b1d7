# -*- coding: utf-8 -*-

import dataclasses
import datetime
import typing

import pydantic
import pydantic.alias_generators

MIN_POWER = 0.0
MAX_POWER = 200.0


class _CamelModel(pydantic.BaseModel):
    """Base model exchanging camelCase field names on the wire."""

    # Accept both camelCase aliases and field names.
    model_config = pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        populate_by_name=True,
    )


class PowerPlantPayload(_CamelModel):
    """
    Incoming creation request.

    Every field is optional so that missing values reach the validator instead of being
    rejected by the framework. Types are not coerced: booleans or numeric strings for
    ``power`` and numbers for the timestamps are rejected.
    """

    id: typing.Optional[int] = None  # Ignored, the store assigns identifiers.
    owner: typing.Optional[str] = None
    power: typing.Optional[float] = pydantic.Field(default=None, strict=True)
    valid_from: typing.Optional[datetime.datetime] = None
    valid_to: typing.Optional[datetime.datetime] = None

    @pydantic.field_validator("valid_from", "valid_to", mode="before")
    @classmethod
    def reject_numeric_timestamps(cls, value):
        """Only accept timestamps written as ISO 8601 strings, never epoch numbers."""

        if value is None or isinstance(value, (str, datetime.datetime)):
            return value
        raise ValueError("Input should be an ISO 8601 datetime string")


class PowerPlant(_CamelModel):
    """A power plant record as persisted by the record store."""

    id: int = 0
    owner: str
    power: float = pydantic.Field(..., ge=MIN_POWER, le=MAX_POWER)  # Generation capacity
    valid_from: datetime.datetime
    valid_to: typing.Optional[datetime.datetime] = None


@dataclasses.dataclass(frozen=True)
class FieldFailure:
    """A business rule violation on a single payload field."""

    field: str
    message: str
