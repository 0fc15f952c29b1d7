# -*- coding: utf-8 -*-

import typing

import plant_registry.models.power_plant as plant_models


class RecordStore(typing.Protocol):
    """Persistence collaborator for power plant records."""

    def insert(self, plant: plant_models.PowerPlant, /) -> plant_models.PowerPlant:
        """
        Persist a power plant under a newly assigned identifier.

        Implementations raise ``errors.RecordStoreError`` when the record cannot be stored;
        nothing is persisted in that case.
        """

    def find_by_id(self, plant_id: int, /) -> typing.Optional[plant_models.PowerPlant]:
        """Return the stored power plant with the given identifier, or None."""
