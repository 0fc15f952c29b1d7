# -*- coding: utf-8 -*-

class PowerPlantError(Exception):
    """Base error for the powerplants domain."""


class MissingPayloadError(PowerPlantError):
    """Raised when a creation request carries no power plant data."""


class PowerPlantValidationError(PowerPlantError):
    """Raised when one or more field rules reject a candidate power plant."""

    def __init__(self, failures, /):
        self.failures = tuple(failures)
        super().__init__("; ".join(f"{failure.field}: {failure.message}" for failure in self.failures))

    @property
    def errors(self):
        """Failures grouped as a field -> messages mapping."""

        errors = {}
        for failure in self.failures:
            errors.setdefault(failure.field, []).append(failure.message)
        return errors


class PowerPlantNotFoundError(PowerPlantError):
    """Raised when no stored power plant matches the requested identifier."""


class StoreFailureError(PowerPlantError):
    """Raised when the record store cannot persist a validated power plant."""


class RecordStoreError(Exception):
    """Raised by record store implementations when an operation fails."""


VALIDATION_TITLE = "One or more validation errors occurred."


def validation_problem(errors, /):
    """Build the error detail listing every failing field with its messages."""
    return {"title": VALIDATION_TITLE, "errors": errors}
