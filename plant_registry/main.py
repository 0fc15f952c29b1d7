# -*- coding: utf-8 -*-

import fastapi
import fastapi.exceptions
import fastapi.responses
import uvicorn

import plant_registry.api as api
import plant_registry.core.config as config
import plant_registry.core.errors as registry_errors
import plant_registry.core.logging as logging
import plant_registry.store as store


def create_application(*, record_store=None) -> fastapi.FastAPI:
    """Instantiate and configure the FastAPI app, backed by the configured store unless one is given."""

    settings = config.get_settings()
    logging.configure_logging(level=settings.log_level)

    app = fastapi.FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.record_store = record_store if record_store is not None else store.build_record_store(settings)
    app.add_exception_handler(fastapi.exceptions.RequestValidationError, _request_validation_handler)
    app.include_router(api.router)
    return app


async def _request_validation_handler(request, exc):
    """Report unparsable request bodies with the same shape as business rule failures."""

    errors = {}
    for error in exc.errors():
        errors.setdefault(_error_field(error), []).append(error["msg"])
    return fastapi.responses.JSONResponse(
        status_code=fastapi.status.HTTP_400_BAD_REQUEST,
        content={"detail": registry_errors.validation_problem(errors)},
    )


def _error_field(error):
    location = [str(part) for part in error.get("loc", ())[1:]]
    if error.get("type") == "json_invalid" or not location:
        return "body"
    return ".".join(location)


app = create_application()


if __name__ == "__main__":

    settings = config.get_settings()
    uvicorn.run(
        "plant_registry.main:app",
        port=settings.app_port,
        reload=True,
    )
