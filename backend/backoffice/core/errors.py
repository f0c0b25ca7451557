"""Validation error types and the error-bag exception handlers."""

import logging
from collections import defaultdict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FieldValidationError(ValueError):
    """A domain validation failure attached to one form field."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def error_bag_response(errors: dict[str, list[str]]) -> JSONResponse:
    first = next(iter(errors.values()), ["The given data was invalid."])[0]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": first, "errors": errors},
    )


def _field_name(loc: tuple) -> str:
    # Drop the "body"/"query" prefix; model-level errors have no field.
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else []
    return ".".join(parts) or "__all__"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = defaultdict(list)
    for error in exc.errors():
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, FieldValidationError):
            errors[cause.field].append(cause.message)
            continue
        errors[_field_name(tuple(error["loc"]))].append(message)
    return error_bag_response(dict(errors))


async def field_validation_handler(request: Request, exc: FieldValidationError) -> JSONResponse:
    logger.info(f"[VALIDATION] {request.method} {request.url.path}: {exc.field}: {exc.message}")
    return error_bag_response({exc.field: [exc.message]})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(FieldValidationError, field_validation_handler)
