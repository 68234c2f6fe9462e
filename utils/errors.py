import traceback

from beanie.exceptions import DocumentNotFound
from bson.errors import InvalidId
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils import constants
from utils.logging import logger


class AppError(Exception):
    """Operational error whose message is safe to show to API callers"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.is_operational = True

    @property
    def status(self) -> str:
        return "fail" if str(self.status_code).startswith("4") else "error"


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Validation error", errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str):
        super().__init__(f"Duplicate field value: {field}. Please use another value")
        self.field = field


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Something went wrong!"):
        super().__init__(message)
        self.is_operational = False


def _error_response(error: AppError, cause: Exception | None = None) -> JSONResponse:
    """Uniform error envelope; stack and raw error are only exposed in development"""
    cause = cause or error
    body = {"success": False, "status": error.status, "message": error.message}

    if constants.IS_DEVELOPMENT:
        if not error.is_operational:
            body["message"] = str(cause) or error.message
        body["error"] = {"name": type(cause).__name__, "statusCode": error.status_code, "status": error.status}
        body["stack"] = "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))
    elif not error.is_operational:
        body = {"success": False, "status": "error", "message": "Something went wrong!"}

    return JSONResponse(status_code=error.status_code, content=body)


def _field_errors(errors) -> list[dict]:
    fields = []
    for error in errors:
        location = [str(part) for part in error["loc"] if part not in ("query", "path", "body")]
        fields.append({"field": ".".join(location), "message": error["msg"]})
    return fields


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=exc.status_code, content={"success": False, "message": exc.message, "errors": exc.errors}
        )
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await app_error_handler(request, ValidationError(errors=_field_errors(exc.errors())))


async def document_not_found_handler(_: Request, exc: DocumentNotFound) -> JSONResponse:
    return _error_response(NotFoundError(str(exc) or "Resource not found"), exc)


async def invalid_id_handler(_: Request, exc: InvalidId) -> JSONResponse:
    return _error_response(AppError(f"Invalid _id: {exc}", status.HTTP_400_BAD_REQUEST), exc)


async def duplicate_key_handler(_: Request, exc: DuplicateKeyError) -> JSONResponse:
    key_value = (exc.details or {}).get("keyValue") or {"unknown": None}
    return _error_response(DuplicateError(next(iter(key_value))), exc)


async def document_validation_handler(_: Request, exc: PydanticValidationError) -> JSONResponse:
    messages = ". ".join(error["msg"] for error in exc.errors())
    return _error_response(AppError(f"Invalid input data. {messages}", status.HTTP_400_BAD_REQUEST), exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return _error_response(NotFoundError(f"Route {request.url.path} not found"), exc)
    return _error_response(AppError(str(exc.detail), exc.status_code), exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return _error_response(InternalError(), exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate every failure into the uniform error envelope"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DocumentNotFound, document_not_found_handler)
    app.add_exception_handler(InvalidId, invalid_id_handler)
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(PydanticValidationError, document_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
