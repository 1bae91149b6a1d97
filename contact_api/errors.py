"""
Таксономія помилок API та обробники, що перетворюють їх на конверт ``{"errors": ...}``.

Сервіси піднімають підкласи :class:`ResponseError`; усе нерозпізнане стає 500
із загальним повідомленням.
"""
import logging
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_api.schemas import FieldError

logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


class ResponseError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def content(self):
        return self.message


class ValidationError(ResponseError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[FieldError]):
        super().__init__("; ".join(f"{error.field}: {error.message}" for error in errors))
        self.errors = errors

    def content(self):
        return [error.model_dump() for error in self.errors]


class Unauthorized(ResponseError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFound(ResponseError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ResponseError):
    status_code = status.HTTP_409_CONFLICT


def field_errors(errors, strip_location: bool = False) -> List[FieldError]:
    """Перетворює помилки pydantic на список ``FieldError``, зберігаючи всі, а не лише першу."""
    result = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if strip_location and loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        result.append(FieldError(field=field, message=error.get("msg", "Invalid value")))
    return result


async def response_error_handler(request: Request, exc: ResponseError):
    if exc.status_code == status.HTTP_400_BAD_REQUEST:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"errors": exc.content()})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = field_errors(exc.errors(), strip_location=True)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [error.model_dump() for error in errors]},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"errors": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ResponseError, response_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
