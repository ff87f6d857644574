# app/exceptions.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.utils.logging import get_logger

logger = get_logger(__name__)


class APIException(Exception):
    """Bazowy wyjatek domenowy, mapowany na odpowiedz {"message": ...}."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class UnauthorizedException(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token required"


class BadRequestException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class NotFoundException(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class ConflictException(APIException):
    status_code = status.HTTP_409_CONFLICT
    message = "Resource already exists"


class UsernameAlreadyExistsException(ConflictException):
    """Duplikat nazwy uzytkownika. Klienci oczekuja 400, nie 409."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidUserCredentialsException(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid username/password"


class InternalException(APIException):
    pass


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    return JSONResponse(content={"message": exc.message}, status_code=exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        content={"message": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # pierwszy blad walidacji wystarczy klientowi
    errors = exc.errors()
    if errors:
        loc = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{loc}: {errors[0].get('msg')}" if loc else errors[0].get("msg")
    else:
        message = "Bad request"
    return JSONResponse(content={"message": message}, status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(
        content={"message": InternalException.message},
        status_code=InternalException.status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
