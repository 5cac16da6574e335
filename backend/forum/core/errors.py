# forum/core/errors.py
"""
Error taxonomy for the forum API.

Every error is an HTTPException so FastAPI renders it directly. The detail body
is always {"code": ..., "message": ...} with an optional "fields" mapping for
field-level validation problems.
"""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from tortoise.exceptions import BaseORMException

logger = logging.getLogger("uvicorn.error")


class ForumError(HTTPException):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    message = "Internal error"
    headers: dict[str, str] | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        fields: dict[str, str] | None = None,
    ):
        detail = {"code": code or self.code, "message": message or self.message}
        if fields:
            detail["fields"] = fields
        super().__init__(status_code=self.http_status, detail=detail, headers=type(self).headers)


class ValidationError(ForumError):
    http_status = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Invalid input"


class DuplicateUser(ForumError):
    http_status = status.HTTP_400_BAD_REQUEST
    code = "DUPLICATE_USER"
    message = "Username or email already exists"


class Unauthenticated(ForumError):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_REQUIRED"
    message = "Authentication required"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentials(Unauthenticated):
    # Same body for unknown username and wrong password
    code = "AUTH_INVALID_CREDENTIALS"
    message = "Incorrect username or password"


class Forbidden(ForumError):
    http_status = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    message = "Not allowed"


class NotFound(ForumError):
    http_status = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Not found"


class StorageError(ForumError):
    code = "STORAGE_ERROR"
    message = "Internal server error"


async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        fields[".".join(loc) or "body"] = err.get("msg", "invalid")
    error = ValidationError(fields=fields)
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


async def storage_error_handler(request: Request, exc: BaseORMException):
    logger.exception("[db] %s %s failed", request.method, request.url.path, exc_info=exc)
    error = StorageError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BaseORMException, storage_error_handler)
