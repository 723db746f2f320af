"""Domain errors raised by the API layer and the handlers that render them."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base error rendered as {code, message, details}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body: dict = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidRequestError(APIError):
    """The request was malformed: bad id, bad field or a failed cross-reference."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class NotFoundError(APIError):
    """The addressed entity (or its parent) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


def _field_name(loc: tuple) -> str:
    # Drop the "body"/"query"/"path" prefix pydantic puts in front
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts) or "body"


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render a domain error."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render FastAPI's request validation failures as VALIDATION_ERROR."""
    details: dict[str, str] = {}
    for error in exc.errors():
        details.setdefault(_field_name(tuple(error.get("loc", ()))), error.get("msg", "Invalid value"))
    error = InvalidRequestError("Invalid request", details=details)
    logger.debug(f"{request.method} {request.url.path} rejected: {details}")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())
