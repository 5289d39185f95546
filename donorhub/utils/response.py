import logging

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def create_response(
    message: str,
    data=None,
    status_code: int = status.HTTP_200_OK,
    status_text: str | None = None,
    error_code: str | None = None,
) -> JSONResponse:
    """Return a consistent API response payload and status code."""
    payload_status = status_text or ("success" if status_code < 400 else "error")
    content = {
        "message": message,
        "data": jsonable_encoder(data),
        "status": payload_status,
        "status_code": status_code,
    }
    if error_code:
        content["error_code"] = error_code
    return JSONResponse(status_code=status_code, content=content)


def handle_exception(error: Exception, fallback_message: str = "Internal server error") -> JSONResponse:
    """Coerce raised errors into the shared response structure.

    Store and unexpected failures are logged here and answered with a fixed
    message; the exception text never reaches the client.
    """
    if isinstance(error, StarletteHTTPException):
        detail = error.detail if isinstance(error.detail, str) else str(error.detail)
        error_code = getattr(error, "error_code", None) or _STATUS_CODES.get(error.status_code, "HTTP_ERROR")
        return create_response(detail, None, error.status_code, status_text="error", error_code=error_code)

    if isinstance(error, SQLAlchemyError):
        logger.exception("Database error while handling request")
        return create_response(
            "Database error",
            None,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            status_text="error",
            error_code="STORE_ERROR",
        )

    logger.exception("Unhandled error while handling request")
    return create_response(
        fallback_message,
        None,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        status_text="error",
        error_code="INTERNAL_ERROR",
    )


def validation_error_response(errors: list) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")),
            "message": error.get("msg"),
        }
        for error in errors
    ]
    first = details[0] if details else None
    message = f"{first['field']}: {first['message']}" if first and first["field"] else "Invalid request"
    return create_response(
        message,
        {"errors": details},
        status.HTTP_400_BAD_REQUEST,
        status_text="error",
        error_code="VALIDATION_ERROR",
    )
