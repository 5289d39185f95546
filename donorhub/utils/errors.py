from fastapi import HTTPException, status


class ApiError(HTTPException):
    """HTTPException carrying a machine readable error code."""

    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "INTERNAL_ERROR"

    def __init__(self, detail: str, error_code: str | None = None, status_code: int | None = None):
        super().__init__(status_code=status_code or self.default_status, detail=detail)
        self.error_code = error_code or self.default_code


class BadRequestError(ApiError):
    default_status = status.HTTP_400_BAD_REQUEST
    default_code = "VALIDATION_ERROR"


class ForbiddenError(ApiError):
    default_status = status.HTTP_403_FORBIDDEN
    default_code = "FORBIDDEN"


class NotFoundError(ApiError):
    default_status = status.HTTP_404_NOT_FOUND
    default_code = "NOT_FOUND"


class ConflictError(ApiError):
    default_status = status.HTTP_400_BAD_REQUEST
    default_code = "CONFLICT"
