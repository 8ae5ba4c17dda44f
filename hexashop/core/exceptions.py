"""HexaShop — Application-layer errors, rendered by the handlers in hexashop.core.responses."""
from fastapi import status


class AppError(Exception):
    """Base error raised by use cases. Carries the HTTP status and an error code."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "BAD_REQUEST"

    def __init__(self, message: str, field_errors: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or []


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"
