from __future__ import annotations


class AppError(Exception):
    """Base application error.

    Subclasses pin the HTTP status and machine-readable code the API
    renders them with.
    """

    status_code = 400
    code = "bad_request"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    status_code = 404
    code = "not_found"


class ForbiddenError(AppError):
    status_code = 403
    code = "forbidden"


class ConflictError(AppError):
    status_code = 409
    code = "conflict"


class ValidationError(AppError):
    status_code = 422
    code = "validation_error"
