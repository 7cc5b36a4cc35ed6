"""
Centralized HTTP exceptions for consistent error handling.

Usage:
    from reservation_shared.utils.exceptions import NotFoundError, ConflictError

    raise NotFoundError("Customer", customer_id)
    raise ReferenceNotFoundError("restaurantId", restaurant_id)
    raise ConflictError("User already exists.")
"""

from typing import Any

from fastapi import HTTPException, status

from reservation_shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions inherit from this class so every failure is
    logged once, with context, at the point where it is raised.
    """

    def __init__(
        self,
        status_code: int,
        detail: Any,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        message = detail if isinstance(detail, str) else detail.get("message", "")
        log_fn(message, status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Reservation", 12)
    """

    def __init__(
        self,
        entity: str,
        entity_id: int | str | None = None,
        detail: str | None = None,
        **log_context: Any,
    ):
        if detail is None and entity_id is not None:
            detail = f"{entity} with ID {entity_id} not found"
        elif detail is None:
            detail = f"{entity} not found"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


class ReferenceNotFoundError(NotFoundError):
    """
    A foreign reference given on create does not resolve (404).

    The detail names the request field so the caller knows which
    reference was missing.
    """

    def __init__(self, field: str, entity: str, entity_id: int, **log_context: Any):
        self.field = field
        super().__init__(
            entity,
            entity_id,
            detail=f"{entity} with ID {entity_id} referenced by '{field}' not found",
            field=field,
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (400).

    Carries every violated constraint, not just the first:

        raise ValidationError(
            "Validation failed",
            errors=[{"field": "firstName", "rule": "string_too_long", "message": "..."}],
        )
    """

    def __init__(
        self,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
        **log_context: Any,
    ):
        self.errors = errors or []
        body: str | dict[str, Any] = detail
        if self.errors:
            body = {"message": detail, "errors": self.errors}

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=body,
            log_level="warning",
            fields=[e["field"] for e in self.errors] or None,
            **log_context,
        )


class MalformedPatchError(AppException):
    """
    Structurally invalid patch operation (400).

    Distinct from ValidationError: the document itself could not be applied
    (unknown path, missing value, wrong value type, failed test).
    """

    def __init__(self, detail: str, index: int | None = None, **log_context: Any):
        self.index = index
        if index is not None:
            detail = f"Operation {index}: {detail}"

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            log_level="warning",
            **log_context,
        )


# =============================================================================
# 401 Unauthorized Errors
# =============================================================================


class UnauthorizedError(AppException):
    """Missing, invalid or expired credentials (401)."""

    def __init__(self, detail: str = "Not authenticated", **log_context: Any):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            log_level="warning",
            headers={"WWW-Authenticate": "Bearer"},
            **log_context,
        )


# =============================================================================
# 409 Conflict Errors
# =============================================================================


class ConflictError(AppException):
    """
    Resource conflict error (409).

    Usage:
        raise ConflictError("User already exists.")
    """

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            log_level="warning",
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class InternalError(AppException):
    """
    Internal server error (500).

    Usage:
        raise InternalError("Failed to persist order", order_id=123)
    """

    def __init__(self, detail: str = "Internal server error", **log_context: Any):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            log_level="error",
            **log_context,
        )


class ConfigurationMissingError(InternalError):
    """JWT signing configuration is absent or unusable."""

    def __init__(self, **log_context: Any):
        super().__init__("JWT configuration is missing.", **log_context)


class DatabaseError(InternalError):
    """Database operation failed."""

    def __init__(self, operation: str, **log_context: Any):
        super().__init__("Internal server error", operation=operation, **log_context)
