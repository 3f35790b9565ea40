"""
Base exception classes for application-wide error handling.

This module provides a small exception hierarchy that enables:
- Consistent error messages across the application
- Machine-readable error codes for logging and correlation
- Detailed error information for debugging

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ValidationError - Input or configuration validation failures
    └── ExternalServiceError - Third-party service failures

Usage:
    from core.exceptions import ValidationError

    # Raise with message only
    raise ValidationError("Invalid currency")

    # Raise with error code and details
    raise ValidationError(
        "Validation failed",
        error_code="VALIDATION_ERROR",
        details={"amount": ["Must be positive"]}
    )

    # Convert to dict for logging
    try:
        ...
    except BaseApplicationError as e:
        logger.warning("Request failed", extra=e.to_dict())

Note:
    These exceptions are for domain/business logic errors.
    HTTP concerns (status codes, response bodies) live in the views.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for logs and clients
        details: Additional error context (field errors, provider codes, etc.)

    Example:
        try:
            await orchestrator.create(request)
        except BaseApplicationError as e:
            logger.warning(f"Checkout failed: {e.error_code}")
            return JsonResponse({"error": e.message}, status=400)
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to a dictionary.

        Returns:
            Dict with error, error_code, and details keys

        Example:
            {
                "error": "Requested plan not configured on server",
                "error_code": "PLAN_NOT_CONFIGURED",
                "details": {"plan": "annual"}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input or configuration validation fails.

    Use for:
    - Invalid field values that passed serializer validation
    - Requests that the current configuration cannot serve
    - Business rule violations

    Note:
        For request body validation, use DRF serializers.
        Use this for service-layer validation logic.
    """

    default_error_code: str = "VALIDATION_ERROR"


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Use for:
    - Third-party API failures (Stripe)
    - Network errors
    - External service unavailability

    Note:
        Log the original error for debugging. The provider's own message
        is what the caller sees.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
