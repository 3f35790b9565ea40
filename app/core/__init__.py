"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code shared by the domain apps:

- Generic, reusable base classes (no payment-specific logic)
- Cross-cutting view decorators
- Operational endpoints

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ValidationError: Input/configuration validation failures
    - ExternalServiceError: Third-party service failures

Decorators (import from core.decorators):
    - log_request: Request/response logging for sync and async views

Views (import from core.views):
    - health_check: Liveness/readiness endpoint

Usage:
    from core.exceptions import ValidationError
    from core.decorators import log_request

Note:
    Business logic should NOT go here. Extend core classes in your domain apps.
"""

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    ExternalServiceError,
    ValidationError,
)

# Decorators (no Django model dependencies)
from .decorators import log_request

__all__ = [
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "ExternalServiceError",
    # Decorators
    "log_request",
]
