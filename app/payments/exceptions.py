"""
Payment-specific exceptions for checkout and webhook operations.

Exception Hierarchy:
    PaymentError (base for payment domain)
    ├── PaymentValidationError - Request cannot be served (HTTP 400)
    │   └── PlanNotConfiguredError - Requested plan has no price id
    ├── WebhookVerificationError - Webhook signature/payload rejected (HTTP 400)
    └── PaymentProviderError - Base for all Stripe call failures (HTTP 500)
        ├── ProviderCardDeclinedError - Card declined
        ├── ProviderInvalidRequestError - Invalid params / missing resource
        ├── ProviderAuthenticationError - Bad API key
        ├── ProviderRateLimitError - Rate limited
        └── ProviderUnavailableError - Network or Stripe server error

Every PaymentProviderError keeps the provider's own message; that message is
what the client receives in the 500 response body.

Usage:
    from payments.exceptions import PaymentProviderError, PlanNotConfiguredError

    try:
        result = await orchestrator.create(checkout_request)
    except PlanNotConfiguredError as e:
        return JsonResponse({"error": e.message}, status=400)
    except PaymentProviderError as e:
        return JsonResponse({"error": e.message}, status=500)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.exceptions import BaseApplicationError, ExternalServiceError, ValidationError

if TYPE_CHECKING:
    from typing import Any


# =============================================================================
# Payment Domain Exceptions
# =============================================================================


class PaymentError(BaseApplicationError):
    """
    Base exception for all payment operations.

    All payment-specific exceptions inherit from this class.
    """

    default_error_code: str = "PAYMENT_ERROR"


class PaymentValidationError(PaymentError, ValidationError):
    """
    Raised when a checkout request cannot be served as asked.

    Reported to the caller as HTTP 400 with the plain message.
    """

    default_error_code: str = "PAYMENT_VALIDATION_ERROR"


class PlanNotConfiguredError(PaymentValidationError):
    """
    Raised when the requested plan has no configured price id.

    Raised even when the other plan is configured: the annual plan strictly
    requires ANNUAL_PRICE_ID and every other plan value requires
    MONTHLY_PRICE_ID.

    Example:
        price_id = prices.price_for(plan)
        if not price_id:
            raise PlanNotConfiguredError(details={"plan": plan.value})
    """

    default_error_code: str = "PLAN_NOT_CONFIGURED"
    default_message: str = "Requested plan not configured on server"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message or self.default_message,
            error_code=error_code,
            details=details,
        )


class WebhookVerificationError(PaymentError):
    """
    Raised when a webhook payload cannot be authenticated or parsed.

    Covers signature mismatch, malformed Stripe-Signature header, expired
    timestamp, invalid JSON, and a missing signing secret when unverified
    webhooks are not allowed. The event is dropped; Stripe's own redelivery
    governs retries.
    """

    default_error_code: str = "WEBHOOK_VERIFICATION_FAILED"


# =============================================================================
# Provider (Stripe) Exceptions
# =============================================================================


class PaymentProviderError(PaymentError, ExternalServiceError):
    """
    Base exception for all Stripe call failures.

    Attributes:
        stripe_code: Stripe's error code, when the SDK provided one

    Reported to the caller as HTTP 500 carrying the provider's message.
    No retry is attempted and no partial state is rolled back.
    """

    default_error_code: str = "PAYMENT_PROVIDER_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        stripe_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if stripe_code:
            details["stripe_code"] = stripe_code
        super().__init__(message, error_code=error_code, details=details)
        self.stripe_code = stripe_code


class ProviderCardDeclinedError(PaymentProviderError):
    """Card was declined by the issuing bank."""

    default_error_code: str = "CARD_DECLINED"


class ProviderInvalidRequestError(PaymentProviderError):
    """
    Invalid request parameters sent to Stripe, or a missing resource.

    A stripe_code of "resource_missing" means the referenced object
    (customer, price) does not exist.
    """

    default_error_code: str = "INVALID_PROVIDER_REQUEST"

    @property
    def is_resource_missing(self) -> bool:
        return self.stripe_code == "resource_missing"


class ProviderAuthenticationError(PaymentProviderError):
    """Stripe rejected the API key. Operational issue, check configuration."""

    default_error_code: str = "PROVIDER_AUTHENTICATION_FAILED"


class ProviderRateLimitError(PaymentProviderError):
    """Rate limited by the Stripe API."""

    default_error_code: str = "PROVIDER_RATE_LIMITED"


class ProviderUnavailableError(PaymentProviderError):
    """
    Stripe could not be reached or answered with a server error.

    Also used to wrap unexpected exceptions raised during a provider call.
    """

    default_error_code: str = "PROVIDER_UNAVAILABLE"


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Payment domain
    "PaymentError",
    "PaymentValidationError",
    "PlanNotConfiguredError",
    "WebhookVerificationError",
    # Provider-specific
    "PaymentProviderError",
    "ProviderCardDeclinedError",
    "ProviderInvalidRequestError",
    "ProviderAuthenticationError",
    "ProviderRateLimitError",
    "ProviderUnavailableError",
]
