"""
Stripe API adapter for checkout operations.

This module provides the StripeGateway class which encapsulates all
Stripe API interactions. Every Stripe call goes through this adapter so
that error translation, logging and timing are consistent.

Features:
- Async provider calls (StripeClient *_async methods over HTTPX)
- Automatic error translation to domain exceptions
- Structured logging with timing metrics
- Webhook signature verification

The gateway wraps a single StripeClient built once at startup
(PaymentsConfig.ready) and injected into the views. It holds no mutable
state and is safe to share between concurrent requests.

Configuration (via settings):
- PAYMENT_PROVIDER_SECRET_KEY: Stripe API secret key
- PAYMENT_PROVIDER_API_VERSION: Pinned Stripe API version (default: 2022-11-15)

Usage:
    from payments.adapters import StripeGateway, CreatePaymentIntentParams

    gateway = StripeGateway.from_settings()

    result = await gateway.create_payment_intent(
        CreatePaymentIntentParams(amount_cents=1990, currency="brl")
    )
    result.client_secret
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import stripe
from django.conf import settings

from payments.exceptions import (
    PaymentProviderError,
    ProviderAuthenticationError,
    ProviderCardDeclinedError,
    ProviderInvalidRequestError,
    ProviderRateLimitError,
    ProviderUnavailableError,
    WebhookVerificationError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


# =============================================================================
# Data Types
# =============================================================================


@dataclass
class CreateCustomerParams:
    """
    Parameters for creating a Stripe Customer.

    Attributes:
        email: Customer email (optional)
        metadata: Key-value pairs to attach to the Customer
    """

    email: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class CreateSubscriptionParams:
    """
    Parameters for creating a Stripe Subscription awaiting first payment.

    Attributes:
        customer_id: Stripe Customer ID (cus_xxx)
        price_id: Stripe Price ID (price_xxx)
        metadata: Key-value pairs to attach to the Subscription
    """

    customer_id: str
    price_id: str
    metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if not self.customer_id:
            raise ValueError("customer_id is required")
        if not self.price_id:
            raise ValueError("price_id is required")


@dataclass
class CreatePaymentIntentParams:
    """
    Parameters for creating a one-off Stripe PaymentIntent.

    Attributes:
        amount_cents: Payment amount in smallest currency unit (e.g., centavos)
        currency: ISO 4217 currency code
        automatic_payment_methods: Let Stripe pick eligible payment methods
    """

    amount_cents: int
    currency: str
    automatic_payment_methods: bool = True

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if self.amount_cents <= 0:
            raise ValueError("amount_cents must be positive")
        if not self.currency:
            raise ValueError("currency is required")


@dataclass
class CustomerResult:
    """
    Result from Stripe Customer operations.

    Attributes:
        id: Customer ID (cus_xxx)
        email: Customer email, if any
    """

    id: str
    email: str | None = None


@dataclass
class SubscriptionResult:
    """
    Result from Stripe Subscription creation.

    Attributes:
        id: Subscription ID (sub_xxx)
        status: Lifecycle status at creation time (normally "incomplete")
        customer_id: Customer the subscription belongs to
        client_secret: Secret of the first invoice's PaymentIntent, or None
            when the invoice or its PaymentIntent is not available
    """

    id: str
    status: str | None
    customer_id: str
    client_secret: str | None = None


@dataclass
class PaymentIntentResult:
    """
    Result from Stripe PaymentIntent creation.

    Attributes:
        id: PaymentIntent ID (pi_xxx)
        status: Current status (requires_payment_method, etc.)
        amount_cents: Amount in smallest currency unit
        currency: Currency code
        client_secret: Secret for client-side confirmation
    """

    id: str
    status: str | None
    amount_cents: int
    currency: str
    client_secret: str | None = None


def expanded_field(obj: Any, name: str) -> Any:
    """
    Read a field from a Stripe object, tolerating gaps.

    Returns None when the object is missing, when it is an unexpanded id
    string, or when the field is absent.
    """
    if obj is None or isinstance(obj, str):
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def provider_message(error: Exception) -> str:
    """Return the provider's own message for an SDK error."""
    return getattr(error, "user_message", None) or str(error)


# =============================================================================
# Stripe Gateway
# =============================================================================


class StripeGateway:
    """
    Adapter for Stripe API operations used by checkout and webhooks.

    Features:
    - Async provider calls; no call blocks the event loop
    - Automatic error translation to domain exceptions
    - Structured logging with timing metrics

    Dependency Injection:
        The StripeClient is passed in, so tests can hand over a mock client.

    Usage:
        gateway = StripeGateway(stripe.StripeClient("sk_test_..."))
        customer = await gateway.retrieve_customer("cus_xxx")
    """

    def __init__(self, client: stripe.StripeClient):
        self.client = client

    @classmethod
    def from_settings(cls) -> StripeGateway:
        """Build the gateway from Django settings."""
        client = stripe.StripeClient(
            api_key=settings.PAYMENT_PROVIDER_SECRET_KEY,
            stripe_version=settings.PAYMENT_PROVIDER_API_VERSION,
            http_client=stripe.HTTPXClient(),
        )
        return cls(client)

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this adapter."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    async def _call(
        self,
        log_context: dict[str, Any],
        request: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        Run one Stripe request with logging, timing and error translation.

        Raises:
            PaymentProviderError: Translated SDK failure
        """
        logger = self.get_logger()
        start_time = time.time()
        logger.info("Starting Stripe operation", extra=log_context)

        try:
            response = await request()
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            raise self._translate_error(e, log_context, duration_ms) from e

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "Stripe operation completed",
            extra={
                **log_context,
                "object_id": expanded_field(response, "id"),
                "duration_ms": duration_ms,
            },
        )
        return response

    # =========================================================================
    # Customers
    # =========================================================================

    async def retrieve_customer(self, customer_id: str) -> CustomerResult | None:
        """
        Retrieve a Customer by ID.

        Args:
            customer_id: Stripe Customer ID (cus_xxx)

        Returns:
            CustomerResult, or None when the customer does not exist or
            has been deleted

        Raises:
            PaymentProviderError: Any other retrieval failure
        """
        log_context = {
            "operation": "retrieve_customer",
            "customer_id": customer_id,
        }

        try:
            customer = await self._call(
                log_context,
                lambda: self.client.v1.customers.retrieve_async(customer_id),
            )
        except ProviderInvalidRequestError as e:
            if e.is_resource_missing:
                return None
            raise

        if expanded_field(customer, "deleted"):
            self.get_logger().info("Stripe customer is deleted", extra=log_context)
            return None

        return CustomerResult(
            id=customer.id,
            email=expanded_field(customer, "email"),
        )

    async def create_customer(self, params: CreateCustomerParams) -> CustomerResult:
        """
        Create a Customer.

        Args:
            params: Email and metadata for the new customer

        Returns:
            CustomerResult with the new customer ID

        Raises:
            PaymentProviderError: Creation failed
        """
        log_context = {
            "operation": "create_customer",
            "has_email": params.email is not None,
        }

        request_params: dict[str, Any] = {}
        if params.email:
            request_params["email"] = params.email
        if params.metadata:
            request_params["metadata"] = params.metadata

        customer = await self._call(
            log_context,
            lambda: self.client.v1.customers.create_async(params=request_params),
        )

        return CustomerResult(
            id=customer.id,
            email=expanded_field(customer, "email"),
        )

    # =========================================================================
    # Subscriptions
    # =========================================================================

    async def create_subscription(
        self, params: CreateSubscriptionParams
    ) -> SubscriptionResult:
        """
        Create a Subscription in incomplete state for first-invoice payment.

        The latest invoice's PaymentIntent is expanded so its client secret
        is available without a second request.

        Args:
            params: Customer, price and metadata

        Returns:
            SubscriptionResult including the first PaymentIntent's secret

        Raises:
            PaymentProviderError: Creation failed
        """
        log_context = {
            "operation": "create_subscription",
            "customer_id": params.customer_id,
            "price_id": params.price_id,
        }

        request_params: dict[str, Any] = {
            "customer": params.customer_id,
            "items": [{"price": params.price_id}],
            "payment_behavior": "default_incomplete",
            "expand": ["latest_invoice.payment_intent"],
            "metadata": params.metadata or {},
        }

        subscription = await self._call(
            log_context,
            lambda: self.client.v1.subscriptions.create_async(params=request_params),
        )

        invoice = expanded_field(subscription, "latest_invoice")
        payment_intent = expanded_field(invoice, "payment_intent")

        return SubscriptionResult(
            id=subscription.id,
            status=expanded_field(subscription, "status"),
            customer_id=params.customer_id,
            client_secret=expanded_field(payment_intent, "client_secret"),
        )

    # =========================================================================
    # Payment Intents
    # =========================================================================

    async def create_payment_intent(
        self, params: CreatePaymentIntentParams
    ) -> PaymentIntentResult:
        """
        Create a one-off PaymentIntent.

        Args:
            params: Amount and currency

        Returns:
            PaymentIntentResult with the client secret

        Raises:
            PaymentProviderError: Creation failed
        """
        log_context = {
            "operation": "create_payment_intent",
            "amount_cents": params.amount_cents,
            "currency": params.currency,
        }

        request_params: dict[str, Any] = {
            "amount": params.amount_cents,
            "currency": params.currency,
            "automatic_payment_methods": {
                "enabled": params.automatic_payment_methods,
            },
        }

        intent = await self._call(
            log_context,
            lambda: self.client.v1.payment_intents.create_async(params=request_params),
        )

        return PaymentIntentResult(
            id=intent.id,
            status=expanded_field(intent, "status"),
            amount_cents=intent.amount,
            currency=intent.currency,
            client_secret=intent.client_secret,
        )

    # =========================================================================
    # Webhook Verification
    # =========================================================================

    def construct_event(
        self,
        payload: bytes,
        signature: str,
        secret: str,
    ) -> dict[str, Any]:
        """
        Verify and parse a Stripe webhook event.

        Args:
            payload: Raw webhook payload bytes
            signature: Stripe-Signature header value
            secret: Endpoint signing secret

        Returns:
            Parsed event data dict

        Raises:
            WebhookVerificationError: Bad signature, malformed header,
                expired timestamp, invalid JSON or a non-object body
        """
        try:
            stripe.WebhookSignature.verify_header(
                payload.decode("utf-8"),
                signature,
                secret,
                tolerance=stripe.Webhook.DEFAULT_TOLERANCE,
            )
        except stripe.SignatureVerificationError as e:
            raise WebhookVerificationError(
                provider_message(e),
                details={"reason": "signature"},
            ) from e
        except ValueError as e:
            raise WebhookVerificationError(
                f"Invalid payload: {e}",
                details={"reason": "payload"},
            ) from e

        # Signature checked; the payload is the event as Stripe sent it
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise WebhookVerificationError(
                f"Invalid payload: {e}",
                details={"reason": "payload"},
            ) from e

        if not isinstance(data, dict):
            raise WebhookVerificationError(
                "Invalid payload: expected a JSON object",
                details={"reason": "payload"},
            )
        return data

    # =========================================================================
    # Error Handling
    # =========================================================================

    @classmethod
    def _translate_error(
        cls,
        error: Exception,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> PaymentProviderError:
        """
        Translate Stripe exceptions to domain exceptions.

        Args:
            error: The exception raised by the SDK call
            log_context: Logging context dict
            duration_ms: Operation duration for logging

        Returns:
            The PaymentProviderError subclass to raise
        """
        logger = cls.get_logger()
        log_context = {**log_context, "duration_ms": duration_ms}
        message = provider_message(error)

        if isinstance(error, stripe.CardError):
            logger.warning(
                "Card error from Stripe",
                extra={**log_context, "decline_code": getattr(error, "decline_code", None)},
            )
            return ProviderCardDeclinedError(message, stripe_code=error.code)

        if isinstance(error, stripe.InvalidRequestError):
            if error.code == "resource_missing":
                logger.info(
                    "Stripe resource not found",
                    extra={**log_context, "stripe_code": error.code},
                )
            else:
                logger.error(
                    "Invalid request to Stripe",
                    extra={**log_context, "stripe_code": error.code},
                )
            return ProviderInvalidRequestError(message, stripe_code=error.code)

        if isinstance(error, stripe.AuthenticationError):
            logger.critical(
                "Stripe authentication failed - check API key",
                extra=log_context,
            )
            return ProviderAuthenticationError(message, stripe_code="authentication_error")

        if isinstance(error, stripe.RateLimitError):
            logger.warning("Rate limited by Stripe", extra=log_context)
            return ProviderRateLimitError(message, stripe_code="rate_limit")

        if isinstance(error, stripe.APIConnectionError):
            logger.error(
                "Connection error to Stripe",
                extra=log_context,
                exc_info=error,
            )
            return ProviderUnavailableError(message, stripe_code="api_connection_error")

        if isinstance(error, stripe.StripeError):
            logger.error(
                f"Stripe error: {type(error).__name__}",
                extra=log_context,
                exc_info=error,
            )
            return ProviderUnavailableError(message, stripe_code=error.code)

        logger.error(
            f"Unexpected error from Stripe call: {type(error).__name__}",
            extra=log_context,
            exc_info=error,
        )
        return ProviderUnavailableError(message, stripe_code="unknown_error")
