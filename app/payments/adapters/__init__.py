"""
Payment adapters for external services.

This module provides the adapter for Stripe. All Stripe API calls go
through StripeGateway to ensure consistent error handling, logging
and timing.

Usage:
    from payments.adapters import StripeGateway, CreatePaymentIntentParams

    gateway = StripeGateway.from_settings()
    result = await gateway.create_payment_intent(
        CreatePaymentIntentParams(amount_cents=1990, currency="brl")
    )
"""

from payments.adapters.stripe_adapter import (
    CreateCustomerParams,
    CreatePaymentIntentParams,
    CreateSubscriptionParams,
    CustomerResult,
    PaymentIntentResult,
    StripeGateway,
    SubscriptionResult,
    expanded_field,
    provider_message,
)

__all__ = [
    "CreateCustomerParams",
    "CreatePaymentIntentParams",
    "CreateSubscriptionParams",
    "CustomerResult",
    "PaymentIntentResult",
    "StripeGateway",
    "SubscriptionResult",
    "expanded_field",
    "provider_message",
]
