"""
Checkout flows.

Each flow implements one way of collecting a payment:
- SubscriptionFlow: recurring billing through a Stripe Subscription
- OneOffFlow: a single PaymentIntent

Usage:
    from payments.strategies import CheckoutRequest, OneOffFlow

    flow = OneOffFlow(amount_cents=1990, currency="brl")
    result = await flow.execute(gateway, CheckoutRequest())
"""

from payments.strategies.base import (
    CheckoutFlow,
    CheckoutMode,
    CheckoutRequest,
    CheckoutResult,
)
from payments.strategies.one_off import OneOffFlow
from payments.strategies.subscription import SubscriptionFlow

__all__ = [
    "CheckoutFlow",
    "CheckoutMode",
    "CheckoutRequest",
    "CheckoutResult",
    "OneOffFlow",
    "SubscriptionFlow",
]
