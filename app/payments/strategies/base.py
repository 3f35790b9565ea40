"""
Abstract base for checkout flows.

A checkout request is served by exactly one flow, chosen once per request
by the CheckoutOrchestrator from configuration and request fields:

    SubscriptionFlow - recurring billing through a Stripe Subscription
    OneOffFlow       - a single Stripe PaymentIntent

Each flow is a small frozen dataclass carrying what the orchestrator
decided (price id, amount) and a `mode` tag, so the two paths can be
built and tested independently of each other.

Usage:
    flow = orchestrator.resolve_flow(checkout_request)
    if flow.mode == CheckoutMode.SUBSCRIPTION:
        ...
    result = await flow.execute(gateway, checkout_request)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from django.db import models

from payments.plans import DEFAULT_CURRENCY

if TYPE_CHECKING:
    from payments.adapters import StripeGateway
    from payments.plans import BillingPlan


class CheckoutMode(models.TextChoices):
    """Tag identifying which flow serves a checkout request."""

    SUBSCRIPTION = "subscription", "Subscription"
    ONE_OFF = "one_off", "One-off payment"


# =============================================================================
# Parameter and Result Types
# =============================================================================


@dataclass
class CheckoutRequest:
    """
    A validated checkout request.

    Attributes:
        plan: Requested plan, or None when no plan was sent
        email: Email for a newly created customer
        customer_id: Existing Stripe Customer ID to reuse
        metadata: Key-value pairs for the customer and subscription
        amount: Explicit one-off amount in smallest currency unit
        currency: ISO 4217 currency code (default: 'brl')
    """

    plan: BillingPlan | None = None
    email: str | None = None
    customer_id: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    amount: int | None = None
    currency: str = DEFAULT_CURRENCY


@dataclass
class CheckoutResult:
    """
    Result of a checkout flow.

    Attributes:
        mode: Which flow produced the result
        client_secret: Secret the client uses to confirm payment (may be None
            for a subscription whose first invoice has no PaymentIntent)
        subscription_id: Stripe Subscription ID (subscription flow only)
        customer_id: Stripe Customer ID, new or reused (subscription flow only)
    """

    mode: CheckoutMode
    client_secret: str | None
    subscription_id: str | None = None
    customer_id: str | None = None

    def to_response(self) -> dict[str, Any]:
        """Render the JSON body returned to the client."""
        if self.mode == CheckoutMode.SUBSCRIPTION:
            return {
                "clientSecret": self.client_secret,
                "subscriptionId": self.subscription_id,
                "customerId": self.customer_id,
            }
        return {"clientSecret": self.client_secret}


# =============================================================================
# Flow Contract
# =============================================================================


class CheckoutFlow(ABC):
    """
    Contract every checkout flow implements.

    Subclasses are frozen dataclasses; `mode` is a class-level tag.
    """

    mode: ClassVar[CheckoutMode]

    @abstractmethod
    async def execute(
        self, gateway: StripeGateway, request: CheckoutRequest
    ) -> CheckoutResult:
        """
        Run the flow against Stripe.

        Args:
            gateway: Stripe gateway to call
            request: The validated checkout request

        Returns:
            CheckoutResult for the client

        Raises:
            PaymentProviderError: A Stripe call failed
        """
