"""
Subscription flow for recurring payments via Stripe Billing.

This flow:
1. Resolves a Stripe Customer (reuses customer_id when it still exists)
2. Creates a Subscription in incomplete state for the configured price
3. Returns the first invoice's PaymentIntent client secret so the client
   can collect the first payment

Subscription state after creation (active, past_due, ...) is owned by
Stripe and reported through webhooks; nothing is stored here.

Usage:
    flow = SubscriptionFlow(price_id="price_xxx")
    result = await flow.execute(gateway, checkout_request)
    result.to_response()
    # {"clientSecret": "...", "subscriptionId": "sub_...", "customerId": "cus_..."}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from payments.adapters import CreateCustomerParams, CreateSubscriptionParams
from payments.exceptions import PaymentProviderError
from payments.strategies.base import (
    CheckoutFlow,
    CheckoutMode,
    CheckoutRequest,
    CheckoutResult,
)

if TYPE_CHECKING:
    from payments.adapters import CustomerResult, StripeGateway


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscriptionFlow(CheckoutFlow):
    """
    Create a Subscription for a plan price.

    Attributes:
        price_id: Stripe Price ID selected for the requested plan
    """

    mode: ClassVar[CheckoutMode] = CheckoutMode.SUBSCRIPTION

    price_id: str

    async def execute(
        self, gateway: StripeGateway, request: CheckoutRequest
    ) -> CheckoutResult:
        """
        Create the subscription and extract its first payment secret.

        A customer created in step 1 is not rolled back when step 2 fails.

        Raises:
            PaymentProviderError: Customer creation or subscription creation failed
        """
        customer = await self.resolve_customer(gateway, request)

        subscription = await gateway.create_subscription(
            CreateSubscriptionParams(
                customer_id=customer.id,
                price_id=self.price_id,
                metadata=request.metadata,
            )
        )

        logger.info(
            "Subscription created",
            extra={
                "subscription_id": subscription.id,
                "customer_id": customer.id,
                "price_id": self.price_id,
                "subscription_status": subscription.status,
                "has_client_secret": subscription.client_secret is not None,
            },
        )

        return CheckoutResult(
            mode=self.mode,
            client_secret=subscription.client_secret,
            subscription_id=subscription.id,
            customer_id=customer.id,
        )

    async def resolve_customer(
        self, gateway: StripeGateway, request: CheckoutRequest
    ) -> CustomerResult:
        """
        Reuse the requested customer, or create a new one.

        Missing and deleted customers are recreated. Any other retrieval
        failure is logged and also falls through to creation.
        """
        if request.customer_id:
            try:
                customer = await gateway.retrieve_customer(request.customer_id)
            except PaymentProviderError as e:
                logger.error(
                    "Customer retrieval failed, creating a new customer",
                    extra={
                        "customer_id": request.customer_id,
                        "error_code": e.error_code,
                    },
                )
                customer = None

            if customer is not None:
                return customer

            logger.info(
                "Requested customer unavailable, creating a new one",
                extra={"customer_id": request.customer_id},
            )

        return await gateway.create_customer(
            CreateCustomerParams(email=request.email, metadata=request.metadata)
        )
