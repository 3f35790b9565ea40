"""
Checkout orchestrator: picks and runs the flow for a checkout request.

The orchestrator is the entry point for creating payments. It is built
once at startup with the Stripe gateway and the configured plan prices,
and injected into the checkout view.

Decision policy:
    plan requested AND any plan price configured
        -> SubscriptionFlow for the requested plan's price
           (PlanNotConfiguredError if that plan has no price)
    otherwise
        -> OneOffFlow with amount = explicit amount
                                 or plan fallback amount
                                 or default amount

Usage:
    from payments.services import CheckoutOrchestrator

    orchestrator = CheckoutOrchestrator(gateway, PlanPrices.from_settings())
    result = await orchestrator.create(checkout_request)
    result.to_response()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payments.exceptions import PlanNotConfiguredError
from payments.plans import (
    DEFAULT_AMOUNT_CENTS,
    DEFAULT_CURRENCY,
    PLAN_FALLBACK_AMOUNTS,
    PlanPrices,
)
from payments.strategies import (
    CheckoutFlow,
    CheckoutRequest,
    CheckoutResult,
    OneOffFlow,
    SubscriptionFlow,
)

if TYPE_CHECKING:
    from payments.adapters import StripeGateway


logger = logging.getLogger(__name__)


class CheckoutOrchestrator:
    """
    Route checkout requests to a subscription or one-off flow.

    Holds only read-only collaborators, so one instance serves all
    concurrent requests.

    Dependency Injection:
        The gateway and prices are passed in; tests use a mock gateway.
    """

    def __init__(self, gateway: StripeGateway, prices: PlanPrices | None = None):
        self.gateway = gateway
        self.prices = prices or PlanPrices()

    def resolve_flow(self, request: CheckoutRequest) -> CheckoutFlow:
        """
        Decide which flow serves the request.

        Args:
            request: The validated checkout request

        Returns:
            SubscriptionFlow or OneOffFlow

        Raises:
            PlanNotConfiguredError: Subscription path enabled but the
                requested plan has no price id
        """
        if request.plan is not None and self.prices.any_configured:
            price_id = self.prices.price_for(request.plan)
            if not price_id:
                logger.warning(
                    "Requested plan has no configured price",
                    extra={"plan": request.plan.value},
                )
                raise PlanNotConfiguredError(details={"plan": request.plan.value})
            return SubscriptionFlow(price_id=price_id)

        return OneOffFlow(
            amount_cents=self.resolve_amount(request),
            currency=request.currency or DEFAULT_CURRENCY,
        )

    @staticmethod
    def resolve_amount(request: CheckoutRequest) -> int:
        """Explicit amount, else the plan fallback, else the default amount."""
        if request.amount:
            return request.amount
        if request.plan is not None:
            return PLAN_FALLBACK_AMOUNTS[request.plan]
        return DEFAULT_AMOUNT_CENTS

    async def create(self, request: CheckoutRequest) -> CheckoutResult:
        """
        Resolve and execute the flow for a checkout request.

        Raises:
            PlanNotConfiguredError: Requested plan has no price id
            PaymentProviderError: A Stripe call failed
        """
        flow = self.resolve_flow(request)

        logger.info(
            f"Starting {flow.mode} checkout",
            extra={
                "mode": flow.mode.value,
                "plan": request.plan.value if request.plan is not None else None,
                "reuse_customer": bool(request.customer_id),
            },
        )

        return await flow.execute(self.gateway, request)
