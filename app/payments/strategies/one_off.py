"""
One-off payment flow: a single Stripe PaymentIntent.

Used when no plan was requested, or when no plan price id is configured.
The amount has already been resolved by the orchestrator:

    explicit amount -> plan fallback amount -> default amount
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from payments.adapters import CreatePaymentIntentParams
from payments.strategies.base import (
    CheckoutFlow,
    CheckoutMode,
    CheckoutRequest,
    CheckoutResult,
)

if TYPE_CHECKING:
    from payments.adapters import StripeGateway


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneOffFlow(CheckoutFlow):
    """
    Create a PaymentIntent with automatic payment methods.

    Attributes:
        amount_cents: Amount to charge in smallest currency unit
        currency: ISO 4217 currency code
    """

    mode: ClassVar[CheckoutMode] = CheckoutMode.ONE_OFF

    amount_cents: int
    currency: str

    async def execute(
        self, gateway: StripeGateway, request: CheckoutRequest
    ) -> CheckoutResult:
        intent = await gateway.create_payment_intent(
            CreatePaymentIntentParams(
                amount_cents=self.amount_cents,
                currency=self.currency,
            )
        )

        logger.info(
            "One-off payment intent created",
            extra={
                "payment_intent_id": intent.id,
                "amount_cents": self.amount_cents,
                "currency": self.currency,
            },
        )

        return CheckoutResult(mode=self.mode, client_secret=intent.client_secret)
