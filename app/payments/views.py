"""
Checkout views for the payments app.

This module provides the HTTP endpoint that creates a PaymentIntent or a
Subscription for the client application. The view:
1. Parses and validates the JSON body
2. Hands the request to the CheckoutOrchestrator
3. Shapes the response: {clientSecret} or {clientSecret, subscriptionId, customerId}

The orchestrator is injected through `as_view(orchestrator=...)`; see
payments.urls.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from django.http import HttpRequest, JsonResponse
from django.views import View

from payments.exceptions import PaymentProviderError, PaymentValidationError
from payments.serializers import CreatePaymentIntentSerializer

if TYPE_CHECKING:
    from payments.services import CheckoutOrchestrator


logger = logging.getLogger(__name__)


class CreatePaymentIntentView(View):
    """
    Create a one-off PaymentIntent or a Subscription.

    Returns:
        JsonResponse with status:
        - 200: {clientSecret} or {clientSecret, subscriptionId, customerId}
        - 400: Invalid body or requested plan not configured
        - 500: Stripe call failed; body carries the provider's message
    """

    http_method_names = ["post", "options"]
    orchestrator: CheckoutOrchestrator | None = None

    async def post(self, request: HttpRequest) -> JsonResponse:
        try:
            body = json.loads(request.body or b"{}")
        except ValueError:
            logger.info("Checkout request with invalid JSON body")
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        if not isinstance(body, dict):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        serializer = CreatePaymentIntentSerializer(data=body)
        if not serializer.is_valid():
            logger.info(
                "Checkout request failed validation",
                extra={"fields": sorted(serializer.errors)},
            )
            return JsonResponse(
                {"error": "Invalid request body", "details": serializer.errors},
                status=400,
            )

        try:
            result = await self.orchestrator.create(serializer.to_checkout_request())
        except PaymentValidationError as e:
            logger.info("Checkout request rejected", extra=e.to_dict())
            return JsonResponse({"error": e.message}, status=400)
        except PaymentProviderError as e:
            logger.error(
                "Checkout failed: Stripe error",
                extra=e.to_dict(),
                exc_info=True,
            )
            return JsonResponse({"error": e.message}, status=500)

        return JsonResponse(result.to_response())
