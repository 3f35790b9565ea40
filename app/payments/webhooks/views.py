"""
Webhook endpoint views for Stripe.

This module provides the HTTP endpoint for receiving Stripe webhooks.
The view:
1. Verifies the webhook signature (or parses unverified, when allowed)
2. Dispatches the event to its registered handler
3. Acknowledges with {"received": true}

The gateway and webhook settings are injected through
`as_view(gateway=..., webhook_settings=...)`; see payments.urls.

Example Stripe-Signature header:
    t=1614556800,v1=xxx,v0=yyy
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views import View

from payments.exceptions import WebhookVerificationError
from payments.webhooks.handlers import dispatch_webhook
from payments.webhooks.verification import (
    SIGNATURE_HEADER,
    WebhookSettings,
    WebhookVerifier,
)

if TYPE_CHECKING:
    from payments.adapters import StripeGateway


logger = logging.getLogger(__name__)


class StripeWebhookView(View):
    """
    Receive and relay Stripe webhook events.

    Security:
    - Signature verification prevents spoofed webhooks
    - Without a signing secret, events are rejected unless
      WEBHOOK_ALLOW_UNVERIFIED is set

    Returns:
        HttpResponse with status:
        - 200: {"received": true}
        - 400: "Webhook Error: <message>" (text/plain), nothing dispatched
    """

    http_method_names = ["post", "options"]
    gateway: StripeGateway | None = None
    webhook_settings: WebhookSettings | None = None

    async def post(self, request: HttpRequest) -> HttpResponse:
        verifier = WebhookVerifier(
            self.gateway, self.webhook_settings or WebhookSettings()
        )
        signature = request.headers.get(SIGNATURE_HEADER, "")

        try:
            event = verifier.verify(request.body, signature)
        except WebhookVerificationError as e:
            logger.warning(
                "Webhook verification failed",
                extra=e.to_dict(),
            )
            return HttpResponse(
                f"Webhook Error: {e.message}",
                status=400,
                content_type="text/plain",
            )

        logger.info(
            f"Received Stripe webhook: {event.type}",
            extra={"stripe_event_id": event.id, "event_type": event.type},
        )
        dispatch_webhook(event)

        return JsonResponse({"received": True})
