"""
Webhook handling for payment events from Stripe.

Webhooks are verified against the endpoint signing secret, parsed and
dispatched to logging handlers. Nothing is stored or queued.

Usage:
    # In urls.py
    from payments.webhooks import StripeWebhookView

    urlpatterns = [
        path("webhook", StripeWebhookView.as_view(gateway=gateway), name="webhook"),
    ]
"""

from payments.webhooks.handlers import dispatch_webhook, register_handler
from payments.webhooks.verification import (
    WebhookEvent,
    WebhookSettings,
    WebhookVerifier,
)
from payments.webhooks.views import StripeWebhookView

__all__ = [
    "dispatch_webhook",
    "register_handler",
    "StripeWebhookView",
    "WebhookEvent",
    "WebhookSettings",
    "WebhookVerifier",
]
