"""
URL configuration for the payments app.

Routes:
    - POST /create-payment-intent - Create a PaymentIntent or Subscription
    - POST /webhook - Stripe webhook endpoint

Collaborators built in PaymentsConfig.ready() are injected into the views
with as_view(**initkwargs).

Usage:
    # In config/urls.py
    urlpatterns = [
        path("", include("payments.urls")),
    ]
"""

from django.apps import apps
from django.urls import path
from django.views.decorators.csrf import csrf_exempt

from core.decorators import log_request
from payments.views import CreatePaymentIntentView
from payments.webhooks import StripeWebhookView

app_name = "payments"

payments_config = apps.get_app_config("payments")

urlpatterns = [
    path(
        "create-payment-intent",
        csrf_exempt(
            log_request()(
                CreatePaymentIntentView.as_view(
                    orchestrator=payments_config.orchestrator
                )
            )
        ),
        name="create_payment_intent",
    ),
    # Webhook endpoints
    path(
        "webhook",
        csrf_exempt(
            log_request()(
                StripeWebhookView.as_view(
                    gateway=payments_config.gateway,
                    webhook_settings=payments_config.webhook_settings,
                )
            )
        ),
        name="webhook",
    ),
]
