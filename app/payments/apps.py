"""
Payments app configuration.

This app provides the checkout backend:
- Stripe gateway (async StripeClient wrapper)
- Checkout orchestrator (subscription or one-off PaymentIntent)
- Webhook verification and relay

ready() builds the long-lived collaborators once per process; payments.urls
injects them into the views.
"""

from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    """Configuration for the payments application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments"

    def ready(self):
        from payments import checks  # noqa: F401 - registers system checks
        from payments.adapters import StripeGateway
        from payments.plans import PlanPrices
        from payments.services import CheckoutOrchestrator
        from payments.webhooks import WebhookSettings

        self.gateway = StripeGateway.from_settings()
        self.prices = PlanPrices.from_settings()
        self.orchestrator = CheckoutOrchestrator(self.gateway, self.prices)
        self.webhook_settings = WebhookSettings.from_settings()
