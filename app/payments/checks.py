"""
Django system checks for payment configuration.

Run by `manage.py check` and by config.server before the port is bound.

    payments.E001  PAYMENT_PROVIDER_SECRET_KEY is not set
    payments.W001  Unsigned webhooks are accepted
    payments.W002  No signing secret; every webhook will be rejected
"""

from django.conf import settings
from django.core.checks import Error, Warning, register

PAYMENTS_TAG = "payments"


@register(PAYMENTS_TAG)
def check_provider_credentials(app_configs, **kwargs):
    if settings.PAYMENT_PROVIDER_SECRET_KEY:
        return []
    return [
        Error(
            "PAYMENT_PROVIDER_SECRET_KEY is not set.",
            hint="Set it to your Stripe secret key (sk_test_... or sk_live_...).",
            id="payments.E001",
        )
    ]


@register(PAYMENTS_TAG)
def check_webhook_verification(app_configs, **kwargs):
    if settings.WEBHOOK_SIGNING_SECRET:
        return []
    if settings.WEBHOOK_ALLOW_UNVERIFIED:
        return [
            Warning(
                "Webhooks are accepted without signature verification.",
                hint=(
                    "Set WEBHOOK_SIGNING_SECRET and unset "
                    "WEBHOOK_ALLOW_UNVERIFIED outside local development."
                ),
                id="payments.W001",
            )
        ]
    return [
        Warning(
            "WEBHOOK_SIGNING_SECRET is not set; all webhooks will be rejected.",
            hint="Set WEBHOOK_SIGNING_SECRET to the endpoint's signing secret.",
            id="payments.W002",
        )
    ]
