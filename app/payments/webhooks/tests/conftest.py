"""
Pytest fixtures for webhook tests.

Provides fixtures for testing webhook verification, handlers and views:
serialized event payloads, signature headers and webhook settings in each
verification mode.
"""

import pytest
import stripe

from payments.adapters import StripeGateway
from payments.tests.factories import WEBHOOK_SECRET, build_event_payload
from payments.webhooks import WebhookEvent, WebhookSettings


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def signed_settings():
    """Signature verification enabled."""
    return WebhookSettings(signing_secret=WEBHOOK_SECRET)


@pytest.fixture
def unverified_settings():
    """No secret; unsigned events explicitly allowed."""
    return WebhookSettings(allow_unverified=True)


@pytest.fixture
def rejecting_settings():
    """No secret and no opt-in: every event is rejected."""
    return WebhookSettings()


# =============================================================================
# Gateway and Payload Fixtures
# =============================================================================


@pytest.fixture
def stripe_gateway():
    """Gateway over a real StripeClient; construct_event runs offline."""
    return StripeGateway(stripe.StripeClient("sk_test_offline"))


@pytest.fixture
def invoice_paid_payload():
    return build_event_payload(
        "invoice.payment_succeeded",
        {"id": "in_paid123", "object": "invoice"},
    )


@pytest.fixture
def make_event():
    """Build a parsed WebhookEvent."""

    def _create(
        event_type: str | None = "invoice.payment_succeeded",
        data_object: dict | None = None,
        event_id: str | None = "evt_test123",
    ) -> WebhookEvent:
        return WebhookEvent(
            id=event_id,
            type=event_type,
            data_object=data_object if data_object is not None else {"id": "in_1"},
        )

    return _create
