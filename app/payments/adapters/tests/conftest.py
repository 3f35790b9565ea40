"""
Pytest fixtures for Stripe adapter tests.

This module provides fixtures for testing the Stripe gateway, including
mock Stripe API responses, error conditions, and webhook signing helpers.

Sections:
    - Mock Stripe Response Fixtures
    - Mock Stripe Client Fixtures
    - Mock Stripe Error Fixtures
    - Webhook Signing Fixtures
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import stripe

from payments.adapters import StripeGateway
from payments.tests.factories import (
    WEBHOOK_SECRET,
    MockStripeObject,
    build_event_payload,
)


# =============================================================================
# Mock Stripe Response Fixtures
# =============================================================================


@pytest.fixture
def mock_customer():
    """Create a mock Customer response."""

    def _create(
        id: str = "cus_test123456",
        email: str | None = "buyer@example.com",
        deleted: bool | None = None,
    ) -> MockStripeObject:
        data = {"id": id, "object": "customer", "email": email}
        if deleted is not None:
            data["deleted"] = deleted
        return MockStripeObject(data)

    return _create


@pytest.fixture
def mock_subscription():
    """Create a mock Subscription response with an expanded latest invoice."""

    def _create(
        id: str = "sub_test123456",
        status: str = "incomplete",
        customer: str = "cus_test123456",
        latest_invoice: Any = "expanded",
        client_secret: str = "pi_sub123_secret_abc",
    ) -> MockStripeObject:
        if latest_invoice == "expanded":
            latest_invoice = {
                "id": "in_test123456",
                "object": "invoice",
                "payment_intent": {
                    "id": "pi_sub123",
                    "object": "payment_intent",
                    "client_secret": client_secret,
                },
            }
        return MockStripeObject(
            {
                "id": id,
                "object": "subscription",
                "status": status,
                "customer": customer,
                "latest_invoice": latest_invoice,
            }
        )

    return _create


@pytest.fixture
def mock_payment_intent():
    """Create a mock PaymentIntent response."""

    def _create(
        id: str = "pi_test123456",
        status: str = "requires_payment_method",
        amount: int = 1990,
        currency: str = "brl",
        client_secret: str = "pi_test123456_secret_abc123",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "payment_intent",
                "status": status,
                "amount": amount,
                "currency": currency,
                "client_secret": client_secret,
            }
        )

    return _create


# =============================================================================
# Mock Stripe Client Fixtures
# =============================================================================


@pytest.fixture
def mock_stripe_client(mock_customer, mock_subscription, mock_payment_intent):
    """StripeClient stand-in with async v1 services returning mock objects."""
    client = MagicMock()
    client.v1.customers.retrieve_async = AsyncMock(return_value=mock_customer())
    client.v1.customers.create_async = AsyncMock(return_value=mock_customer())
    client.v1.subscriptions.create_async = AsyncMock(
        return_value=mock_subscription()
    )
    client.v1.payment_intents.create_async = AsyncMock(
        return_value=mock_payment_intent()
    )
    return client


@pytest.fixture
def gateway(mock_stripe_client):
    """StripeGateway wired to the mock client."""
    return StripeGateway(mock_stripe_client)


# =============================================================================
# Mock Stripe Error Fixtures
# =============================================================================


@pytest.fixture
def card_error():
    """Create a Stripe CardError."""
    return stripe.CardError(
        message="Your card was declined.",
        param=None,
        code="card_declined",
    )


@pytest.fixture
def invalid_request_error():
    """Create a Stripe InvalidRequestError."""

    def _create(
        message: str = "No such customer: 'cus_missing'",
        param: str | None = "id",
        code: str = "resource_missing",
    ) -> stripe.InvalidRequestError:
        return stripe.InvalidRequestError(
            message=message,
            param=param,
            code=code,
        )

    return _create


@pytest.fixture
def rate_limit_error():
    """Create a Stripe RateLimitError."""
    return stripe.RateLimitError(
        message="Too many requests hit the API too quickly.",
    )


@pytest.fixture
def api_connection_error():
    """Create a Stripe APIConnectionError."""
    return stripe.APIConnectionError(
        message="Could not connect to Stripe.",
    )


@pytest.fixture
def api_error():
    """Create a Stripe APIError."""
    return stripe.APIError(
        message="Something went wrong on Stripe's end.",
    )


@pytest.fixture
def authentication_error():
    """Create a Stripe AuthenticationError."""
    return stripe.AuthenticationError(
        message="Invalid API Key provided.",
    )


# =============================================================================
# Webhook Signing Fixtures
# =============================================================================


@pytest.fixture
def webhook_secret():
    return WEBHOOK_SECRET


@pytest.fixture
def event_payload():
    """Builder for serialized Stripe events."""
    return build_event_payload


@pytest.fixture
def real_gateway():
    """Gateway over a real StripeClient; only used offline (construct_event)."""
    return StripeGateway(stripe.StripeClient("sk_test_offline"))
