"""
Root pytest configuration for the Django project.

This module configures pytest-django and provides project-wide fixtures.
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import os

import django
import pytest
from django.test import RequestFactory

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def pytest_configure():
    """Configure Django settings before tests run."""
    django.setup()


@pytest.fixture
def rf():
    """Django RequestFactory for driving views directly."""
    return RequestFactory()


@pytest.fixture
def mock_gateway():
    """
    StripeGateway stand-in with canned results.

    Async gateway methods become AsyncMocks because of spec=StripeGateway.
    """
    from unittest.mock import MagicMock

    from payments.adapters import (
        CustomerResult,
        PaymentIntentResult,
        StripeGateway,
        SubscriptionResult,
    )

    gateway = MagicMock(spec=StripeGateway)
    gateway.retrieve_customer.return_value = CustomerResult(
        id="cus_existing", email="buyer@example.com"
    )
    gateway.create_customer.return_value = CustomerResult(
        id="cus_new", email="buyer@example.com"
    )
    gateway.create_subscription.return_value = SubscriptionResult(
        id="sub_123",
        status="incomplete",
        customer_id="cus_new",
        client_secret="pi_sub_secret_123",
    )
    gateway.create_payment_intent.return_value = PaymentIntentResult(
        id="pi_123",
        status="requires_payment_method",
        amount_cents=1990,
        currency="brl",
        client_secret="pi_123_secret_456",
    )
    return gateway
