"""
Pytest fixtures for payment tests.

This module provides fixtures for driving the checkout orchestrator and
views with a mocked Stripe gateway.

Usage:
    def test_one_off(post_checkout):
        response = post_checkout({"amount": 5000})
        assert response.status_code == 200
"""

import json

import pytest
from asgiref.sync import async_to_sync

from payments.plans import PlanPrices
from payments.services import CheckoutOrchestrator
from payments.views import CreatePaymentIntentView


# =============================================================================
# Price Configuration Fixtures
# =============================================================================


@pytest.fixture
def no_prices():
    """No price ids configured: every checkout is one-off."""
    return PlanPrices()


@pytest.fixture
def monthly_only():
    """Only the monthly plan has a price id."""
    return PlanPrices(monthly="price_monthly")


@pytest.fixture
def both_prices():
    """Both plans have price ids."""
    return PlanPrices(monthly="price_monthly", annual="price_annual")


# =============================================================================
# Orchestrator and View Fixtures
# =============================================================================


@pytest.fixture
def orchestrator_for(mock_gateway):
    """Build an orchestrator over the mock gateway for the given prices."""

    def _create(prices: PlanPrices | None = None) -> CheckoutOrchestrator:
        return CheckoutOrchestrator(mock_gateway, prices)

    return _create


@pytest.fixture
def post_checkout(rf, orchestrator_for):
    """POST a body to the checkout view and return the response."""

    def _post(body, prices: PlanPrices | None = None, raw: bool = False):
        data = body if raw else json.dumps(body)
        request = rf.post(
            "/create-payment-intent",
            data=data,
            content_type="application/json",
        )
        view = CreatePaymentIntentView.as_view(orchestrator=orchestrator_for(prices))
        return async_to_sync(view)(request)

    return _post
