"""
Tests for URL routing, dependency injection and middleware.

Requests here go through the full Django stack with the collaborators
built by PaymentsConfig.ready().
"""

import pytest
from django.apps import apps
from django.urls import resolve, reverse

from payments.views import CreatePaymentIntentView
from payments.webhooks import StripeWebhookView


@pytest.fixture
def payments_config():
    return apps.get_app_config("payments")


class TestRouting:
    """Tests for path resolution and injected collaborators."""

    def test_checkout_route(self, payments_config):
        match = resolve("/create-payment-intent")

        assert match.func.view_class is CreatePaymentIntentView
        assert match.func.view_initkwargs == {
            "orchestrator": payments_config.orchestrator
        }
        assert reverse("payments:create_payment_intent") == "/create-payment-intent"

    def test_webhook_route(self, payments_config):
        match = resolve("/webhook")

        assert match.func.view_class is StripeWebhookView
        assert match.func.view_initkwargs["gateway"] is payments_config.gateway
        assert (
            match.func.view_initkwargs["webhook_settings"]
            is payments_config.webhook_settings
        )

    def test_views_are_csrf_exempt(self):
        assert resolve("/create-payment-intent").func.csrf_exempt is True
        assert resolve("/webhook").func.csrf_exempt is True

    def test_collaborators_share_one_gateway(self, payments_config):
        assert payments_config.orchestrator.gateway is payments_config.gateway


class TestMiddleware:
    """Tests for behavior added by the middleware stack."""

    def test_cors_preflight_allows_any_origin(self, client):
        response = client.options(
            "/create-payment-intent",
            HTTP_ORIGIN="https://shop.example.com",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
        )

        assert response.status_code == 200
        assert response["Access-Control-Allow-Origin"] == "*"

    def test_unknown_path_is_404(self, client):
        assert client.get("/nope").status_code == 404

    def test_get_checkout_is_405(self, client):
        assert client.get("/create-payment-intent").status_code == 405
