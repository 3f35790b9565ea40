"""
URL configuration for the checkout backend.

URL Structure:
    /health                  - Health check endpoint (for load balancers, Docker)
    /create-payment-intent   - Create a PaymentIntent or Subscription (POST)
    /webhook                 - Stripe webhook endpoint (POST)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.urls import include, path

from core.views import health_check

urlpatterns = [
    # Health check (no auth, for load balancers and Docker)
    path("health", health_check, name="health_check"),
    # Checkout and webhook endpoints, served at the root
    path("", include("payments.urls")),
]
