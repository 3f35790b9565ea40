"""
Payments app for Stripe checkout.

This app handles:
- Checkout: a Subscription when price ids are configured, otherwise a
  one-off PaymentIntent
- Stripe customer reuse and creation
- Webhook verification and relay to logging handlers

Usage:
    from payments.services import CheckoutOrchestrator

    orchestrator = CheckoutOrchestrator(gateway, PlanPrices.from_settings())
    result = await orchestrator.create(checkout_request)
"""
