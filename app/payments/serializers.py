"""
DRF serializers for payments app.

This module provides serializers for:
- Checkout (create-payment-intent) request bodies

Related files:
    - views.py: Checkout view
    - strategies/base.py: CheckoutRequest built from validated data

Usage:
    serializer = CreatePaymentIntentSerializer(data=body)
    if serializer.is_valid():
        checkout_request = serializer.to_checkout_request()
"""

from __future__ import annotations

from rest_framework import serializers

from payments.plans import DEFAULT_CURRENCY, BillingPlan
from payments.strategies import CheckoutRequest


class CreatePaymentIntentSerializer(serializers.Serializer):
    """
    Checkout request body.

    Fields:
        plan: Requested plan; "annual" or anything else (monthly)
        email: Email for a newly created customer, passed to Stripe as given
        customerId: Existing Stripe Customer ID to reuse
        metadata: String key-value pairs for customer and subscription
        amount: One-off amount in smallest currency unit (0 means unset)
        currency: ISO 4217 code, defaults to "brl"
    """

    plan = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    email = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    customerId = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    metadata = serializers.DictField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        allow_null=True,
    )
    amount = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    currency = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=3
    )

    def validate_currency(self, value: str | None) -> str:
        return (value or DEFAULT_CURRENCY).lower()

    def to_checkout_request(self) -> CheckoutRequest:
        """Build the CheckoutRequest from validated data."""
        data = self.validated_data
        return CheckoutRequest(
            plan=BillingPlan.from_request(data.get("plan")),
            email=data.get("email") or None,
            customer_id=data.get("customerId") or None,
            metadata=dict(data.get("metadata") or {}),
            amount=data.get("amount") or None,
            currency=data.get("currency") or DEFAULT_CURRENCY,
        )
