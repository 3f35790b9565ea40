"""
Tests for billing plans and configured prices.
"""

import pytest
from django.test import override_settings

from payments.plans import (
    DEFAULT_AMOUNT_CENTS,
    PLAN_FALLBACK_AMOUNTS,
    BillingPlan,
    PlanPrices,
)


class TestBillingPlanFromRequest:
    """Tests for mapping raw plan values."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_means_no_plan(self, value):
        assert BillingPlan.from_request(value) is None

    def test_annual(self):
        assert BillingPlan.from_request("annual") == BillingPlan.ANNUAL

    @pytest.mark.parametrize("value", ["monthly", "weekly", "ANNUAL", "premium"])
    def test_anything_else_is_monthly(self, value):
        assert BillingPlan.from_request(value) == BillingPlan.MONTHLY


class TestFallbackAmounts:
    def test_amounts(self):
        assert PLAN_FALLBACK_AMOUNTS[BillingPlan.MONTHLY] == 1990
        assert PLAN_FALLBACK_AMOUNTS[BillingPlan.ANNUAL] == 17990
        assert DEFAULT_AMOUNT_CENTS == 1990


class TestPlanPrices:
    """Tests for PlanPrices."""

    def test_nothing_configured(self):
        prices = PlanPrices()

        assert prices.any_configured is False
        assert prices.price_for(BillingPlan.MONTHLY) is None

    def test_price_for(self):
        prices = PlanPrices(monthly="price_m", annual="price_a")

        assert prices.any_configured is True
        assert prices.price_for(BillingPlan.MONTHLY) == "price_m"
        assert prices.price_for(BillingPlan.ANNUAL) == "price_a"

    def test_annual_does_not_fall_back_to_monthly(self):
        prices = PlanPrices(monthly="price_m")

        assert prices.price_for(BillingPlan.ANNUAL) is None

    @override_settings(MONTHLY_PRICE_ID="price_m", ANNUAL_PRICE_ID="")
    def test_from_settings_treats_empty_as_unset(self):
        prices = PlanPrices.from_settings()

        assert prices == PlanPrices(monthly="price_m", annual=None)
