"""
Billing plans, fallback amounts and configured Stripe prices.

Plans map to Stripe Price ids through configuration (MONTHLY_PRICE_ID,
ANNUAL_PRICE_ID). When no price id is configured at all, plans still select
a fixed one-off amount so the checkout keeps working without Stripe Billing.

Amounts are in the smallest currency unit (centavos for BRL).
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from django.db import models

DEFAULT_CURRENCY = "brl"

# Used when neither an amount nor a plan is sent
DEFAULT_AMOUNT_CENTS = 1990


class BillingPlan(models.TextChoices):
    """Plans a client can request at checkout."""

    MONTHLY = "monthly", "Monthly"
    ANNUAL = "annual", "Annual"

    @classmethod
    def from_request(cls, value: str | None) -> BillingPlan | None:
        """
        Map a raw plan value to a BillingPlan.

        "annual" selects ANNUAL; any other non-empty value selects MONTHLY.
        Empty or missing values mean no plan was requested.
        """
        if not value:
            return None
        return cls.ANNUAL if value == cls.ANNUAL else cls.MONTHLY


PLAN_FALLBACK_AMOUNTS: dict[BillingPlan, int] = {
    BillingPlan.MONTHLY: 1990,
    BillingPlan.ANNUAL: 17990,
}


@dataclass(frozen=True)
class PlanPrices:
    """
    Stripe Price ids configured for each plan.

    Attributes:
        monthly: Price id for the monthly plan (None if not configured)
        annual: Price id for the annual plan (None if not configured)
    """

    monthly: str | None = None
    annual: str | None = None

    @classmethod
    def from_settings(cls) -> PlanPrices:
        return cls(
            monthly=settings.MONTHLY_PRICE_ID or None,
            annual=settings.ANNUAL_PRICE_ID or None,
        )

    @property
    def any_configured(self) -> bool:
        """True when the subscription path is enabled for at least one plan."""
        return bool(self.monthly or self.annual)

    def price_for(self, plan: BillingPlan) -> str | None:
        if plan == BillingPlan.ANNUAL:
            return self.annual
        return self.monthly
