"""
Webhook authentication and parsing.

Verification modes:
- Signing secret configured: the Stripe SDK checks the Stripe-Signature
  header (HMAC-SHA256 over "<timestamp>.<body>", 300 s tolerance).
- No secret, WEBHOOK_ALLOW_UNVERIFIED=true: the body is parsed as JSON
  with no authenticity check. Every such event is logged as a warning.
- No secret and no opt-in: fail closed, every webhook is rejected.

Usage:
    verifier = WebhookVerifier(gateway, WebhookSettings.from_settings())
    event = verifier.verify(request.body, request.headers.get("Stripe-Signature"))
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from django.conf import settings

from payments.exceptions import WebhookVerificationError

if TYPE_CHECKING:
    from payments.adapters import StripeGateway


logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "Stripe-Signature"


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class WebhookEvent:
    """
    A parsed webhook notification.

    Attributes:
        id: Stripe event ID (evt_xxx), if present
        type: Event type tag (e.g., "invoice.payment_succeeded")
        data_object: The event's data.object payload
    """

    id: str | None
    type: str | None
    data_object: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> WebhookEvent:
        data = payload.get("data")
        data_object = data.get("object") if isinstance(data, dict) else None
        return cls(
            id=_string_or_none(payload.get("id")),
            type=_string_or_none(payload.get("type")),
            data_object=data_object if isinstance(data_object, dict) else {},
        )

    def get_object_id(self) -> str | None:
        """Return the ID of the object the event is about."""
        return _string_or_none(self.data_object.get("id"))


@dataclass(frozen=True)
class WebhookSettings:
    """
    Webhook verification configuration.

    Attributes:
        signing_secret: Endpoint signing secret (whsec_xxx), or None
        allow_unverified: Accept unsigned events when no secret is set
    """

    signing_secret: str | None = None
    allow_unverified: bool = False

    @classmethod
    def from_settings(cls) -> WebhookSettings:
        return cls(
            signing_secret=settings.WEBHOOK_SIGNING_SECRET or None,
            allow_unverified=settings.WEBHOOK_ALLOW_UNVERIFIED,
        )


class WebhookVerifier:
    """Authenticate and parse raw webhook requests."""

    def __init__(self, gateway: StripeGateway, config: WebhookSettings):
        self.gateway = gateway
        self.config = config

    def verify(self, payload: bytes, signature: str | None) -> WebhookEvent:
        """
        Verify a raw webhook body and parse it into a WebhookEvent.

        Args:
            payload: Raw, unparsed request body
            signature: Stripe-Signature header value, if any

        Returns:
            The parsed WebhookEvent

        Raises:
            WebhookVerificationError: Verification or parsing failed
        """
        if self.config.signing_secret:
            data = self.gateway.construct_event(
                payload, signature or "", self.config.signing_secret
            )
        elif self.config.allow_unverified:
            data = self._parse_unverified(payload)
        else:
            logger.error("Webhook rejected: no signing secret configured")
            raise WebhookVerificationError(
                "Webhook signing secret is not configured",
                error_code="WEBHOOK_SECRET_MISSING",
            )

        if not isinstance(data, dict):
            raise WebhookVerificationError("Invalid payload: expected a JSON object")

        return WebhookEvent.from_payload(data)

    def _parse_unverified(self, payload: bytes) -> Any:
        logger.warning("Accepting webhook without signature verification")
        try:
            return json.loads(payload)
        except ValueError as e:
            raise WebhookVerificationError(
                f"Invalid payload: {e}",
                details={"reason": "payload"},
            ) from e
