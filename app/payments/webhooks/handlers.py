"""
Webhook event handlers for Stripe events.

This module provides a handler registry and the handlers for the
subscription billing events the relay cares about. Handlers only log:
nothing is persisted and nothing is forwarded.

The handler registry allows:
- Clean separation between event routing and handling
- Easy extension for new event types

Usage:
    from payments.webhooks.handlers import dispatch_webhook, register_handler

    # Register a custom handler
    @register_handler("custom.event")
    def handle_custom_event(event: WebhookEvent) -> None:
        ...

    # Dispatch an event to its handler
    handled = dispatch_webhook(event)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from payments.webhooks.verification import WebhookEvent


logger = logging.getLogger(__name__)


# =============================================================================
# Handler Registry
# =============================================================================


# Maps event type strings to handler functions
WEBHOOK_HANDLERS: dict[str, Callable[[WebhookEvent], None]] = {}


def register_handler(event_type: str) -> Callable:
    """
    Decorator to register a webhook event handler.

    Usage:
        @register_handler("invoice.payment_succeeded")
        def handle_invoice_paid(event: WebhookEvent) -> None:
            ...

    Args:
        event_type: The Stripe event type (e.g., "invoice.payment_succeeded")

    Returns:
        Decorator function that registers the handler
    """

    def decorator(func: Callable[[WebhookEvent], None]) -> Callable:
        WEBHOOK_HANDLERS[event_type] = func
        logger.debug(f"Registered webhook handler for {event_type}")
        return func

    return decorator


def dispatch_webhook(event: WebhookEvent) -> bool:
    """
    Dispatch a webhook event to the appropriate handler.

    Unknown event types are logged and acknowledged, never failed.

    Args:
        event: The parsed WebhookEvent

    Returns:
        True if a registered handler ran, False otherwise
    """
    handler = WEBHOOK_HANDLERS.get(event.type or "")

    if not handler:
        logger.info(
            f"Unhandled event type {event.type}",
            extra={"stripe_event_id": event.id},
        )
        return False

    logger.debug(
        f"Dispatching {event.type} to handler",
        extra={"stripe_event_id": event.id},
    )
    handler(event)
    return True


# =============================================================================
# Invoice Handlers
# =============================================================================


@register_handler("invoice.payment_succeeded")
def handle_invoice_payment_succeeded(event: WebhookEvent) -> None:
    """Log a paid subscription invoice."""
    invoice_id = event.get_object_id()
    logger.info(
        f"Invoice payment succeeded: {invoice_id}",
        extra={"stripe_event_id": event.id, "invoice_id": invoice_id},
    )


@register_handler("invoice.payment_failed")
def handle_invoice_payment_failed(event: WebhookEvent) -> None:
    """Log a failed subscription invoice payment."""
    invoice_id = event.get_object_id()
    logger.warning(
        f"Invoice payment failed: {invoice_id}",
        extra={"stripe_event_id": event.id, "invoice_id": invoice_id},
    )


# =============================================================================
# Subscription Handlers
# =============================================================================


@register_handler("customer.subscription.updated")
def handle_subscription_updated(event: WebhookEvent) -> None:
    subscription_id = event.get_object_id()
    status = event.data_object.get("status")
    logger.info(
        f"Subscription updated: {subscription_id} status={status}",
        extra={
            "stripe_event_id": event.id,
            "subscription_id": subscription_id,
            "status": status,
        },
    )
