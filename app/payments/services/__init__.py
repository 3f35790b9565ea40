"""
Payment services.

Usage:
    from payments.services import CheckoutOrchestrator
"""

from payments.services.payment_orchestrator import CheckoutOrchestrator

__all__ = [
    "CheckoutOrchestrator",
]
