"""
Server entry point for the checkout backend.

Runs Django's system checks, then serves config.asgi:application with
uvicorn on HOST:PORT. Errors reported by the checks (for example a missing
PAYMENT_PROVIDER_SECRET_KEY) stop the process before it binds the port.

Usage:
    checkout-server
    python -m config.server
"""

from __future__ import annotations

import logging
import os

import django
import uvicorn
from django.conf import settings
from django.core.management import call_command

logger = logging.getLogger(__name__)


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    django.setup()

    # Raises SystemCheckError on any error-level check
    call_command("check")

    logger.info(
        f"Checkout server listening on port {settings.PORT}",
        extra={"host": settings.HOST, "port": settings.PORT},
    )

    # Logging is already configured from settings.LOGGING
    uvicorn.run(
        "config.asgi:application",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
