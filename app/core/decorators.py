"""
Custom decorators for views.

This module provides generic infrastructure decorators for:
- Request/response logging

Both plain and coroutine views are supported, so the same decorator wraps
the async payment views and the sync health check.

Usage:
    from core.decorators import log_request

    @log_request()
    def health_view(request):
        ...

    path("webhook", log_request()(StripeWebhookView.as_view()))
"""

from __future__ import annotations

import functools
import logging
from typing import Callable

from asgiref.sync import iscoroutinefunction

logger = logging.getLogger(__name__)


def _log_incoming(log: logging.Logger, request) -> None:
    log.debug(
        f"Request: {request.method} {request.path}",
        extra={
            "method": request.method,
            "path": request.path,
            "remote_addr": request.META.get("REMOTE_ADDR"),
        },
    )


def _log_outgoing(log: logging.Logger, request, response) -> None:
    status_code = getattr(response, "status_code", "unknown")
    log.debug(
        f"Response: {status_code} for {request.method} {request.path}",
        extra={
            "status_code": status_code,
            "method": request.method,
            "path": request.path,
        },
    )


def log_request(logger_name: str | None = None):
    """
    Log request/response for debugging.

    Logs request method, path, client address, and response status.

    Args:
        logger_name: Optional logger name (defaults to view module)

    Returns:
        Decorator function

    Example:
        @log_request()
        def my_view(request):
            ...

        @log_request(logger_name="payments.views")
        async def api_view(request):
            ...
    """

    def decorator(func: Callable):
        log = logging.getLogger(logger_name or func.__module__)

        if iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(request, *args, **kwargs):
                _log_incoming(log, request)
                response = await func(request, *args, **kwargs)
                _log_outgoing(log, request, response)
                return response

            return async_wrapper

        @functools.wraps(func)
        def wrapper(request, *args, **kwargs):
            _log_incoming(log, request)
            response = func(request, *args, **kwargs)
            _log_outgoing(log, request, response)
            return response

        return wrapper

    return decorator
