"""
Core views providing infrastructure endpoints.

This module contains views that are not part of the business domain but are
essential for running the service, such as health checks.
"""

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_GET


@require_GET
def health_check(request):
    """
    Health check endpoint for monitoring and orchestration.

    This endpoint is used by:
    - Docker health checks
    - Kubernetes liveness/readiness probes
    - Load balancers

    Returns:
        JsonResponse with status and component health:
        - status: "healthy" or "unhealthy"
        - payment_provider: "configured" or "missing"
        - webhook_verification: "signed", "unverified" or "disabled"

    HTTP Status Codes:
        200: Provider credentials present
        503: Provider secret key missing

    Example Response:
        {
            "status": "healthy",
            "payment_provider": "configured",
            "webhook_verification": "signed"
        }
    """
    is_healthy = bool(settings.PAYMENT_PROVIDER_SECRET_KEY)

    if settings.WEBHOOK_SIGNING_SECRET:
        webhook_verification = "signed"
    elif settings.WEBHOOK_ALLOW_UNVERIFIED:
        # Events are accepted without an authenticity check
        webhook_verification = "unverified"
    else:
        webhook_verification = "disabled"

    health_status = {
        "status": "healthy" if is_healthy else "unhealthy",
        "payment_provider": "configured" if is_healthy else "missing",
        "webhook_verification": webhook_verification,
    }

    status_code = 200 if is_healthy else 503

    return JsonResponse(health_status, status=status_code)
