# =============================================================================
# Django Project Configuration Package
# =============================================================================
# This package contains all Django configuration: settings, URLs, the
# ASGI/WSGI applications and the uvicorn server entry point.
# =============================================================================
