"""
Tests for view decorators.
"""

from __future__ import annotations

import logging

from asgiref.sync import async_to_sync, iscoroutinefunction
from django.http import HttpResponse

from core.decorators import log_request


class TestLogRequest:
    """Tests for request/response logging on sync and async views."""

    def test_sync_view(self, rf, caplog):
        @log_request(logger_name="tests.views")
        def view(request):
            return HttpResponse(status=201)

        with caplog.at_level(logging.DEBUG, logger="tests.views"):
            response = view(rf.get("/thing"))

        assert response.status_code == 201
        assert "Request: GET /thing" in caplog.text
        assert "Response: 201 for GET /thing" in caplog.text

    def test_async_view_stays_async(self, rf, caplog):
        @log_request(logger_name="tests.views")
        async def view(request):
            return HttpResponse(status=202)

        assert iscoroutinefunction(view)

        with caplog.at_level(logging.DEBUG, logger="tests.views"):
            response = async_to_sync(view)(rf.post("/thing"))

        assert response.status_code == 202
        assert "Response: 202 for POST /thing" in caplog.text

    def test_defaults_to_view_module_logger(self, rf, caplog):
        @log_request()
        def view(request):
            return HttpResponse()

        with caplog.at_level(logging.DEBUG, logger=__name__):
            view(rf.get("/thing"))

        assert any(record.name == __name__ for record in caplog.records)

    def test_preserves_metadata(self):
        def view(request):
            """Docstring."""

        wrapped = log_request()(view)

        assert wrapped.__name__ == "view"
        assert wrapped.__doc__ == "Docstring."
