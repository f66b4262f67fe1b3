"""Tests for the structlog helpers."""

import structlog

from pagelinks.core.logging import SERVICE_NAME, _add_service, bind_request_context


def test_bind_request_context_replaces_previous_request():
    bind_request_context("first", "/old")
    bind_request_context("req-1", "/v1/pagination")
    assert structlog.contextvars.get_contextvars() == {"request_id": "req-1", "path": "/v1/pagination"}
    structlog.contextvars.clear_contextvars()


def test_service_name_added_to_events():
    assert _add_service(None, "info", {"event": "x"}) == {"event": "x", "service": SERVICE_NAME}
    assert _add_service(None, "info", {"event": "x", "service": "other"})["service"] == "other"
