import logging
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from storefront.core.dependencies import get_category_service
from storefront.core.logging_config import (
    TRACE_LEVEL,
    LogLevelFilter,
    _parse_allowed_levels,
    _resolve_level,
)
from storefront.main import app
from storefront.services.category_service import CategoryService


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unexpected_errors_become_generic_500(client):
    service = MagicMock(spec=CategoryService)
    service.get_categories.side_effect = RuntimeError("database exploded")
    app.dependency_overrides[get_category_service] = lambda: service

    response = TestClient(app, raise_server_exceptions=False).get("/api/categories")

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_SERVER_ERROR"
    assert "exploded" not in response.text


def test_allowed_levels_parsing():
    assert _parse_allowed_levels("trace, error") == {TRACE_LEVEL, logging.ERROR}
    assert _parse_allowed_levels("bogus") == _parse_allowed_levels(None)


def test_resolve_level():
    assert _resolve_level("trace") == TRACE_LEVEL
    assert _resolve_level("warning") == logging.WARNING
    assert _resolve_level(None) == logging.INFO


def test_level_filter():
    level_filter = LogLevelFilter({logging.ERROR})
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", (), None)

    assert level_filter.filter(record) is False
    record.levelno = logging.ERROR
    assert level_filter.filter(record) is True
