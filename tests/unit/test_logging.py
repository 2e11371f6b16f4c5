"""Unit tests for the shared logging setup."""

import json
import logging

import pytest
from libs.common.logging import JsonFormatter, ServiceFilter


@pytest.mark.unit
def test_json_formatter_includes_service_and_message():
    record = logging.LogRecord(
        name="services.volunteer_service.services.clock",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Volunteer %s clocked in",
        args=("abc",),
        exc_info=None,
    )
    ServiceFilter("volunteer_service").filter(record)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["service"] == "volunteer_service"
    assert payload["level"] == "INFO"
    assert payload["message"] == "Volunteer abc clocked in"
    assert "exception" not in payload
