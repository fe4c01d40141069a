from __future__ import annotations

import json
import logging

from letter_api.core.logging import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="letter_api.letters",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Letter generation failed",
        args=(),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_formatter_emits_json_with_extra_fields() -> None:
    line = JsonFormatter().format(
        _record(request_id="req-1", operation="letter", error_kind="UpstreamTimeout")
    )

    payload = json.loads(line)
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "letter_api.letters"
    assert payload["message"] == "Letter generation failed"
    assert payload["request_id"] == "req-1"
    assert payload["operation"] == "letter"
    assert payload["error_kind"] == "UpstreamTimeout"
    assert payload["timestamp"].endswith("+00:00")


def test_formatter_tolerates_missing_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload["request_id"] is None
    assert payload["status_code"] is None
    assert "exception" not in payload


def test_formatter_maps_http_aliases() -> None:
    payload = json.loads(
        JsonFormatter().format(_record(http_method="POST", request_path="/generateLetter"))
    )

    assert payload["method"] == "POST"
    assert payload["path"] == "/generateLetter"
