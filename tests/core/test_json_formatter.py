import json
import logging
import sys

from core.logging import JSONFormatter


def _record(**kwargs):
    record = logging.LogRecord("hr360", logging.INFO, __file__, 10, "Report %s submitted", ("r-1",), None)
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_formats_single_json_line():
    line = JSONFormatter().format(_record())

    payload = json.loads(line)
    assert payload["level"] == "INFO"
    assert payload["logger"] == "hr360"
    assert payload["message"] == "Report r-1 submitted"
    assert "\n" not in line


def test_extra_attributes_are_merged():
    payload = json.loads(JSONFormatter().format(_record(report_id="r-1", user_id=7)))

    assert payload["report_id"] == "r-1"
    assert payload["user_id"] == 7


def test_exception_info_is_included():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("hr360", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]
