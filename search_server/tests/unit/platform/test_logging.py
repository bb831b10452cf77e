import json
import logging

from search_server.app.platform.logging import JsonFormatter, RequestIDFilter, request_id_ctx


def _record(msg="hello", **extra):
    record = logging.LogRecord("search", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_known_extras_only():
    record = _record(query="pdf", offset=0, limit=50, unrelated="x")
    record.request_id = "r-1"

    line = json.loads(JsonFormatter().format(record))

    assert line["message"] == "hello"
    assert line["level"] == "INFO"
    assert line["request_id"] == "r-1"
    assert line["query"] == "pdf"
    assert line["offset"] == 0
    assert line["limit"] == 50
    assert "unrelated" not in line
    assert "doc_id" not in line


def test_request_id_filter_reads_context():
    token = request_id_ctx.set("abc")
    try:
        record = _record()
        assert RequestIDFilter().filter(record) is True
    finally:
        request_id_ctx.reset(token)

    assert record.request_id == "abc"
