import pytest

from search_server.app.platform import exceptions as domainex
from search_server.app.platform.errors import error_envelope, resolve_domain_error
from search_server.app.platform.logging import request_id_ctx


@pytest.mark.parametrize("exc, expected", [
    (domainex.ResourceNotFound("index", "documents"), (404, "NOT_FOUND")),
    (domainex.IngestionError("documents", "d1", "boom"), (502, "INGESTION_FAILED")),
    (domainex.IndexDeletionFailed("documents", "boom"), (502, "INDEX_DELETION_FAILED")),
    (domainex.DomainError("other"), (400, "SERVICE_ERROR")),
])
def test_resolve_domain_error(exc, expected):
    assert resolve_domain_error(exc) == expected


def test_error_envelope_carries_request_id():
    token = request_id_ctx.set("req-123")
    try:
        body = error_envelope("nope", code="NOT_FOUND")
    finally:
        request_id_ctx.reset(token)

    assert body == {
        "success": False,
        "error": {"code": "NOT_FOUND", "message": "nope", "details": None},
        "trace_id": "req-123",
    }
