from types import SimpleNamespace

import pytest

from search_server.app.domain import utils
from search_server.app.domain.utils import (
    guard_pagination, parse_or_zero, assign_document_id, MAX_PAGE_SIZE
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        (" 7abc", 7),
        ("-5", -5),
        ("+3", 3),
        ("abc", 0),
        ("", 0),
        (None, 0),
        (42, 42),
    ],
)
def test_parse_or_zero(raw, expected):
    """
    앞부분 정수만 읽고, 숫자가 아니면 0
    """
    assert parse_or_zero(raw) == expected


def test_guard_defaults_when_absent():
    assert guard_pagination() == (0, 50)
    assert guard_pagination(None, None) == (0, 50)


def test_guard_clamps_negative_offset_and_large_limit():
    """
    guard("-5", "9999") -> (0, 100)
    """
    assert guard_pagination("-5", "9999") == (0, 100)


def test_guard_non_numeric_is_coerced_to_zero():
    """
    숫자가 아닌 값은 예외 없이 0
    """
    assert guard_pagination("abc", "xyz") == (0, 0)


def test_guard_limit_has_no_lower_bound():
    assert guard_pagination("0", "0") == (0, 0)
    assert guard_pagination("0", "-3") == (0, -3)


@pytest.mark.parametrize("raw", ["-100", "-1", "0", "1", "17", "10000", "x", " 25 "])
def test_guard_offset_formula(raw):
    offset, _ = guard_pagination(raw, "10")
    assert offset == max(parse_or_zero(raw), 0)


@pytest.mark.parametrize("raw", ["-100", "0", "1", "99", "100", "101", "9999", "x"])
def test_guard_limit_formula(raw):
    _, limit = guard_pagination("0", raw)
    assert limit == min(parse_or_zero(raw), MAX_PAGE_SIZE)


def test_guard_custom_bounds():
    assert guard_pagination(None, None, default_limit=10, max_limit=20) == (0, 10)
    assert guard_pagination("3", "50", default_limit=10, max_limit=20) == (3, 20)


def test_assign_keeps_given_id():
    """
    비어있지 않은 ID 는 그대로 반환
    """
    assert assign_document_id("doc-1") == "doc-1"
    assert assign_document_id(assign_document_id("doc-1")) == "doc-1"


@pytest.mark.parametrize("missing", [None, ""])
def test_assign_generates_id_when_missing(missing):
    doc_id = assign_document_id(missing)
    assert doc_id
    assert doc_id.isdigit()


def test_assign_generates_distinct_ids():
    """
    연속 10,000번 발급해도 중복이 없어야 한다
    """
    ids = [assign_document_id(None) for _ in range(10_000)]
    assert len(set(ids)) == 10_000


def test_assign_is_monotonic_even_if_clock_stalls(monkeypatch):
    """
    시계가 멈춰 있어도(같은 나노초) ID는 증가
    """
    monkeypatch.setattr(utils, "time", SimpleNamespace(time_ns=lambda: 1_000))
    monkeypatch.setattr(utils, "_last_issued", 0)

    first = int(assign_document_id())
    second = int(assign_document_id())
    third = int(assign_document_id())

    assert first == 1_000
    assert second == 1_001
    assert third == 1_002
