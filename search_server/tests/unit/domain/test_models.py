import pytest
from pydantic import ValidationError

from search_server.app.domain.models import IndexableDocument, IndexedResult


def test_indexable_document_all_optional():
    d = IndexableDocument()
    assert d.id is None
    assert d.has_attachment is False
    assert d.to_source() == {}


def test_indexable_document_source_excludes_id_and_none():
    """
    _source 에는 id 와 None 필드가 빠진다
    """
    d = IndexableDocument(id="doc-1", title="report.pdf", data="JVBERi0=", tags=["a", "b"])
    src = d.to_source()

    assert src == {"title": "report.pdf", "data": "JVBERi0=", "tags": ["a", "b"]}
    assert d.has_attachment is True


def test_indexable_document_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        IndexableDocument(title="t", author="alice")


def test_indexable_document_rejects_empty_tags():
    with pytest.raises(ValidationError):
        IndexableDocument(tags=[])


def test_indexable_document_rejects_non_string_tags():
    with pytest.raises(ValidationError):
        IndexableDocument(tags=[1, 2])


def test_indexed_result_requires_non_empty_id():
    assert IndexedResult(id="x").id == "x"
    with pytest.raises(ValidationError):
        IndexedResult(id="")

