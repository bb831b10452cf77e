import pytest

from search_server.app.domain.query import translate_query, build_query_container


@pytest.mark.parametrize("text", ["", " ", "   ", "\t\n"])
def test_blank_text_is_match_all(text):
    """
    빈 검색어/공백뿐인 검색어 -> match_all (정렬 지정 없음)
    """
    body = translate_query(text, 0, 50)

    assert body["query"] == {"match_all": {}}
    assert "sort" not in body


@pytest.mark.parametrize("text", ["cat", " cat ", "a b", "title:report", "\"exact phrase\""])
def test_non_blank_text_is_simple_query_string(text):
    body = translate_query(text, 0, 50)

    assert "match_all" not in body["query"]
    sqs = body["query"]["simple_query_string"]
    assert sqs["query"] == text


def test_cat_dog_requires_both_terms():
    """
    "cat dog" -> 모든 필드 대상, AND 결합
    """
    body = translate_query("cat dog", 0, 50)

    assert body["query"] == {
        "simple_query_string": {
            "query": "cat dog",
            "fields": ["*"],
            "default_operator": "and",
        }
    }


def test_pagination_passes_through():
    body = translate_query("cat", 20, 10)

    assert body["from"] == 20
    assert body["size"] == 10


def test_malformed_syntax_is_passed_verbatim():
    """
    이스케이프 없이 그대로 전달 (예외 없음)
    """
    text = "((cat | -\"dog"
    container = build_query_container(text)
    assert container["simple_query_string"]["query"] == text


def test_fields_list_is_not_shared_between_calls():
    a = build_query_container("cat")
    a["simple_query_string"]["fields"].append("title")
    b = build_query_container("dog")
    assert b["simple_query_string"]["fields"] == ["*"]
