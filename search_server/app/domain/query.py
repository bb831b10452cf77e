"""
사용자 검색어를 OpenSearch 검색 요청 바디로 변환한다.
"""

from __future__ import annotations

from typing import Any, Dict

ALL_FIELDS = ["*"]
DEFAULT_OPERATOR = "and"


def build_query_container(text: str) -> Dict[str, Any]:
    """
    검색어가 비어 있거나 공백뿐이면 match_all,
    아니면 전체 필드 대상 simple_query_string(AND) 을 만든다.
    검색어는 이스케이프 없이 그대로 넘긴다.
    """
    if not text or not text.strip():
        return {"match_all": {}}
    return {
        "simple_query_string": {
            "query": text,
            "fields": list(ALL_FIELDS),
            "default_operator": DEFAULT_OPERATOR,
        }
    }


def translate_query(text: str, offset: int, limit: int) -> Dict[str, Any]:
    """
    검색 요청 바디를 구성한다.

    Args:
        text (str): 검색어
        offset (int): 가드를 통과한 from
        limit (int): 가드를 통과한 size
    Returns:
        Dict[str, Any]: 검색 요청 바디 (정렬 지정 없음)
    """
    return {
        "from": offset,
        "size": limit,
        "query": build_query_container(text),
    }
