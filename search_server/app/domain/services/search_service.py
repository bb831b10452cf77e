# search_server/app/domain/services/search_service.py
"""
SearchService
==============

검색 유스케이스.

Flow:
    (q, from, size) → Pagination Guard → Searcher(Query Translator → OpenSearch)

- 도메인은 **Port(인터페이스)** 에만 의존합니다. (DIP)
- 구현체는 adapters 레이어에서 주입(의존성 주입; DI)합니다.
- 스토리지 엔진 예외는 그대로 전파합니다. 빈 결과로 바꾸는 것은 HTTP 경계(router)의 몫.

예시:
    svc = SearchService(searcher)
    hits = svc.search(query="cat dog", offset="0", limit="20")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from search_server.app.domain.ports import SearchPort
from search_server.app.domain.utils import (
    guard_pagination, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
)

logger = logging.getLogger(__name__)

class SearchService:

    def __init__(
        self,
        searcher: SearchPort,
        default_limit: int = DEFAULT_PAGE_SIZE,
        max_limit: int = MAX_PAGE_SIZE) -> None:
        self._searcher = searcher
        self._default_limit = default_limit
        self._max_limit = max_limit

    # ================= public API =================
    def search(
        self,
        query: str = "",
        offset: str | int | None = None,
        limit: str | int | None = None) -> List[Dict[str, Any]]:
        """
        검색을 수행하는 메서드.
        Args:
            query: str             : 검색 쿼리 (빈 값이면 전체 문서)
            offset: str|int|None   : 요청 from (보정 전)
            limit: str|int|None    : 요청 size (보정 전)
        Returns:
            List[Dict[str, Any]]: 검색 hit 목록
        """
        from_, size = guard_pagination(
            offset, limit,
            default_limit=self._default_limit,
            max_limit=self._max_limit)
        logger.info(
            "service.search: query=%s from=%s size=%s", query, from_, size,
            extra={"query": query, "offset": from_, "limit": size})
        return self._searcher.search(query, from_, size)
