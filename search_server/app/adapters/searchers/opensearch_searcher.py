"""
사용자 검색 쿼리를 받아 검색하는 SearchPort 구현체.
"""

from __future__ import annotations

from typing import Any, Dict, List
from opensearchpy import OpenSearch
from search_server.app.domain.ports import SearchPort
from search_server.app.domain.query import translate_query

class OpenSearchSearcher(SearchPort):

    def __init__(self, client: OpenSearch, index_name: str) -> None:
        self.client = client
        self.index_name = index_name

    def search(self, text: str, offset: int = 0, limit: int = 50) -> List[Dict[str, Any]]:
        """
        Opensearch에 검색을 수행하여 hit 목록을 반환한다.

        Args:
            text (str): 검색어 (빈 값이면 match_all)
            offset (int): 시작 위치
            limit (int): 가져올 문서 개수
        Returns:
            List[Dict[str, Any]]: hits.hits (각 hit 은 _id, _source 등 포함)
        """
        body = translate_query(text, offset, limit)
        response = self.client.search(index=self.index_name, body=body)
        return response["hits"]["hits"]
