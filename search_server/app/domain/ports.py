"""
도메인 포트(추상 인터페이스).

애플리케이션 서비스(유스케이스)는 아래 포트들(추상)에만 의존합니다.
구체 구현은 adapters 레이어에서 제공하고, FastAPI DI로 주입합니다.
"""

from __future__ import annotations

from typing import Any, Protocol
from .models import JSONDict


class SearchPort(Protocol):
    """
    검색을 수행합니다.
    """
    def search(self, text: str, offset: int, limit: int) -> list[JSONDict]:
        """
        Returns:
            list[JSONDict]: 검색 hit 목록
        """
        ...


class IngestPort(Protocol):
    """
    문서 1건을 스토리지 엔진에 적재/삭제합니다.
    """
    def index_document(self, doc_id: str, source: JSONDict, with_attachment: bool) -> Any:
        """
        Args:
            doc_id: 확정된 문서 ID
            source: `_source` 로 저장할 본문
            with_attachment: 첨부 추출 파이프라인 경유 여부
        """
        ...

    def delete_index(self) -> Any:
        """
        Returns:
            Any: 스토리지 엔진의 원본 응답
        """
        ...
