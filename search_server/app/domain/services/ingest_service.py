"""
IngestService
==============

문서 색인 유스케이스.

Flow:
    IndexableDocument → Identity Assigner → Indexer(attachment pipeline, refresh)

- 바이너리(data)가 있으면 OpenSearch ingest pipeline 에서 텍스트로 추출한다.
  클라이언트/서버 어느 쪽도 PDF 를 직접 파싱하지 않는다.
- 색인 직후 검색에 보이도록 refresh 를 요청한다.
- 실패는 재시도하지 않고 IngestionError 로 전파한다.
"""

from __future__ import annotations

import logging
from typing import Any

from opensearchpy.exceptions import NotFoundError, OpenSearchException

from search_server.app.domain.ports import IngestPort
from search_server.app.domain.models import IndexableDocument, IndexedResult
from search_server.app.domain.utils import assign_document_id
from search_server.app.platform.exceptions import (
    IngestionError, IndexDeletionFailed, ResourceNotFound
)

logger = logging.getLogger(__name__)


class IngestService:
    """업로드된 문서를 색인하는 유스케이스 서비스."""

    def __init__(self, indexer: IngestPort, index_name: str) -> None:
        """
        Args:
            indexer: IngestPort : 문서 적재 포트
            index_name: str     : 대상 인덱스 이름(로그/에러 메시지용)
        """
        self._indexer = indexer
        self._index_name = index_name

    # ================= public API =================
    def ingest(self, doc: IndexableDocument) -> IndexedResult:
        """
        문서 1건을 색인하는 메서드.
        Args:
            doc: IndexableDocument
        Returns:
            IndexedResult: 확정된 문서 ID
        Raises:
            IngestionError: 스토리지 엔진이 쓰기를 거부한 경우
        """
        doc_id = assign_document_id(doc.id)
        logger.info(
            "service.ingest: id=%s attachment=%s", doc_id, doc.has_attachment,
            extra={"doc_id": doc_id, "index": self._index_name})
        try:
            self._indexer.index_document(
                doc_id, doc.to_source(), with_attachment=doc.has_attachment)
        except OpenSearchException as e:
            logger.exception("Index error: id=%s", doc_id, extra={"doc_id": doc_id})
            raise IngestionError(self._index_name, doc_id, str(e)) from e
        return IndexedResult(id=doc_id)

    def clear(self) -> Any:
        """
        인덱스 전체를 삭제하는 메서드.
        Returns:
            Any: OpenSearch 원본 응답 바디
        """
        logger.info("service.clear: index=%s", self._index_name,
                    extra={"index": self._index_name})
        try:
            return self._indexer.delete_index()
        except NotFoundError as e:
            raise ResourceNotFound(f"index '{self._index_name}'") from e
        except OpenSearchException as e:
            logger.exception("Delete index error: index=%s", self._index_name)
            raise IndexDeletionFailed(self._index_name, str(e)) from e
