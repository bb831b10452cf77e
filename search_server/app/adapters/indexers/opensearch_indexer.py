"""
업로드 문서를 OpenSearch에 색인하는 IngestPort 구현체
"""

from __future__ import annotations
import json
import logging
import os
from typing import Any, Dict
from pathlib import Path
from opensearchpy import OpenSearch
from opensearchpy.exceptions import NotFoundError
from search_server.app.domain.ports import IngestPort

logger = logging.getLogger(__name__)

class OpenSearchIndexer(IngestPort):

    def __init__(self, client: OpenSearch, index_name: str, pipeline_name: str) -> None:
        self.client = client
        self.index_name = index_name
        self.pipeline_name = pipeline_name

    def _load_pipeline_definition(self) -> Dict[str, Any]:
        """
            첨부 추출 ingest pipeline 정의를 JSON 파일에서 로드한다.
        """
        root_dir = Path(os.path.dirname(__file__)).resolve().parents[1]
        pipeline_path = root_dir / "resources/pipeline/attachments.json"
        with open(pipeline_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def ensure_pipeline(self) -> bool:
        """
            첨부 추출 pipeline 이 없으면 생성한다.

            Returns:
                bool: 새로 생성했으면 True, 이미 있으면 False
        """
        try:
            self.client.ingest.get_pipeline(id=self.pipeline_name)
            logger.info("Pipeline '%s' already exists.", self.pipeline_name)
            return False
        except NotFoundError:
            pass

        self.client.ingest.put_pipeline(
            id=self.pipeline_name, body=self._load_pipeline_definition())
        logger.info("Pipeline '%s' created successfully.", self.pipeline_name)
        return True

    def index_document(
        self,
        doc_id: str,
        source: Dict[str, Any],
        with_attachment: bool = False) -> Dict[str, Any]:
        """
            문서 1건을 색인한다.

            - 바이너리가 있으면 첨부 추출 pipeline 을 거친다.
            - refresh=true 로 색인 직후 검색 가능하게 한다.

            Args:
                doc_id: 문서 ID
                source: `_source` 본문
                with_attachment: pipeline 경유 여부
            Returns:
                OpenSearch index 응답
        """
        params: Dict[str, Any] = {"refresh": "true"}
        if with_attachment:
            params["pipeline"] = self.pipeline_name
        return self.client.index(
            index=self.index_name,
            id=doc_id,
            body=source,
            **params,
        )

    def delete_index(self) -> Dict[str, Any]:
        """
            인덱스를 통째로 삭제한다.

            Returns:
                OpenSearch 원본 응답 (ex. {"acknowledged": true})
        """
        return self.client.indices.delete(index=self.index_name)
