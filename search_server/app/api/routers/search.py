from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from typing import Any, Dict, List
from search_server.app.api.deps import (
    get_search_service, get_ingest_service, SearchService, IngestService
)
from search_server.app.domain.models import IndexableDocument
import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])

class IndexResponse(BaseModel):
    """
    문서 색인 응답
    """
    indexed: str = Field(..., description="확정된 문서 ID")

@router.get(
    "",
    summary="문서 검색",
    description=(
        "검색어로 문서를 검색합니다. 검색어가 비어 있으면 전체 문서를 반환합니다. "
        "`from`/`size`로 페이지를 지정합니다(`size` 최대 100). "
        "검색 중 오류가 나면 빈 배열을 반환합니다."
    ),
    operation_id="searchDocuments",
    status_code=200,
    response_model=List[Dict[str, Any]],
    responses={
        200: {
            "description": "검색 성공",
            "content": {
                "application/json": {
                    "examples": {
                        "basic": {
                            "summary": "기본 검색 예시",
                            "value": [
                                {
                                    "_index": "documents",
                                    "_id": "1760870000000000000",
                                    "_score": 2.13,
                                    "_source": {"title": "report.pdf"},
                                }
                            ]
                        }
                    }
                }
            },
        },
    },
)
def search(
    q: str = Query("", description="검색 쿼리"),
    from_: str | None = Query(None, alias="from", description="시작 위치(기본 0)"),
    size: str | None = Query(None, description="검색 결과 개수(기본 50, 최대 100)"),
    svc: SearchService = Depends(get_search_service),
):
    try:
        return svc.search(query=q, offset=from_, limit=size)
    except Exception:
        # 검색 실패는 사용자에게 빈 결과로 보인다
        logger.exception("Search error", extra={"query": q})
        return []

@router.post(
    "/index",
    summary="문서 색인",
    description=(
        "문서 1건을 색인합니다. `id`가 없으면 서버가 발급합니다. "
        "`data`(base64)가 있으면 첨부 추출 pipeline 을 거쳐 본문을 추출합니다. "
        "응답 시점에 이미 검색 가능합니다."
    ),
    operation_id="indexDocument",
    status_code=200,
    response_model=IndexResponse,
    responses={
        200: {
            "description": "문서 색인 성공",
            "content": {
                "application/json": {
                    "example": {"indexed": "1760870000000000000"}
                }
            },
        },
        422: {"description": "잘못된 요청 바디"},
        502: {"description": "스토리지 엔진 색인 실패"},
    },
)
def index_document(doc: IndexableDocument, svc: IngestService = Depends(get_ingest_service)):
    logger.info("IndexRequest: id=%s title=%s", doc.id, doc.title)
    result = svc.ingest(doc)
    return IndexResponse(indexed=result.id)

@router.delete(
    "/index",
    summary="인덱스 삭제",
    description="문서 인덱스 전체를 삭제하고 OpenSearch 응답을 그대로 반환합니다.",
    operation_id="deleteIndex",
    status_code=200,
    responses={
        200: {
            "description": "삭제 성공",
            "content": {"application/json": {"example": {"acknowledged": True}}},
        },
        404: {"description": "인덱스 없음"},
        502: {"description": "스토리지 엔진 삭제 실패"},
    },
)
def delete_index(svc: IngestService = Depends(get_ingest_service)):
    return svc.clear()
