"""
도메인 모델 정의.

- IndexableDocument: 업로드된 색인 대상 문서(메타 + 선택적 base64 바이너리)
- IndexedResult: 색인 결과(확정된 문서 ID)

Pydantic v2 기반 모델이라 검증/직렬화가 용이합니다.
"""

from __future__ import annotations

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


JSONDict = dict[str, Any]


class IndexableDocument(BaseModel):
    """
    색인 요청 바디와 1:1로 매핑되는 모델.
    선언되지 않은 필드가 들어오면 422로 거절한다.
    """
    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(None, description="문서 ID(없으면 서버가 발급)")
    title: str | None = Field(None, description="문서 제목")
    body: str | None = Field(None, description="본문 텍스트")
    tags: list[str] | None = Field(None, min_length=1, description="태그 목록(지정 시 1개 이상)")
    data: str | None = Field(None, description="base64 인코딩된 바이너리(PDF 등)")
    published: str | None = Field(None, description="게시일")

    @property
    def has_attachment(self) -> bool:
        return bool(self.data)

    def to_source(self) -> JSONDict:
        """OpenSearch `_source` 로 저장할 본문. id 는 메타 필드로 따로 쓴다."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


class IndexedResult(BaseModel):
    """색인 실행 결과."""
    id: str = Field(..., min_length=1, description="확정된 문서 ID")

