"""
검색 API(HTTP) 비동기 클라이언트.

- search: GET /search
- upload: 파일을 base64 로 인코딩해 POST /search/index
- clear:  DELETE /search/index
"""

from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Any, Dict, List

import httpx

from search_client.app.errors import TransportError

logger = logging.getLogger(__name__)


class SearchApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "SearchApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, endpoint: str, error_prefix: str = "", **kwargs) -> Any:
        """단일 호출 + 예외 처리 + 상태코드 체크"""
        try:
            r = await self._client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{error_prefix}{str(e) or e.__class__.__name__}") from e
        if r.is_error:
            reason = r.reason_phrase or f"HTTP {r.status_code}"
            raise TransportError(f"{error_prefix}{reason}", status_code=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            # 프록시 로그인 페이지 같은 2xx HTML 응답
            raise TransportError(
                f"{error_prefix}invalid JSON response", status_code=r.status_code) from e

    async def search(
        self,
        text: str,
        offset: int | None = None,
        limit: int | None = None) -> List[Dict[str, Any]]:
        """
        검색어로 hit 목록을 가져온다. from/size 를 안 주면 서버 기본값을 따른다.
        """
        params: Dict[str, Any] = {"q": text}
        if offset is not None:
            params["from"] = offset
        if limit is not None:
            params["size"] = limit
        return await self._request("GET", "/search", params=params)

    async def upload_bytes(self, data: bytes, title: str, **fields: Any) -> str:
        """
        바이너리를 base64 로 인코딩해 색인 요청한다.
        Returns:
            str: 서버가 확정한 문서 ID
        """
        payload = {"title": title, "data": base64.b64encode(data).decode("ascii"), **fields}
        body = await self._request(
            "POST", "/search/index", error_prefix="Upload failed: ", json=payload)
        logger.info("uploaded title=%s id=%s", title, body["indexed"])
        return body["indexed"]

    async def upload(self, path: str | Path, **fields: Any) -> str:
        """파일을 읽어 파일 이름을 제목으로 업로드한다."""
        p = Path(path)
        return await self.upload_bytes(p.read_bytes(), title=p.name, **fields)

    async def clear(self) -> Any:
        """문서 인덱스를 통째로 삭제한다."""
        return await self._request("DELETE", "/search/index")
