"""
SearchOrchestrator
==================

입력 중인 검색어를 debounce 한 뒤 한 번에 하나의 검색 요청만 유지하고,
항상 **가장 최근 검색어**의 결과만 상태에 반영한다.

Flow:
    set_query → (delay 동안 입력 없음) → 세대 토큰 발급 + 이전 요청 취소 → fetch
    → 완료 시 토큰이 여전히 현재 것일 때만 상태 반영

- 세대 토큰(generation)으로 최신 여부를 판단한다. 네트워크 완료 순서와 무관하게
  늦게 도착한 이전 결과는 버린다.
- 밀려난 요청은 task 를 cancel 해서 실제 HTTP 요청도 끊는다.
- 취소(asyncio.CancelledError)는 에러로 보지 않는다.
- 그 밖의 실패는 error 에 메시지를 남기고, 이전 결과 목록은 그대로 둔다.

예시:
    async with SearchApiClient(url) as api:
        orch = SearchOrchestrator(api.search, on_change=render)
        orch.set_query("cat")
        orch.set_query("cat dog")
        await orch.settle()
        await orch.aclose()
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[List[Dict[str, Any]]]]


class SearchState(BaseModel):
    """UI 에 보여줄 검색 상태."""
    results: List[Dict[str, Any]] = Field(default_factory=list)
    error: str | None = None
    loading: bool = False


class SearchOrchestrator:

    def __init__(
        self,
        fetch: Fetch,
        *,
        delay: float = 0.3,
        on_change: Callable[[SearchState], None] | None = None,
    ) -> None:
        """
        Args:
            fetch: 검색어 → hit 목록 코루틴 함수
            delay: debounce 시간(초)
            on_change: 상태가 바뀔 때마다 호출되는 콜백(상태 사본 전달)
        """
        self._fetch = fetch
        self._delay = delay
        self._on_change = on_change
        self.state = SearchState()
        self._query = ""
        self._generation = 0
        self._timer: asyncio.Task | None = None
        self._inflight: asyncio.Task | None = None
        self._closed = False

    async def __aenter__(self) -> "SearchOrchestrator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def query(self) -> str:
        return self._query

    @property
    def generation(self) -> int:
        return self._generation

    # ================= public API =================
    def set_query(self, text: str) -> None:
        """
        검색어 변경. 이벤트 루프 안에서 호출해야 한다.
        빈 검색어는 타이머 없이 즉시 결과/에러를 비우고 네트워크 호출을 하지 않는다.
        """
        if self._closed:
            raise RuntimeError("SearchOrchestrator is closed")
        self._query = text
        self._cancel_timer()
        if not text:
            self._supersede()
            self._update(results=[], error=None, loading=False)
            return
        self._timer = asyncio.get_running_loop().create_task(self._debounce(text))

    async def settle(self) -> SearchState:
        """대기 중인 타이머와 현재 요청이 모두 끝날 때까지 기다린다."""
        while True:
            pending = [t for t in (self._timer, self._inflight) if t is not None and not t.done()]
            if not pending:
                return self.state
            await asyncio.gather(*pending, return_exceptions=True)

    async def aclose(self) -> None:
        """타이머와 진행 중인 요청을 모두 취소한다. loading 은 False 로 남는다."""
        self._closed = True
        pending = [t for t in (self._timer, self._inflight) if t is not None and not t.done()]
        self._cancel_timer()
        self._supersede()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        if self.state.loading:
            self._update(loading=False)

    # ================= internal helpers =================
    async def _debounce(self, text: str) -> None:
        await asyncio.sleep(self._delay)
        self._timer = None
        self._submit(text)

    def _submit(self, text: str) -> None:
        token = self._supersede()
        self._update(loading=True)
        self._inflight = asyncio.get_running_loop().create_task(self._run(token, text))

    def _supersede(self) -> int:
        """새 세대 토큰을 발급하고 이전 요청을 취소한다."""
        self._generation += 1
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None
        return self._generation

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    def _is_current(self, token: int) -> bool:
        return token == self._generation

    async def _run(self, token: int, text: str) -> None:
        try:
            hits = await self._fetch(text)
        except asyncio.CancelledError:
            if self._is_current(token):
                self._update(loading=False)
            raise
        except Exception as e:
            if not self._is_current(token):
                logger.debug("discard stale failure: query=%s", text)
                return
            logger.warning("search failed: query=%s error=%s", text, e)
            self._update(error=str(e) or e.__class__.__name__, loading=False)
            return

        if not self._is_current(token):
            logger.debug("discard stale result: query=%s", text)
            return
        self._update(results=list(hits), error=None, loading=False)

    def _update(self, **changes: Any) -> None:
        for key, value in changes.items():
            setattr(self.state, key, value)
        if self._on_change is not None:
            self._on_change(self.state.model_copy(deep=True))
