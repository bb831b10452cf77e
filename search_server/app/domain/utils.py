"""
유틸리티 함수.

- 페이지네이션 가드: from/size 문자열을 정수로 바꾸고 범위를 보정
- 문서 ID 발급: 호출자가 준 ID가 없으면 시간 기반 ID 생성
"""

import re
import threading
import time

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_or_zero(raw: str | int | None) -> int:
    """
    문자열 앞부분의 정수를 읽는다. 숫자가 아니면 0.
    Args:
        raw: str | int | None (예: "12", " 7abc", "-5", "abc")
    Returns:
        int: 파싱 결과
    """
    if raw is None:
        return 0
    if isinstance(raw, int):
        return raw
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else 0


def guard_pagination(
    raw_offset: str | int | None = None,
    raw_limit: str | int | None = None,
    *,
    default_limit: int = DEFAULT_PAGE_SIZE,
    max_limit: int = MAX_PAGE_SIZE,
) -> tuple[int, int]:
    """
    from/size 값을 보정하는 함수. 잘못된 값은 예외 없이 0으로 간주한다.
    Args:
        raw_offset: 요청의 from (없으면 0)
        raw_limit: 요청의 size (없으면 default_limit)
    Returns:
        tuple[int, int]: (offset, limit)
            offset = max(offset, 0)
            limit  = min(limit, max_limit)  (하한 없음)
    """
    offset = 0 if raw_offset is None else parse_or_zero(raw_offset)
    limit = default_limit if raw_limit is None else parse_or_zero(raw_limit)
    return max(offset, 0), min(limit, max_limit)


# ===== 문서 ID =====
_id_lock = threading.Lock()
_last_issued = 0


def _next_time_id() -> str:
    global _last_issued
    with _id_lock:
        # 같은 나노초(또는 시계 역행)에 걸려도 단조 증가
        now = max(time.time_ns(), _last_issued + 1)
        _last_issued = now
    return str(now)


def assign_document_id(optional_id: str | None = None) -> str:
    """
    문서 ID를 확정하는 함수.
    Args:
        optional_id: 호출자가 지정한 ID
    Returns:
        str: 비어있지 않으면 그대로, 아니면 시간 기반 ID
    """
    if optional_id:
        return optional_id
    return _next_time_id()
