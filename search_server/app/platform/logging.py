# search_server/app/platform/logging.py
import json
import logging
import logging.config
import os
from contextvars import ContextVar
from datetime import datetime, timezone

# 요청 단위 추적 ID (RequestContextMiddleware 가 세팅)
request_id_ctx = ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get()
        return True


class JsonFormatter(logging.Formatter):
    """
    한 줄짜리 JSON 로그.
    검색/색인 로그의 extra(query, doc_id 등)와
    access 로그의 extra(status_code, duration_ms 등)는 값이 있을 때만 붙는다.
    """
    EXTRA_FIELDS = (
        "http_method", "path", "query_string", "status_code",
        "client_ip", "duration_ms",
        "query", "offset", "limit", "doc_id", "index",
    )

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        line = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "-"),
            "message": record.getMessage(),
        }
        line.update({
            name: getattr(record, name)
            for name in self.EXTRA_FIELDS
            if getattr(record, name, None) is not None
        })
        if record.exc_info:
            line["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


TEXT_FORMATS = {
    "app": "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s",
    "access": "%(asctime)s %(levelname)s [access] [%(request_id)s] %(message)s",
}

# 로거 이름 → 출력 채널
CHANNEL_LOGGERS = {
    "": "app",
    "uvicorn.error": "app",
    "uvicorn.access": "access",
}


def _channel_handlers(channel: str, formatter: str, level: str, log_dir: str | None) -> dict:
    """채널 하나(app/access)에 붙는 콘솔(+파일) 핸들러 설정."""
    common = {"level": level, "formatter": formatter, "filters": ["request_id"]}
    handlers = {f"{channel}_console": {"class": "logging.StreamHandler", **common}}
    if log_dir:
        handlers[f"{channel}_file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(log_dir, f"{channel}.log"),
            "when": "midnight",
            "backupCount": 14,
            "encoding": "utf-8",
            **common,
        }
    return handlers


def setup_logging(
    *,
    log_to_file: bool = False,
    log_dir: str = "/var/log/app",
    as_json: bool = True,
    level: str = "INFO",
) -> None:
    """
    root / uvicorn.error 는 app 채널, uvicorn.access 는 access 채널로 보낸다.
    uvicorn.* 는 root 로 전파하지 않아 중복 출력이 없다.
    """
    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)

    handlers: dict[str, dict] = {}
    by_channel: dict[str, list[str]] = {}
    for channel in TEXT_FORMATS:
        formatter = "json" if as_json else f"text_{channel}"
        built = _channel_handlers(channel, formatter, level, log_dir if log_to_file else None)
        handlers.update(built)
        by_channel[channel] = list(built)

    loggers = {
        name: {"handlers": by_channel[channel], "level": level, "propagate": False}
        for name, channel in CHANNEL_LOGGERS.items()
    }
    # opensearch-py 는 요청마다 INFO 로그를 남긴다
    loggers["opensearch"] = {"level": "WARNING"}

    formatters: dict[str, dict] = {"json": {"()": JsonFormatter}}
    formatters.update({f"text_{ch}": {"format": fmt} for ch, fmt in TEXT_FORMATS.items()})

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": RequestIDFilter}},
        "formatters": formatters,
        "handlers": handlers,
        "loggers": loggers,
    })
