from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from opensearchpy.exceptions import OpenSearchException

from search_server.app.api.routers import health, search
from search_server.app.api.deps import build_opensearch
from search_server.app.adapters.indexers.opensearch_indexer import OpenSearchIndexer
from search_server.app.platform.config import settings
from search_server.app.platform.logging import setup_logging
from search_server.app.platform.errors import register_exception_handlers
from search_server.app.middlewares.request_context import RequestContextMiddleware

logger = logging.getLogger(__name__)


def _probe_opensearch(app: FastAPI) -> None:
    """
    기동 시 OpenSearch 버전 확인 + 첨부 pipeline 준비.
    실패해도 서버는 뜨고, 요청 시점에 다시 에러가 드러난다.
    """
    client = app.state.opensearch
    try:
        info = client.info()
        logger.info("OpenSearch OK %s", info.get("version", {}).get("number"))
        if settings.OPENSEARCH_ENSURE_PIPELINE:
            OpenSearchIndexer(
                client,
                settings.OPENSEARCH_INDEX,
                settings.OPENSEARCH_PIPELINE).ensure_pipeline()
    except OpenSearchException:
        logger.warning("OpenSearch not ready at startup", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        log_to_file=settings.LOG_TO_FILE,
        log_dir=settings.LOG_DIR,
        as_json=settings.LOG_AS_JSON,
        level=settings.LOG_LEVEL,
    )

    # OpenSearch 클라이언트를 한 번만 생성해서 공유
    app.state.opensearch = build_opensearch(settings)
    _probe_opensearch(app)
    try:
        yield
    finally:
        app.state.opensearch.close()

app = FastAPI(title="Document Search API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(search.router)

# Global Exception Filter
register_exception_handlers(app)

# 요청 컨텍스트/액세스 로그 미들웨어
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
