from __future__ import annotations

import threading
from urllib.parse import urlparse

from fastapi import Depends, Request
from opensearchpy import OpenSearch

from search_server.app.domain.ports import SearchPort, IngestPort
from search_server.app.domain.services.search_service import SearchService
from search_server.app.domain.services.ingest_service import IngestService
from search_server.app.adapters.indexers.opensearch_indexer import OpenSearchIndexer
from search_server.app.adapters.searchers.opensearch_searcher import OpenSearchSearcher
from search_server.app.platform.config import Settings, settings

_client_lock = threading.Lock()


# ---- 클라이언트 ----
def build_opensearch(conf: Settings = settings) -> OpenSearch:
    """
    설정값으로 OpenSearch 클라이언트를 만든다.
    https 면 TLS, 인증서 검증 여부는 OPENSEARCH_VERIFY_CERTS 를 따른다.
    """
    u = urlparse(conf.OPENSEARCH_HOST)
    scheme = u.scheme or "http"
    http_auth = None
    if conf.OPENSEARCH_USER and conf.OPENSEARCH_PASSWORD:
        http_auth = (conf.OPENSEARCH_USER, conf.OPENSEARCH_PASSWORD)
    return OpenSearch(
        hosts=[{"host": u.hostname, "port": u.port or 9200, "scheme": scheme}],
        http_auth=http_auth,
        use_ssl=scheme == "https",
        verify_certs=conf.OPENSEARCH_VERIFY_CERTS,
        ssl_show_warn=conf.OPENSEARCH_VERIFY_CERTS,
    )


def get_opensearch(request: Request) -> OpenSearch:
    """
    앱 시작 시 main.py의 lifespan에서 만들어 넣어둔 OpenSearch 클라이언트를 꺼낸다.
    없으면(테스트 등) 즉석 생성해서 app.state 에 보관한다.
    """
    if not hasattr(request.app.state, "opensearch"):
        # 첫 요청들이 threadpool 에서 동시에 들어와도 클라이언트는 하나만 만든다
        with _client_lock:
            if not hasattr(request.app.state, "opensearch"):
                request.app.state.opensearch = build_opensearch()
    return request.app.state.opensearch


def get_indexer(os: OpenSearch = Depends(get_opensearch)) -> OpenSearchIndexer:
    return OpenSearchIndexer(os, settings.OPENSEARCH_INDEX, settings.OPENSEARCH_PIPELINE)


def get_search_service(os: OpenSearch = Depends(get_opensearch)) -> SearchService:
    """
    FastAPI DI에서 OpenSearch 클라이언트를 받아 SearchService를 생성해 주입한다.
    """
    searcher: SearchPort = OpenSearchSearcher(os, settings.OPENSEARCH_INDEX)
    return SearchService(
        searcher,
        default_limit=settings.SEARCH_DEFAULT_SIZE,
        max_limit=settings.SEARCH_MAX_SIZE)


def get_ingest_service(indexer: OpenSearchIndexer = Depends(get_indexer)) -> IngestService:
    """
    FastAPI DI에서 Indexer를 받아 IngestService를 생성해 주입한다.
    """
    port: IngestPort = indexer
    return IngestService(port, settings.OPENSEARCH_INDEX)
