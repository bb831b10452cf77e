import sys
from pathlib import Path

# 프로젝트 루트 경로를 sys.path에 추가 (…/<project-root>)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient
from search_server.app.main import app

@pytest.fixture
def client():
    # lifespan 을 돌리지 않으므로 실제 OpenSearch 연결은 생기지 않는다
    return TestClient(app, raise_server_exceptions=False)
