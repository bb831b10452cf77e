import textwrap

from search_server.app.platform.config import Settings


def test_default_settings(monkeypatch, tmp_path):
    """기본값이 올바르게 설정되는지 검증"""
    monkeypatch.chdir(tmp_path)  # 작업 디렉터리의 .env 영향 제거
    s = Settings()
    assert s.APP_NAME == "doc-search-api"
    assert s.DEBUG is False
    assert s.OPENSEARCH_HOST.startswith("https://")
    assert s.OPENSEARCH_INDEX == "documents"
    assert s.OPENSEARCH_PIPELINE == "attachments"
    assert s.SEARCH_DEFAULT_SIZE == 50
    assert s.SEARCH_MAX_SIZE == 100


def test_override_with_env(monkeypatch):
    """환경변수로 설정값이 덮어써지는지 검증"""
    monkeypatch.setenv("APP_NAME", "custom-app")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("OPENSEARCH_HOST", "http://test:9999")
    monkeypatch.setenv("SEARCH_MAX_SIZE", "20")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')

    s = Settings()
    assert s.APP_NAME == "custom-app"
    assert s.DEBUG is True
    assert s.OPENSEARCH_HOST == "http://test:9999"
    assert s.SEARCH_MAX_SIZE == 20
    assert s.CORS_ORIGINS == ["http://localhost:5173"]


def test_env_file_loading(tmp_path):
    """env 파일에서 로딩되는지 검증"""
    env_file = tmp_path / ".env"
    env_file.write_text(textwrap.dedent("""
        APP_NAME=env-app
        DEBUG=true
        OPENSEARCH_HOST=http://env:1234
        OPENSEARCH_INDEX=papers
    """))

    s = Settings(_env_file=env_file)
    assert s.APP_NAME == "env-app"
    assert s.DEBUG is True
    assert s.OPENSEARCH_HOST == "http://env:1234"
    assert s.OPENSEARCH_INDEX == "papers"
