from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "doc-search-api"
    DEBUG: bool = False

    # OpenSearch 접속 정보
    OPENSEARCH_HOST: str = "https://localhost:9200"
    OPENSEARCH_USER: str | None = "admin"
    OPENSEARCH_PASSWORD: str | None = None
    OPENSEARCH_VERIFY_CERTS: bool = False
    OPENSEARCH_INDEX: str = "documents"
    OPENSEARCH_PIPELINE: str = "attachments"
    OPENSEARCH_ENSURE_PIPELINE: bool = True

    # 검색 페이지 크기
    SEARCH_DEFAULT_SIZE: int = Field(50, ge=0)
    SEARCH_MAX_SIZE: int = Field(100, ge=0)

    CORS_ORIGINS: list[str] = ["*"]

    # 로깅
    LOG_LEVEL: str = "INFO"
    LOG_AS_JSON: bool = True
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "/var/log/app"

settings = Settings()
