from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SEARCH_API_URL: str = "http://localhost:3000"
    # 입력이 멈춘 뒤 검색을 보낼 때까지 기다리는 시간(초)
    SEARCH_DEBOUNCE_SECONDS: float = 0.3
    SEARCH_HTTP_TIMEOUT: float = 30.0

client_settings = ClientSettings()
