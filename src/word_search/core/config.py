from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True)
    API_BASE_URL: str = 'http://localhost:3001'
    HTTP_TIMEOUT: float = 30.0
    STREAM_CONNECT_TIMEOUT: float = 10.0
    LOG_LEVEL: str = 'WARNING'


settings = Settings()
