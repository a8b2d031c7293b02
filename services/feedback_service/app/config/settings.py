from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./feedback.db"
    PORT: int = 8001
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    DEFAULT_PAGE_LIMIT: int = 10
    # Hard ceiling on a single page, whatever the client asks for.
    MAX_PAGE_LIMIT: int = 100

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False

    HEALTH_MESSAGE: str = "Feedback API with FastAPI, SQLAlchemy and Postgres"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
