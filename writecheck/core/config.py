from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Student English Checker"
    environment: str = "dev"
    log_level: str = "INFO"

    # Lokal reicht SQLite; für Postgres o.ä. via Env-Var DATABASE_URL überschreiben
    database_url: str = "sqlite:///./writecheck.db"

    # "openai" für echte Calls, "fake" für Demo/Offline-Betrieb
    llm_provider: str = "openai"
    openai_model: str = "gpt-5-nano"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 2000
    quick_check_max_tokens: int = 500

    cors_origins: list[str] = ["*"]


settings = Settings()
