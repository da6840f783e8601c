from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(3001)
    DEBUG: bool = Field(True)
    LOG_LEVEL: str = Field("INFO")

    # CORS
    FRONTEND_URL: str = Field("http://localhost:5173")
    CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://localhost:5174",
            "http://localhost:3000",
        ]
    )

    # Translation
    TRANSLATIONS_FILE: str | None = Field(None)
    TRANSLATION_TIMEOUT_SEC: float = Field(5.0)

    # Chat
    TYPING_INDICATOR_TIMEOUT_SEC: float = Field(3.0)

    # Metrics
    METRICS_ENABLED: bool = Field(False)
    METRICS_PORT: int = Field(8001)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @property
    def allowed_origins(self) -> list[str]:
        origins = list(self.CORS_ORIGINS)
        if self.FRONTEND_URL and self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL)
        return origins


settings = Settings()
