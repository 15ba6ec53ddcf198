from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List, Optional

_APP_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    APP_ENV: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )
    LOG_LEVEL: str = "INFO"

    # Upload handling
    UPLOAD_LIMIT: int = 20  # MB
    UPLOAD_DIR: Path = _APP_DIR / "uploads"

    # Fortune catalog
    CATALOG_PATH: Path = _APP_DIR / "fortunes" / "catalog.yaml"

    # CORS
    FRONTEND_URL: Optional[str] = None
    CORS_ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "https://aifacetest11.netlify.app",
        "https://aifae.netlify.app",
    ]
    # Netlify preview deployments: https://<hash>--aifae.netlify.app
    CORS_ALLOWED_ORIGIN_REGEX: Optional[str] = r"^https://[a-zA-Z0-9-]+--aifae\.netlify\.app$"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"

    @property
    def max_upload_bytes(self) -> int:
        return self.UPLOAD_LIMIT * 1024 * 1024

    @property
    def cors_origins(self) -> List[str]:
        origins = list(self.CORS_ALLOWED_ORIGINS)
        if self.is_production and self.FRONTEND_URL and self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL)
        return origins


class ClientSettings(BaseSettings):
    """Settings for the command-line client; read from FORTUNE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="FORTUNE_",
        env_file=".env",
        extra="ignore",
    )

    API_URL: str = "http://localhost:3001/api"
    MAX_FILE_SIZE: int = 20  # MB
    UPLOAD_TIMEOUT: float = 30.0  # seconds


settings = Settings()
