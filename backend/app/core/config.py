from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file="../.env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "PITCH DECK GENERATOR"

    # Extra origins allowed by CORS; localhost ones are added in development.
    BACKEND_CORS_ORIGINS: list[str] = []

    # ── Google OAuth (long-lived refresh credential) ──────────
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_REFRESH_TOKEN: str = ""
    GOOGLE_TOKEN_URI: str = "https://oauth2.googleapis.com/token"

    # ── Google Slides ─────────────────────────────────────────
    GOOGLE_SLIDES_HOST: str = "docs.google.com"

    def missing_google_credentials(self) -> list[str]:
        """Names of the credential keys that are unset, in a fixed order."""
        required = {
            "GOOGLE_CLIENT_ID": self.GOOGLE_CLIENT_ID,
            "GOOGLE_CLIENT_SECRET": self.GOOGLE_CLIENT_SECRET,
            "GOOGLE_REFRESH_TOKEN": self.GOOGLE_REFRESH_TOKEN,
        }
        return [name for name, value in required.items() if not value]


settings = Settings()
