from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Conduit Users API"
    database_url: str = Field(default="sqlite:///./conduit.db")
    log_level: str = Field(default="INFO")
    # Bytes of randomness behind each opaque user token.
    token_bytes: int = Field(default=32, ge=16, le=128)
    password_schemes: List[str] = Field(default=["pbkdf2_sha256"])


settings = Settings()
