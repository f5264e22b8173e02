"""
HTTP server configuration settings.

Dependencies: pydantic_settings
System role: Listen address and cross-origin policy
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_records.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Uvicorn listen address and CORS configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8080, description="Port to listen on")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed cross-origin sources",
    )
