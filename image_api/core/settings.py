"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Built once at startup and handed to create_app(); read-only afterwards.
"""

from typing import List, Optional
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from ..search.whitelist import load_allow_list

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bind address / port for uvicorn
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8080, description="Port for FastAPI/Uvicorn")
    log_level: str = Field(default="info", description="Root log level used by serve()")

    # CORS
    cors_allow_origins: list[str] = Field(default=["*"], description="Allowed origins for browser apps")

    # Shared secret callers present as "Authorization: Bearer <api_key>"
    api_key: Optional[str] = Field(default=None, description="Server access secret")

    # Google Custom Search (image)
    # These can come from env (.env or shell): GOOGLE_API_KEY, GOOGLE_SEARCH_ENGINE_ID
    google_api_key: Optional[str] = None
    google_search_engine_id: Optional[str] = None
    google_endpoint: str = Field(default="https://www.googleapis.com/customsearch/v1")
    google_timeout_s: float = Field(default=10.0, gt=0, description="Timeout for the outbound search call")

    # --- Source allow-list ---
    allowed_sources: List[str] = Field(
        default=["cosmos.so"],
        description="Domains (and their subdomains) images may come from."
    )
    # Optional text file, one domain per line; merged after allowed_sources
    allowed_sources_file: Optional[Path] = None

    @field_validator("api_key", "google_api_key", "google_search_engine_id", mode="before")
    @classmethod
    def _blank_is_unset(cls, v):
        # an exported-but-empty variable means "not configured"
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def resolved_allow_list(self) -> List[str]:
        return load_allow_list(self.allowed_sources_file, self.allowed_sources)

settings = Settings()
