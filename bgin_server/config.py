"""Configuration management for the BGIN multi-agent hub."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#") and "=" in stripped:
            key, value = stripped.split("=", 1)
            key, value = key.strip(), value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value


_load_env_file()


DEFAULT_APP_NAME = "BGIN Multi-Agent Hub"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_PHALA_ENDPOINT = "https://890e30429c7029b543e69653fb1ca507293797ad-3000.dstack-prod5.phala.network"


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


class Settings(BaseModel):
    """Application settings with environment fallbacks."""

    model_config = {"frozen": True}

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default_factory=lambda: os.getenv("BGIN_HOST", "0.0.0.0"))
    server_port: int = Field(default_factory=lambda: _env_int("PORT", 4000))

    # Local model server (tried first)
    ollama_api_url: str = Field(default_factory=lambda: os.getenv("OLLAMA_API_URL", "http://localhost:11434"))
    ollama_model: str = Field(default_factory=lambda: os.getenv("OLLAMA_MODEL", "llama3.2:3b-instruct-q4_0"))

    # OpenAI-compatible cloud API (second)
    openai_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY") or None)
    openai_api_url: str = Field(default_factory=lambda: os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions"))
    openai_model: str = Field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"))

    # Phala confidential-compute endpoint (last before the canned fallback)
    phala_endpoint: str = Field(default_factory=lambda: os.getenv("PHALA_ENDPOINT", DEFAULT_PHALA_ENDPOINT))
    phala_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("PHALA_API_KEY") or None)
    phala_model: str = Field(default_factory=lambda: os.getenv("PHALA_MODEL", "openai/gpt-oss-120b"))

    # Sampling shared by every provider
    llm_temperature: float = Field(default_factory=lambda: _env_float("LLM_TEMPERATURE", 0.7))
    llm_max_tokens: int = Field(default_factory=lambda: _env_int("LLM_MAX_TOKENS", 1000))
    llm_timeout_seconds: float = Field(default_factory=lambda: _env_float("LLM_TIMEOUT_SECONDS", 60.0))

    # Discourse forum
    discourse_url: str = Field(default_factory=lambda: os.getenv("DISCOURSE_URL", "https://forum.bgin.org"))
    discourse_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("DISCOURSE_API_KEY") or None)
    discourse_username: str = Field(default_factory=lambda: os.getenv("DISCOURSE_USERNAME", "bgin-ai-bot"))

    # Transcript storage
    chat_storage_dir: Path = Field(default_factory=lambda: Path(os.getenv("CHAT_STORAGE_DIR", "chat-storage")))

    # HTTP behaviour
    cors_allow_origins_raw: str = Field(default_factory=lambda: os.getenv("BGIN_CORS_ALLOW_ORIGINS", "*"))
    enable_docs: bool = Field(default_factory=lambda: os.getenv("BGIN_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default_factory=lambda: os.getenv("BGIN_DOCS_URL", "/docs"))

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def discourse_configured(self) -> bool:
        return bool(self.discourse_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
