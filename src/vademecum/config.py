"""Environment-driven settings."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .priority.defaults import DEFAULT_VADE_PRIORITY


class Settings(BaseModel):
    """Runtime settings for the API client, storage and corpus."""

    api_url: str = "http://localhost:8080/api/v1/vade-mecum"
    api_token: Optional[str] = None
    storage_path: Path = Field(
        default_factory=lambda: Path.home() / ".pantheon" / "storage.json"
    )
    corpus_dir: Path = Path("data/corpus")
    priority_limit: int = len(DEFAULT_VADE_PRIORITY)
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from VADE_* environment variables.

        Unset variables keep the defaults declared on the model.
        """
        values = {}
        env_map = {
            "api_url": "VADE_API_URL",
            "api_token": "VADE_API_TOKEN",
            "storage_path": "VADE_STORAGE_PATH",
            "corpus_dir": "VADE_CORPUS_DIR",
            "priority_limit": "VADE_PRIORITY_LIMIT",
            "http_timeout": "VADE_HTTP_TIMEOUT",
        }
        for field_name, env_name in env_map.items():
            value = os.getenv(env_name)
            if value:
                values[field_name] = value
        return cls(**values)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings read from the environment on first use
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
