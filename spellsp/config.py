"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from spellsp.languages import Language

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

APP_DIR_NAME = "spellsp"


def _resolve_dir(xdg: Path | None, home: Path | None, home_relative: str) -> Path:
    """Resolve a base directory: XDG variable, then home-relative default, then ./ fallback."""
    if xdg is not None:
        return xdg
    if home is not None:
        return home / home_relative
    return Path(".") / home_relative


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Directory resolution (read from XDG_DATA_HOME, XDG_CACHE_HOME, XDG_CONFIG_HOME, HOME)
    xdg_data_home: Path | None = None
    xdg_cache_home: Path | None = None
    xdg_config_home: Path | None = None
    home: Path | None = None

    @property
    def data_dir(self) -> Path:
        return _resolve_dir(self.xdg_data_home, self.home, ".local/share") / APP_DIR_NAME

    @property
    def cache_dir(self) -> Path:
        return _resolve_dir(self.xdg_cache_home, self.home, ".cache") / APP_DIR_NAME

    @property
    def config_dir(self) -> Path:
        return _resolve_dir(self.xdg_config_home, self.home, ".config") / APP_DIR_NAME

    # Spellcheck
    dictionary_language: Language = Language.EN
    dictionary_base_url: str = (
        "https://raw.githubusercontent.com/wooorm/dictionaries/main/dictionaries"
    )
    max_suggestions: int = 5

    # Definitions
    definitions_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
    http_timeout: float = 30.0

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to cache_dir/spellsp.log if not set."""
        return self.log_file_path or self.cache_dir / "spellsp.log"


settings = Settings()
