import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from errors import ConfigError

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_SOURCE_URL = "https://wyemh3eowg.execute-api.ap-south-1.amazonaws.com/cities"
DEFAULT_META_PATH = BASE_DIR / "meta-data.json"


@dataclass(frozen=True)
class Settings:
    meta_path: Path = DEFAULT_META_PATH
    source_url: str = DEFAULT_SOURCE_URL
    host: str = "0.0.0.0"
    port: int = 3000
    app_env: str = "development"
    log_level: str = "INFO"
    sync_timeout: float = 15.0

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    load_dotenv()

    return Settings(
        host=os.getenv("HOST") or "0.0.0.0",
        port=_env_int("PORT", 3000),
        app_env=os.getenv("APP_ENV") or "development",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
