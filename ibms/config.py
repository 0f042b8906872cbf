from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "IBMS Client Core"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Backend: an empty base URL (or a development build) selects mock mode
    api_base_url: str = ""
    default_tenant: str = "easy2work"
    http_timeout_seconds: float = 30.0

    # Mock transport latency window (milliseconds)
    mock_delay_min_ms: int = 300
    mock_delay_max_ms: int = 1200

    # Browser local-storage emulation
    storage_file: str = "data/local_storage.json"
    settings_storage_key: str = "ibms_settings"
    token_storage_key: str = "token"
    tenant_storage_key: str = "tenant"

    # Query cache policy
    query_retry: int = 3
    query_retry_delay_seconds: float = 1.0
    query_gc_seconds: float = 300.0

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore (outbound HTTP)
    log_level_gateway: str = "INFO"          # Mock / HTTP gateway request lines
    log_level_cache: str = "WARNING"         # Query cache hits, fetches, invalidations
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def mock_mode(self) -> bool:
        """Mock when no backend is configured or when running a development build."""
        return not self.api_base_url.strip() or self.app_env == "development"

    @property
    def mock_delay_range(self) -> tuple[float, float]:
        """Mock latency window in seconds."""
        low = max(self.mock_delay_min_ms, 0) / 1000
        high = max(self.mock_delay_max_ms, self.mock_delay_min_ms, 0) / 1000
        return low, high


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()
