"""Unit tests for application settings configuration."""

from pathlib import Path

from ibms.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_mock_mode_without_backend_url():
    settings = Settings(_env_file=None, api_base_url="", app_env="production")
    assert settings.mock_mode


def test_mock_mode_in_development_even_with_backend_url():
    settings = Settings(_env_file=None, api_base_url="https://api.example.com", app_env="development")
    assert settings.mock_mode


def test_live_mode_with_backend_url_outside_development():
    settings = Settings(_env_file=None, api_base_url="https://api.example.com", app_env="production")
    assert not settings.mock_mode


def test_mock_delay_range_in_seconds():
    settings = Settings(_env_file=None, mock_delay_min_ms=300, mock_delay_max_ms=1200)
    assert settings.mock_delay_range == (0.3, 1.2)


def test_mock_delay_range_never_inverted():
    settings = Settings(_env_file=None, mock_delay_min_ms=500, mock_delay_max_ms=100)
    assert settings.mock_delay_range == (0.5, 0.5)
