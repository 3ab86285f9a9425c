from __future__ import annotations

from pathlib import Path

import pytest

from domain.exceptions import ConfigurationError
from infrastructure.config.settings import Settings


def test_defaults_without_env(tmp_path: Path) -> None:
    settings = Settings.from_env(env_path=tmp_path / ".env", environ={})

    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.fetch_delay_sec == 2.0
    assert settings.log_level == "INFO"
    assert settings.public_url == "http://localhost:3000"


def test_environment_overrides(tmp_path: Path) -> None:
    settings = Settings.from_env(
        env_path=tmp_path / ".env",
        environ={"ESSENTIALS_PORT": "8080", "ESSENTIALS_FETCH_DELAY_SEC": "0.5", "PORT": "1"},
    )

    assert settings.port == 8080
    assert settings.fetch_delay_sec == 0.5


def test_dotenv_file_takes_precedence(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("ESSENTIALS_PORT=4000\n", encoding="utf-8")

    settings = Settings.from_env(env_path=env_file, environ={"ESSENTIALS_PORT": "5000"})

    assert settings.port == 4000


def test_invalid_port_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Invalid settings"):
        Settings.from_env(env_path=tmp_path / ".env", environ={"ESSENTIALS_PORT": "70000"})


def test_settings_frozen() -> None:
    settings = Settings()
    with pytest.raises(Exception):
        settings.port = 1
