# infrastructure/config/settings.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from domain.exceptions import ConfigurationError

ENV_PREFIX = "ESSENTIALS_"
DEFAULT_ENV_PATH = Path(__file__).parent.parent.parent / ".env"


class Settings(BaseModel):
    """Runtime settings; every field has a working default."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="0.0.0.0", description="HTTP listener host")
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP listener port")
    log_level: str = Field(default="INFO", description="Log level for loguru")
    fetch_delay_sec: float = Field(default=2.0, ge=0, description="Simulated fetch delay")
    base_url: str = Field(default="http://localhost:3000", description="Server probed by check_routes")

    @property
    def public_url(self) -> str:
        return f"http://localhost:{self.port}"

    @classmethod
    def from_env(
        cls,
        env_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """
        Build settings from ``ESSENTIALS_*`` variables.

        Values from the .env file take precedence over the process environment.
        """
        env_path = DEFAULT_ENV_PATH if env_path is None else env_path
        values: Dict[str, Any] = {}
        if env_path.exists():
            values.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})

        for key, value in (os.environ if environ is None else environ).items():
            if key not in values:
                values[key] = value

        fields: Dict[str, Any] = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in values:
                fields[name] = values[key]

        try:
            return cls(**fields)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid settings: {exc}") from exc
