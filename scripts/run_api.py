#!/usr/bin/env python3
"""
Entry point that serves the static router with uvicorn
"""
import sys
from pathlib import Path

# make the project root importable
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from domain.exceptions import ConfigurationError
from infrastructure.config.settings import Settings
from infrastructure.logging.log_setup import setup_console_logging


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    setup_console_logging(level=settings.log_level)
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
