#!/usr/bin/env python3
"""
Simulated async fetch

Usage:
  python scripts/fetch_data.py

Prints "Fetching data...", waits for the configured delay (2 seconds by
default) and logs the fetched payload.
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.services.data_fetcher import DataFetcher
from domain.deferred import DeferredResult
from domain.exceptions import ConfigurationError
from infrastructure.config.settings import Settings
from infrastructure.logging.console_logger import ConsoleLogger


def run(settings: Settings) -> DeferredResult:
    fetcher = DataFetcher(logger=ConsoleLogger(), delay_sec=settings.fetch_delay_sec)
    return asyncio.run(fetcher.get_data())


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    run(settings)


if __name__ == "__main__":
    main()
