#!/usr/bin/env python3
"""
Smoke check for a running static router

Usage:
  python scripts/check_routes.py [--base-url <url>] [--path <path> ...]

Examples:
  python scripts/check_routes.py
  python scripts/check_routes.py --base-url http://localhost:3000 --path / --path /about
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import requests

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.exceptions import ConfigurationError
from domain.routes import RouteTable
from infrastructure.config.settings import Settings


DEFAULT_TIMEOUT_SEC = 10


def _build_parser(default_base_url: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GET each static route and report the result")
    parser.add_argument("--base-url", type=str, default=default_base_url)
    parser.add_argument("--path", dest="paths", action="append")
    parser.add_argument("--timeout-sec", type=int, default=DEFAULT_TIMEOUT_SEC)
    return parser


def _check(base_url: str, path: str, timeout_sec: int) -> bool:
    url = f"{base_url.rstrip('/')}{path}"
    response = requests.get(url, timeout=timeout_sec)
    print(json.dumps(
        {"path": path, "status": response.status_code, "body": response.text},
        ensure_ascii=False,
    ))
    return response.status_code == 200


def main(argv: list[str] | None = None) -> None:
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    args = _build_parser(settings.base_url).parse_args(sys.argv[1:] if argv is None else argv)
    paths = args.paths or [route.path for route in RouteTable.default()]

    try:
        results = [_check(args.base_url, path, args.timeout_sec) for path in paths]
    except requests.RequestException as exc:
        print(f"ERROR: API request failed: {exc}")
        sys.exit(1)

    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
