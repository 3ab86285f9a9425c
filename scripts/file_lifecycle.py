#!/usr/bin/env python3
"""
File lifecycle demo: write, read, append, delete

Usage:
  python scripts/file_lifecycle.py [--path <file>]

Examples:
  python scripts/file_lifecycle.py
  python scripts/file_lifecycle.py --path /tmp/example.txt
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.services.file_lifecycle import FileLifecycleService
from infrastructure.file_system.local_file_system import LocalFileSystem
from infrastructure.logging.console_logger import ConsoleLogger


DEFAULT_PATH = Path(__file__).parent / "example.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write, read, append and delete one file")
    parser.add_argument("--path", type=str, default=str(DEFAULT_PATH))
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    service = FileLifecycleService(file_system=LocalFileSystem(), logger=ConsoleLogger())

    print("\n=== Executing ===\n")
    run = service.run(Path(args.path))
    result = run.result

    print("\n=== Result ===")
    print(f"Run ID: {run.context.run_id}")
    print(f"Success: {result.ok}")
    print(f"Completed: {', '.join(result.completed_step_ids) or '-'}")
    if not result.ok:
        print(f"Failed Step: {result.failed_step_id}")
        print(f"Error: {result.error_message}")

    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
