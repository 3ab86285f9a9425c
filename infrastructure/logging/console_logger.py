# infrastructure/logging/console_logger.py
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Dict

from application.ports.logger import LoggerPort


@dataclass(frozen=True)
class ConsoleLogger(LoggerPort):
    """Prints ``<event> <json>`` lines; warnings and errors go to stderr."""

    bound: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return ConsoleLogger(bound=merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit(event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit(event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit(event, fields, to_stderr=True)

    def error(self, event: str, **fields: Any) -> None:
        self._emit(event, fields, to_stderr=True)

    def _emit(self, event: str, fields: Dict[str, Any], to_stderr: bool = False) -> None:
        payload = dict(self.bound)
        payload.update(fields)
        payload.setdefault("type", event)
        stream = sys.stderr if to_stderr else sys.stdout
        print(f"{event} {json.dumps(payload, ensure_ascii=False, default=str)}", file=stream)
