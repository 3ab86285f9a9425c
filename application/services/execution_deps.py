from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.file_system import FileSystemPort
from application.ports.logger import LoggerPort


@dataclass(frozen=True)
class ExecutionDeps:
    file_system: FileSystemPort
    logger: LoggerPort

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
