from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from application.executor.handler_registry import HandlerRegistry
from application.executor.step_executor import ExecutionResult, StepExecutor
from application.handlers.file_handlers import (
    AppendFileHandler,
    DeleteFileHandler,
    ReadFileHandler,
    WriteFileHandler,
)
from application.ports.file_system import FileSystemPort
from application.ports.logger import LoggerPort
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps import AppendFileStep, DeleteFileStep, ReadFileStep, Step, WriteFileStep

INITIAL_CONTENT = "Hello, File System!"
APPENDED_CONTENT = "\nAppending some text."


@dataclass(frozen=True)
class LifecycleRun:
    result: ExecutionResult
    context: RunContext


class FileLifecycleService:
    """
    Write, read, append and delete one file, in that order.

    Each stage starts only after the previous one reported success; the first
    failure is logged and the remaining stages are skipped.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: LoggerPort,
        executor: Optional[StepExecutor] = None,
    ) -> None:
        self._deps = ExecutionDeps(file_system=file_system, logger=logger)
        self._executor = executor or StepExecutor(self.default_registry())

    @staticmethod
    def default_registry() -> HandlerRegistry:
        return HandlerRegistry([
            WriteFileHandler(),
            ReadFileHandler(),
            AppendFileHandler(),
            DeleteFileHandler(),
        ])

    @staticmethod
    def default_steps() -> List[Step]:
        return [
            WriteFileStep(id="write", name="Write file", content=INITIAL_CONTENT),
            ReadFileStep(id="read", name="Read file"),
            AppendFileStep(id="append", name="Append to file", content=APPENDED_CONTENT),
            DeleteFileStep(id="delete", name="Delete file"),
        ]

    def run(self, path: Path, steps: Optional[List[Step]] = None, run_id: str = "") -> LifecycleRun:
        ctx = RunContext(path=Path(path), run_id=run_id)
        if steps is None:
            steps = self.default_steps()
        result = self._executor.execute(steps, ctx, self._deps)
        return LifecycleRun(result=result, context=ctx)
