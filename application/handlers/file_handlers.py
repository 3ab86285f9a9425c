# application/handlers/file_handlers.py
from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.file_ops import AppendFileStep, DeleteFileStep, ReadFileStep, WriteFileStep

# OSError covers not-found and permission problems; UnicodeError covers undecodable content.
FILE_ERRORS = (OSError, UnicodeError)


class WriteFileHandler(StepHandler):
    step_type = WriteFileStep

    def handle(self, step: WriteFileStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        try:
            deps.file_system.write_text(ctx.path, step.content)
        except FILE_ERRORS as exc:
            return self._fail("write", "writing", step, ctx, deps, exc)

        ctx.record = ctx.record.written(step.content)
        deps.logger.info("file.written", step_id=step.id, path=str(ctx.path), message="File written successfully.")
        return StepOutcome(ok=True)


class ReadFileHandler(StepHandler):
    step_type = ReadFileStep

    def handle(self, step: ReadFileStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        try:
            data = deps.file_system.read_text(ctx.path)
        except FILE_ERRORS as exc:
            return self._fail("read", "reading", step, ctx, deps, exc)

        ctx.last_read = data
        ctx.record = ctx.record.written(data)
        deps.logger.info("file.read", step_id=step.id, path=str(ctx.path), content=data)
        return StepOutcome(ok=True, value=data)


class AppendFileHandler(StepHandler):
    step_type = AppendFileStep

    def handle(self, step: AppendFileStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        try:
            deps.file_system.append_text(ctx.path, step.content)
        except FILE_ERRORS as exc:
            return self._fail("append", "appending to", step, ctx, deps, exc)

        ctx.record = ctx.record.appended(step.content)
        deps.logger.info("file.appended", step_id=step.id, path=str(ctx.path), message="Text appended successfully.")
        return StepOutcome(ok=True)


class DeleteFileHandler(StepHandler):
    step_type = DeleteFileStep

    def handle(self, step: DeleteFileStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        try:
            deps.file_system.delete(ctx.path)
        except FILE_ERRORS as exc:
            return self._fail("delete", "deleting", step, ctx, deps, exc)

        ctx.record = ctx.record.removed()
        deps.logger.info("file.deleted", step_id=step.id, path=str(ctx.path), message="File deleted successfully.")
        return StepOutcome(ok=True)
