# application/handlers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Type

from application.outcome import StepOutcome
from domain.steps.base import Step

if TYPE_CHECKING:
    from domain.run import RunContext
    from application.services.execution_deps import ExecutionDeps


class StepHandler(ABC):
    step_type: ClassVar[Type[Step]] = Step

    def supports(self, step: Step) -> bool:
        return isinstance(step, self.step_type)

    @abstractmethod
    def handle(self, step: Step, ctx: "RunContext", deps: "ExecutionDeps") -> StepOutcome: ...

    def _fail(self, op: str, verb: str, step: Step, ctx: "RunContext", deps: "ExecutionDeps", exc: Exception) -> StepOutcome:
        deps.logger.error(
            f"file.{op}_failed",
            step_id=step.id,
            path=str(ctx.path),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return StepOutcome(ok=False, error_message=f"Error {verb} file: {exc}")
