# application/executor/step_executor.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import time
import uuid

from application.executor.handler_registry import HandlerRegistry
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.base import Step


@dataclass(frozen=True)
class ExecutionResult:
    ok: bool
    failed_step_id: Optional[str] = None
    error_message: Optional[str] = None
    completed_step_ids: List[str] = field(default_factory=list)


class StepExecutor:
    """Runs steps in order and stops at the first failed outcome."""

    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, steps: List[Step], ctx: RunContext, deps: ExecutionDeps) -> ExecutionResult:
        # keep a caller-supplied run_id
        if not ctx.run_id:
            ctx.run_id = uuid.uuid4().hex

        deps = deps.with_logger(deps.logger.bind(run_id=ctx.run_id))

        for index, step in enumerate(steps):
            outcome = self._execute_step(step, ctx, deps)

            if not outcome.ok:
                skipped = [s.id for s in steps[index + 1:]]
                deps.logger.info("run.aborted", failed_step_id=step.id, skipped=skipped)
                return ExecutionResult(
                    ok=False,
                    failed_step_id=step.id,
                    error_message=outcome.error_message,
                    completed_step_ids=list(ctx.completed_steps),
                )

            ctx.completed_steps.append(step.id)

        return ExecutionResult(ok=True, completed_step_ids=list(ctx.completed_steps))

    def _execute_step(self, step: Step, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        handler = self._registry.get_handler(step)

        deps.logger.info("step.start", step_id=step.id, step_type=type(step).__name__)
        t0 = time.perf_counter()

        outcome: StepOutcome = handler.handle(step, ctx, deps)

        deps.logger.info(
            "step.end",
            step_id=step.id,
            ok=(outcome is not None and outcome.ok),
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )

        if outcome is None:
            raise RuntimeError(
                f"Handler returned None: handler={type(handler).__name__}, step={step.id} ({type(step).__name__})"
            )
        return outcome
