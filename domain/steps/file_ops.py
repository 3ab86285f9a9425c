from __future__ import annotations

from dataclasses import dataclass

from domain.steps.base import Step


@dataclass(frozen=True)
class WriteFileStep(Step):
    content: str = ""


@dataclass(frozen=True)
class ReadFileStep(Step):
    pass


@dataclass(frozen=True)
class AppendFileStep(Step):
    content: str = ""


@dataclass(frozen=True)
class DeleteFileStep(Step):
    pass
