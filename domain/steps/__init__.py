from domain.steps.base import Step
from domain.steps.file_ops import AppendFileStep, DeleteFileStep, ReadFileStep, WriteFileStep

__all__ = [
    "Step",
    "WriteFileStep",
    "ReadFileStep",
    "AppendFileStep",
    "DeleteFileStep",
]
