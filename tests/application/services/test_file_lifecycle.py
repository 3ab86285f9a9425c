from __future__ import annotations

from pathlib import Path

import pytest

from application.services.file_lifecycle import (
    APPENDED_CONTENT,
    INITIAL_CONTENT,
    FileLifecycleService,
)
from domain.steps import AppendFileStep, DeleteFileStep, ReadFileStep, WriteFileStep
from infrastructure.file_system.local_file_system import LocalFileSystem
from tests.fakes import FakeLogger, InMemoryFileSystem


class SnapshotFileSystem(LocalFileSystem):
    """Records the file content after each mutating call."""

    def __init__(self) -> None:
        super().__init__()
        self.snapshots = []

    def append_text(self, path: Path, content: str) -> None:
        super().append_text(path, content)
        self.snapshots.append(Path(path).read_text(encoding="utf-8"))


def test_default_steps_order() -> None:
    steps = FileLifecycleService.default_steps()

    assert [s.id for s in steps] == ["write", "read", "append", "delete"]
    assert isinstance(steps[0], WriteFileStep)
    assert isinstance(steps[1], ReadFileStep)
    assert isinstance(steps[2], AppendFileStep)
    assert isinstance(steps[3], DeleteFileStep)
    assert steps[0].content == "Hello, File System!"
    assert steps[2].content == "\nAppending some text."


def test_full_run_removes_file(tmp_path: Path) -> None:
    target = tmp_path / "example.txt"
    logger = FakeLogger()
    service = FileLifecycleService(file_system=LocalFileSystem(), logger=logger)

    run = service.run(target)

    assert run.result.ok is True
    assert run.result.completed_step_ids == ["write", "read", "append", "delete"]
    assert not target.exists()
    with pytest.raises(FileNotFoundError):
        target.read_text(encoding="utf-8")
    assert run.context.record.exists is False
    file_events = [t for t in logger.types() if t.startswith("file.")]
    assert file_events == ["file.written", "file.read", "file.appended", "file.deleted"]


def test_read_returns_written_content(tmp_path: Path) -> None:
    service = FileLifecycleService(file_system=LocalFileSystem(), logger=FakeLogger())

    run = service.run(tmp_path / "example.txt")

    assert run.context.last_read == INITIAL_CONTENT
    assert run.context.last_read == "Hello, File System!"


def test_content_after_append(tmp_path: Path) -> None:
    fs = SnapshotFileSystem()
    service = FileLifecycleService(file_system=fs, logger=FakeLogger())

    service.run(tmp_path / "example.txt")

    assert fs.snapshots == ["Hello, File System!\nAppending some text."]
    assert INITIAL_CONTENT + APPENDED_CONTENT == fs.snapshots[0]


def test_write_failure_skips_remaining_stages(tmp_path: Path) -> None:
    target = tmp_path / "missing-dir" / "example.txt"
    logger = FakeLogger()
    service = FileLifecycleService(file_system=LocalFileSystem(), logger=logger)

    run = service.run(target)

    assert run.result.ok is False
    assert run.result.failed_step_id == "write"
    assert run.result.completed_step_ids == []
    assert run.result.error_message.startswith("Error writing file:")
    assert not target.exists()
    types = logger.types()
    assert "file.write_failed" in types
    assert not any(t in types for t in ("file.read", "file.appended", "file.deleted"))
    assert [e["step_id"] for e in logger.events if e["type"] == "step.start"] == ["write"]


def test_append_failure_keeps_file(tmp_path: Path) -> None:
    fs = InMemoryFileSystem(fail_on={"append": PermissionError("read-only")})
    service = FileLifecycleService(file_system=fs, logger=FakeLogger())
    target = tmp_path / "example.txt"

    run = service.run(target)

    assert run.result.failed_step_id == "append"
    assert fs.calls == ["write", "read", "append"]
    # no rollback of the earlier stages
    assert fs.files[target] == "Hello, File System!"


def test_run_uses_given_run_id(tmp_path: Path) -> None:
    service = FileLifecycleService(file_system=InMemoryFileSystem(), logger=FakeLogger())

    run = service.run(tmp_path / "example.txt", run_id="run-42")

    assert run.context.run_id == "run-42"


def test_full_run_with_non_utf8_encoding(tmp_path: Path) -> None:
    service = FileLifecycleService(file_system=LocalFileSystem(encoding="utf-16"), logger=FakeLogger())

    run = service.run(tmp_path / "example.txt")

    assert run.result.ok is True
    assert run.context.last_read == "Hello, File System!"
