# domain/run.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from domain.file_record import FileRecord


@dataclass
class RunContext:
    path: Path
    run_id: str = ""

    record: Optional[FileRecord] = None
    last_read: Optional[str] = None
    completed_steps: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.record is None:
            self.record = FileRecord(path=self.path)
