from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class FileRecord:
    path: Path
    content: Optional[str] = None
    exists: bool = False

    def written(self, content: str) -> "FileRecord":
        return replace(self, content=content, exists=True)

    def appended(self, text: str) -> "FileRecord":
        # content is unknown when the file was never read or written in this run
        content = None if self.content is None else self.content + text
        return replace(self, content=content, exists=True)

    def removed(self) -> "FileRecord":
        return replace(self, content=None, exists=False)
