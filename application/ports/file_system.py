from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystemPort(ABC):
    """Text file operations used by the file lifecycle handlers.

    The encoding belongs to the implementation and applies to every operation.
    Implementations raise ``OSError`` subclasses on failure.
    """

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        ...

    @abstractmethod
    def append_text(self, path: Path, content: str) -> None:
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        ...
