from __future__ import annotations

from pathlib import Path

from application.ports.file_system import FileSystemPort


class LocalFileSystem(FileSystemPort):
    """Text files on the host file system, all in one encoding.

    Newlines are written untranslated so content matches byte for byte on every platform.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding=self._encoding, newline="")

    def read_text(self, path: Path) -> str:
        with Path(path).open("r", encoding=self._encoding, newline="") as f:
            return f.read()

    def append_text(self, path: Path, content: str) -> None:
        with Path(path).open("a", encoding=self._encoding, newline="") as f:
            f.write(content)

    def delete(self, path: Path) -> None:
        Path(path).unlink()
