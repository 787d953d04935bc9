"""File-backed character source for the Tortuga lexer."""

from __future__ import annotations

from pathlib import Path

from .constants import DEFAULT_ENCODING
from .errors import SourceNotFoundError

_CHUNK_SIZE = 4096


class FileReader:
    """Iterate over the characters of a file, one at a time.

    Line terminators are passed through untranslated so ``"\\r\\n"`` reaches
    the lexer as two characters.
    """

    def __init__(self, path, encoding: str = DEFAULT_ENCODING):
        self.path = Path(path)
        self.encoding = encoding

    def __iter__(self):
        try:
            handle = open(self.path, "r", encoding=self.encoding, newline="")
        except FileNotFoundError as exc:
            raise SourceNotFoundError(self.path) from exc
        with handle:
            while True:
                chunk = handle.read(_CHUNK_SIZE)
                if not chunk:
                    break
                yield from chunk

    def __repr__(self) -> str:  # pragma: no cover - representation helper
        return f"FileReader({str(self.path)!r}, encoding={self.encoding!r})"


__all__ = ["FileReader"]
