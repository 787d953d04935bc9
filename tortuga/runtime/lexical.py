"""Character classification and lexing for Tortuga source text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import Iterable, Iterator, Optional

from ..constants import (
    BLANK_CHARACTERS,
    LINE_TERMINATORS,
    MESSAGE_END,
    MESSAGE_START,
    VALIDATION_PATTERNS,
)
from ..errors import InvalidCharacterError, LexicalError

logger = logging.getLogger(__name__)


class LexemeKind(Enum):
    MESSAGE_DELIMITER = "message_delimiter"
    IDENTIFIER = "identifier"
    INTEGER = "integer"
    CONCURRENCY_DELIMITER = "concurrency_delimiter"
    BLANK = "blank"

    @property
    def pattern(self):
        return VALIDATION_PATTERNS[self.value]

    def __str__(self) -> str:  # pragma: no cover - representation helper
        return self.value


@dataclass(frozen=True)
class Lexeme:
    """A classified span of source text.

    Lexemes are values: accumulating a character returns a new lexeme, so a
    lexeme handed out by the :class:`Lexer` can never change afterwards.
    """

    kind: LexemeKind
    line: int
    column: int
    content: str = ""

    def extend(self, character: str) -> "Lexeme":
        return replace(self, content=self.content + character)

    def is_valid(self) -> bool:
        return self.kind.pattern.fullmatch(self.content) is not None

    def __repr__(self) -> str:  # pragma: no cover - representation helper
        return f"<{self.kind.value}:{self.content!r}@{self.line}:{self.column}>"


def classify(character: str) -> Optional[LexemeKind]:
    """Return the lexeme kind of a single character, or ``None``."""

    if character in (MESSAGE_START, MESSAGE_END):
        return LexemeKind.MESSAGE_DELIMITER
    if character and character in LINE_TERMINATORS:
        return LexemeKind.CONCURRENCY_DELIMITER
    if character.isdecimal():
        return LexemeKind.INTEGER
    if character.isalpha():
        return LexemeKind.IDENTIFIER
    if character and character in BLANK_CHARACTERS:
        return LexemeKind.BLANK
    return None


class Lexer:
    """Lazily groups a character source into lexemes.

    The line and column counters belong to one lexing run; iterating the same
    lexer twice is not supported, build a new one over a new source instead.
    """

    def __init__(self, characters: Iterable[str]):
        self._characters = characters
        self._lexeme: Optional[Lexeme] = None
        self.line = 1
        self.column = 0

    def __iter__(self) -> Iterator[Lexeme]:
        for character in self._characters:
            # a finished line terminator moves the position before the next character
            if self._line_complete():
                yield self._terminate()

            kind = classify(character)
            if kind is None:
                raise InvalidCharacterError(character, self.line, self.column + 1)

            if self._lexeme is not None and self._lexeme.kind is not kind:
                finished = self._terminate()
                if finished is not None:
                    yield finished

            self.column += 1
            if self._lexeme is None:
                self._lexeme = Lexeme(kind, self.line, self.column)
            self._lexeme = self._lexeme.extend(character)

        finished = self._terminate()
        if finished is not None:
            yield finished

    def _line_complete(self) -> bool:
        lexeme = self._lexeme
        return (
            lexeme is not None
            and lexeme.kind is LexemeKind.CONCURRENCY_DELIMITER
            and lexeme.content.endswith("\n")
        )

    def _terminate(self) -> Optional[Lexeme]:
        """Validate the open lexeme and return it if it should be emitted."""

        lexeme = self._lexeme
        if lexeme is None:
            return None
        self._lexeme = None

        if not lexeme.is_valid():
            raise LexicalError(
                lexeme.content, lexeme.kind.value, lexeme.line, lexeme.column
            )

        if lexeme.kind is LexemeKind.CONCURRENCY_DELIMITER:
            self.line += 1
            self.column = 0

        if lexeme.kind is LexemeKind.BLANK:
            return None
        logger.debug("lexeme %s %r at %d:%d", lexeme.kind.value, lexeme.content, lexeme.line, lexeme.column)
        return lexeme


__all__ = [
    "Lexeme",
    "LexemeKind",
    "Lexer",
    "classify",
]
