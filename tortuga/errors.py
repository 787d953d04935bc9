"""Error taxonomy shared by the lexer, parser and interpreter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .runtime.lexical import Lexeme


class TortugaError(RuntimeError):
    """Base class for every failure raised by the Tortuga pipeline."""


class SourceNotFoundError(TortugaError, FileNotFoundError):
    """The character source points at a file that does not exist."""

    def __init__(self, path):
        super().__init__(f"File not found at specified path: {path}.")
        self.path = path


class InvalidCharacterError(TortugaError):
    """A character that belongs to none of the lexeme kinds."""

    def __init__(self, character: str, line: int, column: int):
        super().__init__(
            f"Encountered an unexpected character {character!r} "
            f"at line {line}, column {column}."
        )
        self.character = character
        self.line = line
        self.column = column


class LexicalError(TortugaError):
    """A finalized lexeme whose content does not match its kind."""

    def __init__(self, content: str, kind: str, line: int, column: int):
        super().__init__(
            f"Invalid lexeme {content!r} ({kind}) at line {line}, column {column}."
        )
        self.content = content
        self.kind = kind
        self.line = line
        self.column = column


def _describe(lexeme: "Lexeme") -> str:
    return (
        f"{lexeme.content!r} ({lexeme.kind.value}) "
        f"at line {lexeme.line}, column {lexeme.column}"
    )


class TransmissionSyntaxError(TortugaError):
    """A line of lexemes that does not form a transmission."""

    def __init__(self, lexeme: "Lexeme", expectation: str = ""):
        message = f"Encountered an unexpected lexeme {_describe(lexeme)}."
        if expectation:
            message = f"{message} Expected {expectation}."
        super().__init__(message)
        self.lexeme = lexeme
        self.expectation = expectation

    @property
    def content(self) -> str:
        return self.lexeme.content

    @property
    def kind(self) -> str:
        return self.lexeme.kind.value

    @property
    def line(self) -> int:
        return self.lexeme.line

    @property
    def column(self) -> int:
        return self.lexeme.column


class MessageParseError(TortugaError):
    """A non-integer lexeme reached ``Message.parts``."""

    def __init__(self, lexeme: "Lexeme"):
        super().__init__(
            f"Encountered an unexpected lexeme {_describe(lexeme)} in message."
        )
        self.lexeme = lexeme


class ArityError(TortugaError):
    """An operation received fewer message parts than it needs."""

    def __init__(self, identifier: str, minimum: int, received: int):
        super().__init__(
            f"Actor {identifier!r} expects at least {minimum} message part(s), "
            f"received {received}."
        )
        self.identifier = identifier
        self.minimum = minimum
        self.received = received


__all__ = [
    "ArityError",
    "InvalidCharacterError",
    "LexicalError",
    "MessageParseError",
    "SourceNotFoundError",
    "TortugaError",
    "TransmissionSyntaxError",
]
