"""Grammar entities and the line-oriented transmission parser."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
import logging
from typing import Iterable, Iterator, Sequence

from ..constants import MESSAGE_END, MESSAGE_START
from ..errors import MessageParseError, TransmissionSyntaxError
from .lexical import Lexeme, LexemeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActorReference:
    """The named recipient of a transmission."""

    lexeme: Lexeme

    @property
    def identifier(self) -> str:
        return self.lexeme.content


@dataclass(frozen=True)
class Message:
    """The integer arguments attached to a transmission."""

    lexemes: tuple[Lexeme, ...]

    def __post_init__(self):
        object.__setattr__(self, "lexemes", tuple(self.lexemes))

    @property
    def parts(self) -> list[int]:
        parts = []
        for lexeme in self.lexemes:
            if lexeme.kind is not LexemeKind.INTEGER:
                raise MessageParseError(lexeme)
            parts.append(int(lexeme.content))
        return parts

    def __len__(self) -> int:
        return len(self.lexemes)


@dataclass(frozen=True)
class Transmission:
    """Send ``message`` to the actor named by ``actor_reference``."""

    actor_reference: ActorReference
    message: Message

    @property
    def line(self) -> int:
        return self.actor_reference.lexeme.line

    def __repr__(self) -> str:  # pragma: no cover - representation helper
        parts = " ".join(lexeme.content for lexeme in self.message.lexemes)
        return f"<Transmission {self.actor_reference.identifier}({parts})@{self.line}>"


def _is_line_break(lexeme: Lexeme) -> bool:
    return lexeme.kind is LexemeKind.CONCURRENCY_DELIMITER


def _expect(lexeme: Lexeme, kind: LexemeKind, expectation: str, content=None) -> Lexeme:
    if lexeme.kind is not kind or (content is not None and lexeme.content != content):
        raise TransmissionSyntaxError(lexeme, expectation)
    return lexeme


def create_transmission(lexemes: Sequence[Lexeme]) -> Transmission:
    """Build a transmission from the lexemes of one source line.

    The line must hold at least one lexeme; line terminators are not part of it.
    """

    if not lexemes:
        raise ValueError("a transmission needs at least one lexeme")

    first, last, interior = lexemes[0], lexemes[-1], lexemes[1:-1]

    _expect(first, LexemeKind.MESSAGE_DELIMITER, f"{MESSAGE_START!r}", MESSAGE_START)
    _expect(last, LexemeKind.MESSAGE_DELIMITER, f"{MESSAGE_END!r}", MESSAGE_END)
    if not interior:
        raise TransmissionSyntaxError(last, "an actor reference")

    actor, *parts = interior
    _expect(actor, LexemeKind.IDENTIFIER, "an actor reference")
    for part in parts:
        _expect(part, LexemeKind.INTEGER, "an integer message part")

    return Transmission(ActorReference(actor), Message(parts))


class Parser:
    """Groups a lexeme stream into one transmission per non-empty line."""

    def __init__(self, lexemes: Iterable[Lexeme]):
        self._lexemes = lexemes

    def __iter__(self) -> Iterator[Transmission]:
        for is_break, run in groupby(self._lexemes, key=_is_line_break):
            if is_break:
                continue
            transmission = create_transmission(list(run))
            logger.debug("transmission %r", transmission)
            yield transmission

    def parse(self) -> list[Transmission]:
        return list(self)


__all__ = [
    "ActorReference",
    "Message",
    "Parser",
    "Transmission",
    "create_transmission",
]
