"""Entry points chaining the lexer, parser and interpreter."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO

from ..constants import DEFAULT_ENCODING
from ..reader import FileReader
from .interpreter import Interpreter
from .lexical import Lexeme, Lexer
from .syntax import Parser, Transmission


def lex(characters: Iterable[str]) -> Iterator[Lexeme]:
    """Return a lazy iterator over the lexemes of ``characters``."""

    return iter(Lexer(characters))


def parse(characters: Iterable[str]) -> list[Transmission]:
    """Lex and parse a character source into its transmissions."""

    return Parser(Lexer(characters)).parse()


def interpret(characters: Iterable[str], output: Optional[TextIO] = None) -> None:
    """Run a character source through every stage.

    The whole source is parsed first, so a malformed line produces no output.
    """

    Interpreter(parse(characters), output).interpret()


def interpret_file(path, encoding: str = DEFAULT_ENCODING, output: Optional[TextIO] = None) -> None:
    interpret(FileReader(path, encoding), output)


__all__ = [
    "interpret",
    "interpret_file",
    "lex",
    "parse",
]
