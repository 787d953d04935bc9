"""Shared constant values for the Tortuga runtime."""

import re

VALIDATION_PATTERNS = {
    "message_delimiter": re.compile(r"[()]"),
    "concurrency_delimiter": re.compile(r"\r?\n"),
    "integer": re.compile(r"\d+"),
    "identifier": re.compile(r"[^\W\d_]+"),
    "blank": re.compile(r"[ \t]+"),
}

MESSAGE_START = "("
MESSAGE_END = ")"
BLANK_CHARACTERS = " \t"
LINE_TERMINATORS = "\r\n"

DEFAULT_ENCODING = "utf-8"
DOCUMENT_FILE = "program.tortuga.json"
DOCUMENT_VERSION = "0.1"
REPL_HISTORY_LIMIT = 10

__all__ = [
    "VALIDATION_PATTERNS",
    "MESSAGE_START",
    "MESSAGE_END",
    "BLANK_CHARACTERS",
    "LINE_TERMINATORS",
    "DEFAULT_ENCODING",
    "DOCUMENT_FILE",
    "DOCUMENT_VERSION",
    "REPL_HISTORY_LIMIT",
]
