"""Portable JSON documents for parsed Tortuga programs."""

from __future__ import annotations

from datetime import datetime, timezone
import hashlib
import json
from typing import Iterable, Optional, TextIO

from ..constants import DOCUMENT_FILE, DOCUMENT_VERSION
from .interpreter import Interpreter
from .lexical import Lexeme, LexemeKind
from .syntax import ActorReference, Message, Transmission

VOLATILE_FIELDS = ("timestamp",)


def lexeme_to_dict(lexeme: Lexeme) -> dict:
    return {
        "kind": lexeme.kind.value,
        "line": lexeme.line,
        "column": lexeme.column,
        "content": lexeme.content,
    }


def lexeme_from_dict(data: dict) -> Lexeme:
    try:
        kind = LexemeKind(data["kind"])
        lexeme = Lexeme(kind, int(data["line"]), int(data["column"]), str(data["content"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed lexeme entry: {data!r}") from exc
    if not lexeme.is_valid():
        raise ValueError(
            f"Lexeme {lexeme.content!r} is not a valid {kind.value} "
            f"(line {lexeme.line}, column {lexeme.column})"
        )
    return lexeme


def transmission_to_dict(transmission: Transmission) -> dict:
    return {
        "actor": lexeme_to_dict(transmission.actor_reference.lexeme),
        "message": [lexeme_to_dict(l) for l in transmission.message.lexemes],
    }


def evaluate_outputs(transmissions: Iterable[Transmission]) -> list:
    """Evaluate each transmission without writing anything."""

    interpreter = Interpreter([])
    return [interpreter.evaluate(t) for t in transmissions]


def build_program_document(transmissions: Iterable[Transmission]) -> dict:
    """Create an in-memory program document."""

    transmissions = list(transmissions)
    return {
        "tortuga_version": DOCUMENT_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "transmissions": [transmission_to_dict(t) for t in transmissions],
        "evaluation": {"output": evaluate_outputs(transmissions)},
    }


def write_program_document(doc: dict, filename) -> dict:
    """Persist a program document to disk."""

    with open(filename, "w", encoding="utf-8") as f:
        json.dump(doc, f, indent=2)
    print(f"  ✓ Program document exported → {filename}")
    return doc


def export_program(transmissions: Iterable[Transmission], filename=DOCUMENT_FILE) -> dict:
    doc = build_program_document(transmissions)
    return write_program_document(doc, filename)


def reconstruct_transmissions(doc: dict) -> list[Transmission]:
    """Rebuild the transmissions recorded in a program document."""

    entries = doc.get("transmissions")
    if not isinstance(entries, list):
        raise ValueError("Program document is missing its transmissions")

    transmissions = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("message"), list):
            raise ValueError(f"Malformed transmission entry: {entry!r}")
        actor = lexeme_from_dict(entry.get("actor") or {})
        if actor.kind is not LexemeKind.IDENTIFIER:
            raise ValueError(
                f"Actor reference {actor.content!r} at line {actor.line} "
                "is not an identifier"
            )
        parts = [lexeme_from_dict(part) for part in entry["message"]]
        transmissions.append(Transmission(ActorReference(actor), Message(parts)))
    return transmissions


def verify_program_document(doc: dict) -> bool:
    """Ensure the recorded evaluation matches a fresh evaluation."""

    if not isinstance(doc, dict) or "tortuga_version" not in doc:
        raise ValueError("Not a Tortuga program document")
    evaluation = doc.get("evaluation")
    if not isinstance(evaluation, dict) or "output" not in evaluation:
        raise ValueError("Program document is missing its evaluation")

    transmissions = reconstruct_transmissions(doc)
    expected = evaluate_outputs(transmissions)
    if evaluation["output"] != expected:
        raise ValueError(
            f"Recorded output {evaluation['output']!r} does not match "
            f"re-evaluated output {expected!r}"
        )
    return True


def load_program_document(filename) -> dict:
    """Load and verify a program document."""

    with open(filename, "r", encoding="utf-8") as f:
        doc = json.load(f)
    verify_program_document(doc)
    return doc


def reexecute_program(filename, output: Optional[TextIO] = None) -> list[Transmission]:
    """Load a program document and interpret its transmissions again."""

    doc = load_program_document(filename)
    print(f"Loaded Tortuga program v{doc['tortuga_version']} ({filename})")
    transmissions = reconstruct_transmissions(doc)
    Interpreter(transmissions, output).interpret()
    return transmissions


def canonicalize_document(doc: dict) -> dict:
    """
    Normalize a program document so semantically identical programs
    produce identical JSON strings regardless of when they were exported.
    """

    def sort_dict(d):
        if isinstance(d, dict):
            return {k: sort_dict(v) for k, v in sorted(d.items()) if k not in VOLATILE_FIELDS}
        elif isinstance(d, list):
            return [sort_dict(x) for x in d]
        else:
            return d

    return sort_dict(doc)


def hash_program_document(doc: dict) -> str:
    """Compute SHA-256 hash of an in-memory program document."""
    canon = canonicalize_document(doc)
    data = json.dumps(canon, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def hash_program(filename) -> str:
    doc = load_program_document(filename)
    h = hash_program_document(doc)
    print(f"SHA256({filename}) = {h}")
    return h


def _describe_entry(entry: dict) -> str:
    parts = " ".join(part["content"] for part in entry["message"])
    line = entry["actor"]["line"]
    return f"line {line}: ({entry['actor']['content']}{' ' + parts if parts else ''})"


def diff_programs(file_a, file_b) -> bool:
    """Compare two program documents; return ``True`` when they are identical."""

    a = load_program_document(file_a)
    b = load_program_document(file_b)
    ha, hb = hash_program_document(a), hash_program_document(b)
    if ha == hb:
        print(f"✓ Programs are identical ({ha})")
        return True

    print(f"✗ Programs differ\n  {str(file_a)[:30]}…: {ha}\n  {str(file_b)[:30]}…: {hb}")

    ta, tb = a["transmissions"], b["transmissions"]
    for ea, eb in zip(ta, tb):
        if canonicalize_document(ea) != canonicalize_document(eb):
            print(f"    - {_describe_entry(ea)}\n    + {_describe_entry(eb)}")
    if len(ta) != len(tb):
        print(f"  • Transmission count differs: {len(ta)} vs {len(tb)}")

    oa, ob = a["evaluation"]["output"], b["evaluation"]["output"]
    if oa != ob:
        print(f"  • Output differs: {oa} vs {ob}")
    return False


__all__ = [
    "build_program_document",
    "canonicalize_document",
    "diff_programs",
    "evaluate_outputs",
    "export_program",
    "hash_program",
    "hash_program_document",
    "lexeme_from_dict",
    "lexeme_to_dict",
    "load_program_document",
    "reconstruct_transmissions",
    "reexecute_program",
    "transmission_to_dict",
    "verify_program_document",
    "write_program_document",
]
