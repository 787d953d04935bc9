"""Command-line interface for the Tortuga runtime."""
from __future__ import annotations

import argparse
import logging
import sys

from ..constants import DEFAULT_ENCODING, REPL_HISTORY_LIMIT
from ..errors import TortugaError
from ..reader import FileReader
from .analysis import export_graphviz, print_lexemes, print_transmissions
from .document import diff_programs, export_program, hash_program, reexecute_program
from .interpreter import Interpreter
from .pipeline import lex, parse

VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_logging(verbosity=0):
    level = VERBOSITY_LEVELS[min(verbosity, len(VERBOSITY_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("tortuga").setLevel(level)
    return level


def run_repl(history_limit=REPL_HISTORY_LIMIT):
    """Interactive Tortuga prompt, one transmission per entered line."""

    print("Tortuga REPL — enter transmissions such as (add 1 2) (:help for help)")
    history = []
    interpreter = Interpreter([])
    line_number = 1

    while True:
        try:
            line = input(f"tortuga:{line_number:03d}> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith(":"):
            cmd = stripped.split()[0]
            if cmd in (":quit", ":exit"):
                break
            if cmd == ":help":
                print("Commands: :help, :quit, :history")
                print("Actors: add, subtract, multiply — e.g. (multiply 2 3 4)")
                print(f"History: last {history_limit} lines cached.")
                continue
            if cmd == ":history":
                if not history:
                    print("No history yet.")
                for index, entry in history:
                    print(f"  [{index:03d}] {entry}")
                continue
            print(f"Unknown command: {cmd}")
            continue

        try:
            for transmission in parse(stripped + "\n"):
                value = interpreter.evaluate(transmission)
                if value is not None:
                    print(value)
        except TortugaError as exc:
            print(f"✗ {exc}")
            continue

        history.append((line_number, stripped))
        if len(history) > history_limit:
            history.pop(0)
        line_number += 1


def build_parser():
    argp = argparse.ArgumentParser(
        prog="tortuga",
        description="Tortuga — send integer messages to built-in actors",
    )

    argp.add_argument("path", nargs="?", help="Tortuga source file to interpret")
    argp.add_argument("--src", help="Inline Tortuga source instead of a file")
    argp.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Text encoding of the source file (default: {DEFAULT_ENCODING})",
    )
    argp.add_argument(
        "--lexemes", action="store_true", help="Print the lexemes before running"
    )
    argp.add_argument(
        "--transmissions",
        action="store_true",
        help="Print the parsed transmissions before running",
    )
    argp.add_argument(
        "--export", metavar="FILE", help="Write the parsed program as a JSON document"
    )
    argp.add_argument("--load", metavar="FILE", help="Re-execute a program document")
    argp.add_argument("--hash", metavar="FILE", help="Compute hash of a program document")
    argp.add_argument(
        "--diff",
        nargs=2,
        metavar=("A", "B"),
        help="Compare two program documents",
    )
    argp.add_argument(
        "--viz",
        metavar="OUTPUT",
        help="Export a Graphviz rendering of the program (.dot or .svg)",
    )
    argp.add_argument("--repl", action="store_true", help="Start an interactive REPL")
    argp.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v info, -vv debug)",
    )
    return argp


def parse_args(args):
    return build_parser().parse_args(args)


def _run_program(params):
    if params.src is not None:
        source = params.src
    else:
        source = FileReader(params.path, params.encoding)

    if params.lexemes:
        print_lexemes(lex(source))

    transmissions = parse(source)
    if params.transmissions:
        print_transmissions(transmissions)
    if params.export:
        export_program(transmissions, params.export)
    if params.viz:
        export_graphviz(transmissions, params.viz)

    Interpreter(transmissions).interpret()


def main(args):
    params = parse_args(args)
    configure_logging(params.verbose)

    try:
        if params.diff:
            diff_programs(params.diff[0], params.diff[1])
        elif params.hash:
            hash_program(params.hash)
        elif params.load:
            reexecute_program(params.load)
        elif params.repl:
            run_repl()
        elif params.src is not None or params.path:
            _run_program(params)
        else:
            build_parser().print_usage()
            return 2
    except TortugaError as exc:
        print(f"✗ {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"✗ File not found: {exc.filename}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"✗ Invalid program document: {exc}", file=sys.stderr)
        return 1
    return 0


def run():  # pragma: no cover
    sys.exit(main(sys.argv[1:]))


__all__ = [
    "build_parser",
    "configure_logging",
    "main",
    "parse_args",
    "run",
    "run_repl",
]


if __name__ == "__main__":  # pragma: no cover
    run()
