"""Program graphs and listings for parsed Tortuga programs."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import networkx as nx
import pydot

from .interpreter import Operation
from .lexical import Lexeme
from .syntax import Transmission

BUILTIN_COLOR = "#8BC34A"
UNKNOWN_COLOR = "#B0BEC5"
RAW_SUFFIXES = (".dot", ".gv")


def _line_node(transmission: Transmission) -> str:
    return f"line_{transmission.line}"


def _actor_node(identifier: str) -> str:
    return f"actor_{identifier}"


def transmission_graph(transmissions: Iterable[Transmission]) -> nx.MultiDiGraph:
    """Build a graph linking each source line to the actor it addresses."""

    graph = nx.MultiDiGraph()
    for transmission in transmissions:
        identifier = transmission.actor_reference.identifier
        parts = transmission.message.parts
        actor = _actor_node(identifier)
        if actor not in graph:
            graph.add_node(
                actor,
                kind="actor",
                identifier=identifier,
                builtin=Operation.from_identifier(identifier) is not None,
            )
        line = _line_node(transmission)
        graph.add_node(
            line,
            kind="transmission",
            line=transmission.line,
            identifier=identifier,
            parts=parts,
        )
        graph.add_edge(line, actor, parts=parts)
    return graph


def actor_usage(transmissions: Iterable[Transmission]) -> dict[str, int]:
    """Return how many transmissions address each actor."""

    graph = transmission_graph(transmissions)
    return {
        data["identifier"]: graph.in_degree(node)
        for node, data in graph.nodes(data=True)
        if data["kind"] == "actor"
    }


def build_graphviz(transmissions: Iterable[Transmission]) -> pydot.Dot:
    graph = transmission_graph(transmissions)
    dot = pydot.Dot(
        "tortuga_program",
        graph_type="digraph",
        rankdir="LR",
        fontname="Helvetica",
    )

    program = pydot.Cluster(
        "program",
        label="program",
        color="#7f8c8d",
        fontname="Helvetica",
        fontsize="10",
        style="rounded",
    )
    lines = sorted(
        (data["line"], node)
        for node, data in graph.nodes(data=True)
        if data["kind"] == "transmission"
    )
    for line, node in lines:
        program.add_node(
            pydot.Node(node, label=f"line {line}", shape="box", fontname="Helvetica")
        )
    dot.add_subgraph(program)

    for node, data in graph.nodes(data=True):
        if data["kind"] != "actor":
            continue
        dot.add_node(
            pydot.Node(
                node,
                label=data["identifier"],
                shape="ellipse",
                style="filled" if data["builtin"] else "dashed",
                fillcolor=BUILTIN_COLOR if data["builtin"] else UNKNOWN_COLOR,
                fontname="Helvetica",
            )
        )

    for source, target, data in graph.edges(data=True):
        label = " ".join(str(part) for part in data["parts"]) or "(none)"
        dot.add_edge(pydot.Edge(source, target, label=label, color="#34495e"))
    return dot


def export_graphviz(transmissions: Iterable[Transmission], output_path) -> Path:
    """Write a Graphviz rendering of the program.

    ``.dot``/``.gv`` paths receive the Graphviz source; any other suffix is
    rendered to SVG, which requires the Graphviz binaries.
    """

    dot = build_graphviz(transmissions)
    output_path = Path(output_path)
    if output_path.parent and not output_path.parent.exists():
        output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_path.suffix in RAW_SUFFIXES:
        output_path.write_text(dot.to_string(), encoding="utf-8")
    else:  # pragma: no cover - needs the dot executable
        dot.write_svg(str(output_path))
    print(f"  ✓ Graphviz visualization exported → {output_path}")
    return output_path


def print_lexemes(lexemes: Iterable[Lexeme]) -> None:
    for lexeme in lexemes:
        print(f"{lexeme.line:>4}:{lexeme.column:<4} {lexeme.kind.value:<22} {lexeme.content!r}")


def print_transmissions(transmissions: Iterable[Transmission]) -> None:
    for transmission in transmissions:
        parts = ", ".join(str(part) for part in transmission.message.parts)
        print(f"line {transmission.line}: {transmission.actor_reference.identifier} ← [{parts}]")


__all__ = [
    "actor_usage",
    "build_graphviz",
    "export_graphviz",
    "print_lexemes",
    "print_transmissions",
    "transmission_graph",
]
