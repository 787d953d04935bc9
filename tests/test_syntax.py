import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from tortuga import (  # noqa: E402
    ActorReference,
    Lexeme,
    LexemeKind,
    Lexer,
    Message,
    MessageParseError,
    Parser,
    Transmission,
    TransmissionSyntaxError,
    create_transmission,
    lex,
    parse,
)


def test_parse_single_transmission():
    transmissions = parse("(add 1 2)\n")

    assert len(transmissions) == 1
    transmission = transmissions[0]
    assert transmission.actor_reference.identifier == "add"
    assert transmission.message.parts == [1, 2]
    assert transmission.line == 1


def test_parse_skips_empty_and_blank_lines():
    source = "\n(add 1)\n\n  \t\n(multiply 2 3)\r\n"
    transmissions = parse(source)

    assert [t.actor_reference.identifier for t in transmissions] == ["add", "multiply"]
    assert [t.line for t in transmissions] == [2, 5]
    assert [t.message.parts for t in transmissions] == [[1], [2, 3]]


def test_final_line_without_terminator_is_parsed():
    transmissions = parse("(subtract 9 4)")
    assert transmissions[0].message.parts == [9, 4]


def test_transmission_without_parts():
    transmission = parse("(multiply)\n")[0]
    assert transmission.message.parts == []
    assert len(transmission.message) == 0


def test_blanks_inside_delimiters_are_insignificant():
    transmission = parse("(  add\t1   2 )\n")[0]
    assert transmission.actor_reference.identifier == "add"
    assert transmission.message.parts == [1, 2]


def test_empty_input_parses_to_nothing():
    assert parse("") == []
    assert parse("\n\r\n\n") == []


def test_round_trip_preserves_identifier_and_integers():
    transmission = parse("(multiply 007 12345678901234567890 0)\n")[0]
    assert transmission.actor_reference.identifier == "multiply"
    assert transmission.message.parts == [7, 12345678901234567890, 0]


@pytest.mark.parametrize(
    "source, content, column",
    [
        ("add 1 2)\n", "add", 1),
        (")add 1)\n", ")", 1),
        ("(add 1 2\n", "2", 8),
        ("(add 1 2(\n", "(", 9),
        ("(add 1 x)\n", "x", 8),
        ("(1 2)\n", "1", 2),
        ("( )\n", ")", 3),
    ],
)
def test_malformed_lines_raise_syntax_error(source, content, column):
    with pytest.raises(TransmissionSyntaxError) as excinfo:
        parse(source)

    err = excinfo.value
    assert err.content == content
    assert (err.line, err.column) == (1, column)
    assert f"line 1, column {column}" in str(err)


def test_syntax_error_aborts_the_whole_input():
    with pytest.raises(TransmissionSyntaxError) as excinfo:
        parse("(add 1)\n(add 2)\n(add x y)\n")
    assert excinfo.value.line == 3
    assert excinfo.value.kind == "identifier"


def test_parser_yields_lines_lazily():
    parser = iter(Parser(Lexer("(add 1)\n(2)\n")))
    first = next(parser)
    assert first.actor_reference.identifier == "add"
    with pytest.raises(TransmissionSyntaxError):
        next(parser)


def test_create_transmission_from_lexemes():
    lexemes = list(lex("(add 3 4)"))
    transmission = create_transmission(lexemes)
    assert transmission == Transmission(
        ActorReference(lexemes[1]), Message(lexemes[2:4])
    )


def test_create_transmission_requires_lexemes():
    with pytest.raises(ValueError):
        create_transmission([])

    with pytest.raises(TransmissionSyntaxError) as excinfo:
        create_transmission(list(lex("(")))
    assert excinfo.value.content == "("


def test_message_parts_reject_non_integer_lexemes():
    message = Message(
        [
            Lexeme(LexemeKind.INTEGER, 1, 5, "1"),
            Lexeme(LexemeKind.IDENTIFIER, 1, 7, "two"),
        ]
    )

    with pytest.raises(MessageParseError) as excinfo:
        message.parts
    assert excinfo.value.lexeme.content == "two"
    assert "line 1, column 7" in str(excinfo.value)


def test_grammar_entities_are_immutable():
    transmission = parse("(add 1)\n")[0]
    with pytest.raises(AttributeError):
        transmission.message = Message([])
    assert isinstance(transmission.message.lexemes, tuple)
