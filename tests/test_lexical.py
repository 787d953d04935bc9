import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from tortuga import (  # noqa: E402
    InvalidCharacterError,
    Lexeme,
    LexemeKind,
    Lexer,
    LexicalError,
    classify,
    lex,
)


def summarize(lexemes):
    return [(l.kind.value, l.content, l.line, l.column) for l in lexemes]


@pytest.mark.parametrize(
    "character, kind",
    [
        ("(", LexemeKind.MESSAGE_DELIMITER),
        (")", LexemeKind.MESSAGE_DELIMITER),
        ("\r", LexemeKind.CONCURRENCY_DELIMITER),
        ("\n", LexemeKind.CONCURRENCY_DELIMITER),
        ("7", LexemeKind.INTEGER),
        ("q", LexemeKind.IDENTIFIER),
        ("Z", LexemeKind.IDENTIFIER),
        (" ", LexemeKind.BLANK),
        ("\t", LexemeKind.BLANK),
    ],
)
def test_classify_groups_characters(character, kind):
    assert classify(character) is kind


@pytest.mark.parametrize("character", ["$", "-", "_", "[", "+", "."])
def test_classify_rejects_ungroupable_characters(character):
    assert classify(character) is None


def test_lexes_single_transmission_with_positions():
    lexemes = list(lex("(add 1 2)\r\n"))

    assert summarize(lexemes) == [
        ("message_delimiter", "(", 1, 1),
        ("identifier", "add", 1, 2),
        ("integer", "1", 1, 6),
        ("integer", "2", 1, 8),
        ("message_delimiter", ")", 1, 9),
        ("concurrency_delimiter", "\r\n", 1, 10),
    ]


def test_line_and_column_reset_after_delimiter():
    lexer = Lexer("(add 1 2)\r\n")
    list(lexer)
    assert lexer.line == 2
    assert lexer.column == 0


def test_second_line_starts_at_column_one():
    lexemes = list(lex("(add 1)\n(multiply 22)\n"))

    assert summarize(lexemes)[5:] == [
        ("message_delimiter", "(", 2, 1),
        ("identifier", "multiply", 2, 2),
        ("integer", "22", 2, 11),
        ("message_delimiter", ")", 2, 13),
        ("concurrency_delimiter", "\n", 2, 14),
    ]


def test_lone_line_terminator_is_one_lexeme():
    assert summarize(lex("\r\n")) == [("concurrency_delimiter", "\r\n", 1, 1)]


def test_consecutive_newlines_lex_as_separate_delimiters():
    assert summarize(lex("\n\n\r\n")) == [
        ("concurrency_delimiter", "\n", 1, 1),
        ("concurrency_delimiter", "\n", 2, 1),
        ("concurrency_delimiter", "\r\n", 3, 1),
    ]


def test_blank_lexemes_are_never_emitted():
    assert list(lex("   \t  ")) == []
    kinds = {l.kind for l in lex("( add\t 1    2 )")}
    assert LexemeKind.BLANK not in kinds


def test_adjacent_letters_and_digits_split():
    assert summarize(lex("abc123")) == [
        ("identifier", "abc", 1, 1),
        ("integer", "123", 1, 4),
    ]


def test_empty_input_yields_nothing():
    assert list(lex("")) == []


def test_invalid_character_reports_exact_position():
    with pytest.raises(InvalidCharacterError) as excinfo:
        list(lex("(add 1)\n(add $)\n"))

    err = excinfo.value
    assert err.character == "$"
    assert (err.line, err.column) == (2, 6)


def test_invalid_character_after_line_terminator_is_on_the_next_line():
    with pytest.raises(InvalidCharacterError) as excinfo:
        list(lex("(add 1)\n%"))
    assert (excinfo.value.line, excinfo.value.column) == (2, 1)

    with pytest.raises(InvalidCharacterError) as excinfo:
        list(lex("(add 1)\r\n\n@"))
    assert (excinfo.value.line, excinfo.value.column) == (3, 1)


def test_invalid_character_at_start():
    with pytest.raises(InvalidCharacterError) as excinfo:
        list(lex("#!"))
    assert (excinfo.value.line, excinfo.value.column) == (1, 1)


def test_lexing_is_lazy_until_the_offending_character():
    iterator = lex("(add 1)\n%")
    first = next(iterator)
    assert first.content == "("
    remaining = []
    with pytest.raises(InvalidCharacterError):
        for lexeme in iterator:
            remaining.append(lexeme.content)
    assert remaining == ["add", "1", ")", "\n"]


def test_stray_carriage_return_is_a_lexical_error():
    with pytest.raises(LexicalError) as excinfo:
        list(lex("(add 1)\r"))
    err = excinfo.value
    assert err.content == "\r"
    assert err.kind == "concurrency_delimiter"
    assert (err.line, err.column) == (1, 8)


def test_repeated_message_delimiters_fail_validation():
    with pytest.raises(LexicalError) as excinfo:
        list(lex("((add 1))\n"))
    assert excinfo.value.content == "(("
    assert "message_delimiter" in str(excinfo.value)


def test_lexemes_are_immutable_values():
    lexeme = Lexeme(LexemeKind.INTEGER, 1, 1, "4")
    extended = lexeme.extend("2")

    assert lexeme.content == "4"
    assert extended.content == "42"
    assert extended == Lexeme(LexemeKind.INTEGER, 1, 1, "42")
    with pytest.raises(AttributeError):
        lexeme.content = "5"


def test_lexer_accepts_any_character_iterable():
    assert [l.content for l in lex(iter(["(", "a", ")"]))] == ["(", "a", ")"]
