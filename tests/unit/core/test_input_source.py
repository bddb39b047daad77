"""Unit tests for the console input source and the validated integer read."""

from __future__ import annotations

import io

import pytest

from src.core.exceptions import InputExhaustedError, ValidationError
from src.core.input_source import (
    INVALID_INTEGER_MESSAGE,
    Console,
    InputSource,
    is_int,
    parse_int,
    read_validated_int,
)


def make_source(text: str) -> InputSource:
    return InputSource(io.StringIO(text))


class TestParseInt:
    @pytest.mark.parametrize(
        "token, expected",
        [("0", 0), ("42", 42), ("+7", 7), ("-13", -13), ("007", 7)],
    )
    def test_valid_tokens(self, token: str, expected: int) -> None:
        assert parse_int(token) == expected

    @pytest.mark.parametrize("token", ["", "abc", "12a", "1.5", "--1", "+", "٣"])
    def test_malformed_tokens(self, token: str) -> None:
        with pytest.raises(ValueError):
            parse_int(token)

    def test_32_bit_bounds(self) -> None:
        assert parse_int("2147483647") == 2**31 - 1
        assert parse_int("-2147483648") == -(2**31)
        with pytest.raises(ValueError, match="out of range"):
            parse_int("2147483648")

    def test_64_bit_bounds(self) -> None:
        assert parse_int("2147483648", bits=64) == 2**31
        with pytest.raises(ValueError):
            parse_int("9223372036854775808", bits=64)

    def test_is_int(self) -> None:
        assert is_int("12") is True
        assert is_int("x") is False


class TestInputSourceLines:
    def test_read_line_strips_terminator(self) -> None:
        src = make_source("first\r\nsecond\n")
        assert src.read_line() == "first"
        assert src.read_line() == "second"

    def test_empty_line(self) -> None:
        assert make_source("\n").read_line() == ""

    def test_last_line_without_newline(self) -> None:
        assert make_source("tail").read_line() == "tail"

    def test_end_of_input_raises(self) -> None:
        src = make_source("")
        with pytest.raises(InputExhaustedError):
            src.read_line()

    def test_exhaustion_is_an_eof_error(self) -> None:
        with pytest.raises(EOFError):
            make_source("").next_token()


class TestInputSourceTokens:
    def test_tokens_across_lines(self) -> None:
        src = make_source("10 20\n\n   30\n")
        assert [src.next_token() for _ in range(3)] == ["10", "20", "30"]

    def test_peek_does_not_consume(self) -> None:
        src = make_source("abc def\n")
        assert src.peek_token() == "abc"
        assert src.peek_token() == "abc"
        assert src.next_token() == "abc"
        assert src.next_token() == "def"

    def test_line_after_token_returns_remainder(self) -> None:
        src = make_source("5 rest of line\nnext\n")
        assert src.next_token() == "5"
        assert src.read_line() == " rest of line"
        assert src.read_line() == "next"

    def test_line_after_last_token_on_line_is_empty(self) -> None:
        src = make_source("5\nnext\n")
        assert src.next_token() == "5"
        assert src.read_line() == ""
        assert src.read_line() == "next"

    def test_token_read_skips_blank_lines_until_exhausted(self) -> None:
        src = make_source("\n  \n")
        with pytest.raises(InputExhaustedError):
            src.next_token()

    def test_discard_token(self) -> None:
        src = make_source("junk 3\n")
        assert src.discard_token() == "junk"
        assert src.next_token() == "3"

    def test_has_next_int(self) -> None:
        src = make_source("2147483648\n")
        assert src.has_next_int() is False
        assert src.has_next_int(bits=64) is True
        assert src.next_int(bits=64) == 2147483648

    def test_next_int_rejects_and_consumes_token(self) -> None:
        src = make_source("nope 4\n")
        with pytest.raises(ValidationError) as exc_info:
            src.next_int()
        assert exc_info.value.context["actual_value"] == "nope"
        assert src.next_int() == 4


class TestConsole:
    def test_prompt_has_no_newline(self) -> None:
        out = io.StringIO()
        console = Console(out)
        console.prompt("Enter: ")
        console.write_line("done")
        assert out.getvalue() == "Enter: done\n"

    def test_blank_line(self) -> None:
        out = io.StringIO()
        Console(out).write_line()
        assert out.getvalue() == "\n"


class TestReadValidatedInt:
    def test_returns_first_valid_integer(self) -> None:
        out = io.StringIO()
        src = make_source("42\n")
        assert read_validated_int(src, Console(out), "Number: ") == 42
        assert out.getvalue() == "Number: "

    def test_discards_each_malformed_token_once(self) -> None:
        out = io.StringIO()
        src = make_source("abc 1.5\n-8 99\n")

        value = read_validated_int(src, Console(out), "Number: ")

        assert value == -8
        assert out.getvalue() == (
            f"Number: {INVALID_INTEGER_MESSAGE}\n"
            f"Number: {INVALID_INTEGER_MESSAGE}\n"
            "Number: "
        )
        # tokens after the accepted one are left untouched
        assert src.next_token() == "99"

    def test_out_of_range_token_is_retried(self) -> None:
        out = io.StringIO()
        src = make_source("99999999999 5\n")
        assert read_validated_int(src, Console(out), "> ") == 5
        assert out.getvalue().count(INVALID_INTEGER_MESSAGE) == 1

    def test_exhaustion_propagates(self) -> None:
        src = make_source("x y\n")
        with pytest.raises(InputExhaustedError):
            read_validated_int(src, Console(io.StringIO()), "> ")


class TestUndecodableInput:
    def test_invalid_utf8_is_replaced(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\n42\n"), encoding="utf-8")
        src = InputSource(stream)

        assert src.read_line() == "\ufffd"
        assert src.next_int() == 42

    def test_invalid_utf8_token_is_not_an_integer(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"\xfe\xff\n7\n"), encoding="utf-8")
        src = InputSource(stream)

        assert not src.has_next_int()
        assert src.discard_token() == "\ufffd\ufffd"
        assert src.next_int() == 7
