"""Console input and output handles shared by every scenario."""

import io
import logging
import re
import sys
from typing import Final, TextIO

from .exceptions import InputExhaustedError, ValidationError

logger = logging.getLogger(__name__)

_INTEGER_TOKEN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

INVALID_INTEGER_MESSAGE: Final[str] = "Input must be an integer. Please try again."


def parse_int(token: str, bits: int = 32) -> int:
    """
    Parse a signed integer token that must fit in `bits` bits.

    Args:
        token: Raw whitespace-free token
        bits: Width of the signed range the value must fit in

    Returns:
        The parsed integer

    Raises:
        ValueError: If the token is not an integer or is out of range
    """
    if not _INTEGER_TOKEN.fullmatch(token):
        raise ValueError(f"invalid literal for int(): {token!r}")

    value = int(token)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"value {token!r} out of range for {bits}-bit integer")
    return value


def is_int(token: str, bits: int = 32) -> bool:
    try:
        parse_int(token, bits)
    except ValueError:
        return False
    return True


class Console:
    """Writes prompts and report lines to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdout

    def prompt(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def write_line(self, text: str = "") -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()


class InputSource:
    """
    Line and token reader over a single text stream.

    A line read following a token read returns the remainder of the line the
    token was taken from, which may be empty. Token reads skip any amount of
    whitespace, including blank lines.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdin
        if isinstance(self._stream, io.TextIOWrapper):
            # undecodable console bytes read as U+FFFD instead of aborting the run
            self._stream.reconfigure(errors="replace")
        self._pending: str | None = None
        self._logger = logger.getChild(self.__class__.__name__)

    def _read_raw_line(self) -> str:
        line = self._stream.readline()
        if line == "":
            self._logger.debug("End of console input reached")
            raise InputExhaustedError()
        return line.rstrip("\r\n")

    def read_line(self) -> str:
        """
        Return the next line without its line terminator.

        Raises:
            InputExhaustedError: If the stream is at end of input
        """
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        return self._read_raw_line()

    def _fill(self) -> str:
        while self._pending is None or not self._pending.strip():
            self._pending = self._read_raw_line()
        self._pending = self._pending.lstrip()
        return self._pending

    def peek_token(self) -> str:
        """Return the next whitespace-delimited token without consuming it."""
        return self._fill().split(maxsplit=1)[0]

    def next_token(self) -> str:
        """
        Consume and return the next whitespace-delimited token.

        Raises:
            InputExhaustedError: If no token remains in the stream
        """
        parts = self._fill().split(maxsplit=1)
        token = parts[0]
        # keep the remainder so a following line read behaves like a scanner
        self._pending = self._pending[len(token):]
        return token

    def discard_token(self) -> str:
        token = self.next_token()
        self._logger.debug(f"Discarded token: {token!r}")
        return token

    def has_next_int(self, bits: int = 32) -> bool:
        return is_int(self.peek_token(), bits)

    def next_int(self, bits: int = 32) -> int:
        """
        Consume the next token as an integer.

        Raises:
            ValidationError: If the token is not an integer; the token is
                discarded before raising
        """
        token = self.next_token()
        try:
            return parse_int(token, bits)
        except ValueError as e:
            raise ValidationError(
                f"Expected an integer, got {token!r}",
                field_name="token",
                expected_type=int,
                actual_value=token,
            ) from e


def read_validated_int(
    source: InputSource, console: Console, prompt: str, bits: int = 32
) -> int:
    """
    Prompt until a well-formed integer token is entered and return it.

    Each malformed token is discarded exactly once before prompting again.
    The only way out without a value is running out of input.
    """
    while True:
        console.prompt(prompt)
        try:
            return source.next_int(bits)
        except ValidationError as e:
            logger.debug(f"Rejected integer input: {e}")
            console.write_line(INVALID_INTEGER_MESSAGE)
