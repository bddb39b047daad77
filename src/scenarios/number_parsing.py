"""Parse a user-entered token as an integer."""

import re

from src.core.common.base_scenario import BaseScenario
from src.core.exceptions import ValidationError
from src.core.input_source import Console, InputSource, parse_int
from src.report.models import ErrorKind

_DIGITS = re.compile(r"[0-9]+")


class NumberFormatError(ValueError):
    """Raised when a digit string cannot be represented as an integer."""


class ParseNumberScenario(BaseScenario):
    key = "parse-number"
    number = 11
    title = "Parse a user-entered token as an integer"
    handled_errors = ((NumberFormatError, ErrorKind.MALFORMED_NUMERIC_INPUT),)

    def _perform(self, source: InputSource, console: Console) -> str:
        console.prompt("Enter a number: ")
        token = source.next_token()
        if not _DIGITS.fullmatch(token):
            raise ValidationError(
                "Input must be a number.", field_name="number", actual_value=token
            )

        try:
            number = parse_int(token)
        except ValueError as e:
            raise NumberFormatError(f'For input string: "{token}"') from e
        return f"Parsed number: {number}"
