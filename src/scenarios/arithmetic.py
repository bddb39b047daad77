"""Divide two user-supplied integers."""

from src.core.common.base_scenario import BaseScenario
from src.core.input_source import Console, InputSource, read_validated_int
from src.report.models import ErrorKind


def truncating_divide(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class DivideScenario(BaseScenario):
    key = "divide"
    number = 6
    title = "Divide two user-supplied integers"
    handled_errors = ((ZeroDivisionError, ErrorKind.DIVISION_BY_ZERO),)

    def _perform(self, source: InputSource, console: Console) -> str:
        numerator = read_validated_int(source, console, "Enter a numerator: ")
        denominator = read_validated_int(source, console, "Enter a denominator: ")
        return f"Result: {truncating_divide(numerator, denominator)}"
