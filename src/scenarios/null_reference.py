"""Invoke a method on a value that is known to be absent."""

from src.core.common.base_scenario import BaseScenario
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind


class NullReferenceScenario(BaseScenario):
    key = "null-reference"
    number = 7
    title = "Invoke a method on an absent reference"
    handled_errors = ((AttributeError, ErrorKind.NULL_REFERENCE_ACCESS),)

    def _perform(self, source: InputSource, console: Console) -> str:
        text: str | None = None
        stripped = text.strip()  # type: ignore[union-attr]
        return f"Stripped text: {stripped}"
