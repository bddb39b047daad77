"""Base implementation for scenarios."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from src.core.config import DemoConfig
from src.core.exceptions import (
    CatalogueError,
    InputExhaustedError,
    ValidationError,
)
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind, ScenarioResult

from ..protocols import Scenario

logger = logging.getLogger(__name__)


class BaseScenario(Scenario, ABC):
    """
    Abstract base class for scenarios.

    Wraps a single fallible operation in the catch-classify-report template
    so that concrete scenarios only describe the operation itself.

    Subclasses must implement:
    - _perform(): Run the operation and return the success message

    Subclasses declare:
    - key, number, title: Registry metadata
    - handled_errors: Exception types this scenario classifies, in match order

    Errors raised by `_perform()` that are neither a `ValidationError` nor
    listed in `handled_errors` propagate to the caller unchanged.
    """

    key: ClassVar[str] = ""
    number: ClassVar[int] = 0
    title: ClassVar[str] = ""
    handled_errors: ClassVar[tuple[tuple[type[Exception], ErrorKind], ...]] = ()

    def __init__(self, config: DemoConfig | None = None):
        """
        Initialize the scenario.

        Args:
            config: Run configuration; defaults are used when omitted
        """
        self.config = config or DemoConfig()
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def _perform(self, source: InputSource, console: Console) -> str:
        """
        Run the demonstrated operation.

        Args:
            source: Shared console input handle
            console: Console used for prompts

        Returns:
            Message reported when the operation does not fail

        Raises:
            ValidationError: When a value read from input violates a precondition
        """
        pass

    def classify(self, error: Exception) -> ErrorKind | None:
        """Return the kind for a raised error, or None if it is not handled."""
        if isinstance(error, InputExhaustedError):
            return None
        if isinstance(error, ValidationError):
            return ErrorKind.VALIDATION_FAILURE
        for error_type, kind in self.handled_errors:
            if isinstance(error, error_type):
                return kind
        return None

    def describe_error(self, error: Exception) -> str:
        """Message reported for a classified error."""
        if isinstance(error, CatalogueError):
            return error.message
        return str(error)

    def execute(self, source: InputSource, console: Console) -> ScenarioResult:
        """
        Run the operation, classify any failure and write one report line.

        Args:
            source: Shared console input handle
            console: Console the report line is written to

        Returns:
            The classified outcome
        """
        self._logger.debug(f"Executing scenario {self.number}: {self.key}")

        try:
            message = self._perform(source, console)
            result = ScenarioResult(scenario=self.key, message=message)
        except Exception as e:
            kind = self.classify(e)
            if kind is None:
                raise
            self._logger.debug(f"Classified {type(e).__name__} as {kind.value}")
            result = ScenarioResult(
                scenario=self.key, kind=kind, message=self.describe_error(e)
            )

        console.write_line(result.render())
        return result

    def get_scenario_info(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "number": self.number,
            "title": self.title,
            "handles": [kind.value for _, kind in self.handled_errors],
        }
