"""Parse a duration and pause for that long."""

import time
from typing import Callable

from src.core.common.base_scenario import BaseScenario
from src.core.config import DemoConfig
from src.core.exceptions import ValidationError, WaitInterruptedError
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind


class SleepScenario(BaseScenario):
    key = "sleep"
    number = 10
    title = "Parse a duration and pause execution"
    handled_errors = ((WaitInterruptedError, ErrorKind.INTERRUPTED_WAIT),)

    def __init__(
        self,
        config: DemoConfig | None = None,
        sleeper: Callable[[float], None] = time.sleep,
    ):
        super().__init__(config)
        self._sleeper = sleeper

    def _perform(self, source: InputSource, console: Console) -> str:
        console.prompt("Enter a sleep duration in milliseconds: ")
        if not source.has_next_int(bits=64):
            source.discard_token()
            raise ValidationError(
                "Duration must be a long integer.", field_name="duration", expected_type=int
            )

        duration = source.next_int(bits=64)
        if duration < 0:
            raise ValidationError(
                "Duration cannot be negative.", field_name="duration", actual_value=duration
            )
        if duration > self.config.max_sleep_ms:
            raise ValidationError(
                f"Duration cannot exceed {self.config.max_sleep_ms} ms.",
                field_name="duration",
                actual_value=duration,
            )

        try:
            self._sleeper(duration / 1000)
        except KeyboardInterrupt as e:
            raise WaitInterruptedError() from e
        return f"Slept for {duration} ms."
