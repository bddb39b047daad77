"""Demonstration runner for executing scenarios in sequence."""

import logging
from typing import TextIO

from src.report.models import ScenarioResult

from .config import DemoConfig
from .exceptions import InputExhaustedError
from .input_source import Console, InputSource
from .protocols import Scenario
from .scenario_registry import get_global_registry, register_builtin_scenarios

logger = logging.getLogger(__name__)

INPUT_EXHAUSTED_MESSAGE = "Input exhausted; remaining scenarios skipped."


class DemoRunner:
    """
    Runs scenarios one after another over a single shared input source.

    A scenario catches and reports the failures it demonstrates, so one
    scenario failing never stops the next one from running. Errors a
    scenario does not classify are logged and propagate to the caller.
    """

    def __init__(self, scenarios: list[Scenario] | None = None):
        """
        Initialize the runner.

        Args:
            scenarios: Scenarios to execute in order
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self._scenarios: list[Scenario] = list(scenarios or [])

    def add_scenario(self, scenario: Scenario) -> "DemoRunner":
        """
        Add a scenario to the end of the sequence.

        Returns:
            Self for method chaining
        """
        self._scenarios.append(scenario)
        return self

    def clear_scenarios(self) -> "DemoRunner":
        self._scenarios.clear()
        return self

    def get_scenarios(self) -> list[Scenario]:
        return self._scenarios.copy()

    def run(self, source: InputSource, console: Console) -> list[ScenarioResult]:
        """
        Execute every configured scenario in order.

        Args:
            source: Shared console input handle
            console: Console receiving prompts and report lines

        Returns:
            Results of the scenarios that ran, in order

        Raises:
            ValueError: If no scenarios are configured
        """
        if not self._scenarios:
            raise ValueError("No scenarios configured")

        self._logger.info(f"Starting demonstration of {len(self._scenarios)} scenarios")
        results: list[ScenarioResult] = []

        for i, scenario in enumerate(self._scenarios):
            self._logger.info(
                f"Executing scenario {i + 1}/{len(self._scenarios)}: {scenario.key}"
            )

            try:
                result = scenario.execute(source, console)
            except InputExhaustedError:
                skipped = len(self._scenarios) - i
                self._logger.warning(
                    f"Console input exhausted at '{scenario.key}', "
                    f"skipping {skipped} scenario(s)"
                )
                console.write_line()
                console.write_line(INPUT_EXHAUSTED_MESSAGE)
                break
            except Exception as e:
                self._logger.error(
                    f"Scenario {scenario.key} raised an unclassified "
                    f"{type(e).__name__}: {e}"
                )
                raise

            self._logger.debug(
                f"Scenario {scenario.key} reported "
                f"{result.kind.value if result.kind else 'success'}"
            )
            results.append(result)

        self._logger.info("Demonstration completed")
        return results


def run_demonstrations(
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
    config: DemoConfig | None = None,
    only: list[str] | None = None,
) -> list[ScenarioResult]:
    """
    Run the built-in scenarios against the console (or the given streams).

    Args:
        input_stream: Text stream to read from; stdin when None
        output_stream: Text stream to write to; stdout when None
        config: Run configuration; defaults when None
        only: Keys of the scenarios to run; all when None

    Returns:
        Results of the scenarios that ran, in order
    """
    register_builtin_scenarios()
    scenarios = get_global_registry().create_all(only, config)

    runner = DemoRunner(scenarios)
    return runner.run(InputSource(input_stream), Console(output_stream))
