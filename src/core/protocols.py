from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from src.core.input_source import Console, InputSource
    from src.report.models import ScenarioResult


class Scenario(Protocol):
    """Defines the contract for a single error-handling demonstration."""

    key: str
    number: int
    title: str

    def execute(
        self, source: "InputSource", console: "Console"
    ) -> "ScenarioResult":
        """
        Run the demonstration and report its outcome on the console.

        Args:
            source: Shared console input handle
            console: Console the single report line is written to

        Returns:
            The classified outcome of this invocation
        """
        ...

    def get_scenario_info(self) -> dict[str, Any]:
        """
        Get information about this scenario.

        Returns:
            Dictionary with scenario metadata (key, number, title, handled kinds)
        """
        ...
