"""Scenario registry for managing available demonstrations."""

import logging
from typing import Any

from .common.base_scenario import BaseScenario
from .config import DemoConfig

logger = logging.getLogger(__name__)


class ScenarioRegistry:
    """
    Registry for managing available scenarios.

    Maps scenario keys to their corresponding scenario classes, enabling
    selection by key and instantiation with a shared run configuration.
    """

    def __init__(self):
        """Initialize the scenario registry."""
        self._scenarios: dict[str, type[BaseScenario]] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def register_scenario(
        self, scenario_key: str, scenario_class: type[BaseScenario]
    ) -> None:
        """
        Register a scenario class under a key.

        Args:
            scenario_key: The key identifying the scenario (e.g., 'divide')
            scenario_class: The scenario class to register

        Raises:
            ValueError: If scenario_key is empty or scenario_class is invalid
        """
        if not scenario_key or not scenario_key.strip():
            raise ValueError("Scenario key cannot be empty")

        if not scenario_class:
            raise ValueError("Scenario class cannot be None")

        scenario_key = scenario_key.strip().lower()

        if scenario_key in self._scenarios:
            self._logger.warning(
                f"Overwriting existing scenario registration for key '{scenario_key}'"
            )

        self._scenarios[scenario_key] = scenario_class
        self._logger.debug(
            f"Registered scenario '{scenario_class.__name__}' for key '{scenario_key}'"
        )

    def get_scenario_class(self, scenario_key: str) -> type[BaseScenario]:
        """
        Get the scenario class for a given key.

        Raises:
            ValueError: If the key is not registered
        """
        if not scenario_key:
            raise ValueError("Scenario key cannot be empty")

        scenario_key = scenario_key.strip().lower()

        if scenario_key not in self._scenarios:
            available_keys = self.get_available_keys()
            available_str = ", ".join(available_keys) if available_keys else "none"
            raise ValueError(
                f"Unknown scenario '{scenario_key}'. "
                f"Available scenarios: {available_str}"
            )

        return self._scenarios[scenario_key]

    def create_scenario_instance(
        self, scenario_key: str, config: DemoConfig | None = None
    ) -> BaseScenario:
        """
        Create an instance of the scenario registered under `scenario_key`.

        Args:
            scenario_key: The scenario key to instantiate
            config: Run configuration handed to the scenario

        Raises:
            ValueError: If the key is not registered
            RuntimeError: If instantiation fails
        """
        scenario_class = self.get_scenario_class(scenario_key)

        try:
            return scenario_class(config)
        except Exception as e:
            raise RuntimeError(
                f"Failed to create instance of scenario '{scenario_class.__name__}' "
                f"for key '{scenario_key}': {e}"
            ) from e

    def create_all(
        self, keys: list[str] | None = None, config: DemoConfig | None = None
    ) -> list[BaseScenario]:
        """
        Instantiate scenarios in canonical order.

        Args:
            keys: Subset of keys to instantiate; all registered when None
            config: Run configuration handed to every scenario

        Raises:
            ValueError: If any key is not registered
        """
        selected = self.get_available_keys()
        if keys is not None:
            for key in keys:
                self.get_scenario_class(key)
            wanted = {key.strip().lower() for key in keys}
            selected = [k for k in selected if k in wanted]
        return [self.create_scenario_instance(k, config) for k in selected]

    def get_available_keys(self) -> list[str]:
        """Get registered scenario keys ordered by scenario number."""
        return sorted(
            self._scenarios, key=lambda k: (self._scenarios[k].number, k)
        )

    def is_key_available(self, scenario_key: str) -> bool:
        if not scenario_key:
            return False

        return scenario_key.strip().lower() in self._scenarios

    def get_scenario_info(self, scenario_key: str) -> dict[str, Any]:
        """
        Get information about a registered scenario.

        Raises:
            ValueError: If the key is not registered
        """
        scenario_class = self.get_scenario_class(scenario_key)

        try:
            instance = self.create_scenario_instance(scenario_key)
            return instance.get_scenario_info()
        except Exception as e:
            self._logger.warning(
                f"Could not get scenario info from instance for '{scenario_key}': {e}"
            )
            # Fallback to basic class info
            return {
                "key": scenario_key,
                "number": scenario_class.number,
                "title": scenario_class.title,
                "error": f"Could not instantiate: {e}",
            }

    def clear(self) -> None:
        """Clear all registered scenarios."""
        self._scenarios.clear()
        self._logger.debug("Cleared all scenario registrations")

    def __len__(self) -> int:
        return len(self._scenarios)

    def __contains__(self, scenario_key: str) -> bool:
        """Check if a scenario key is registered (supports 'in' operator)."""
        return self.is_key_available(scenario_key)


# Global scenario registry instance
_global_registry = ScenarioRegistry()


def get_global_registry() -> ScenarioRegistry:
    """Get the global scenario registry instance."""
    return _global_registry


def register_builtin_scenarios() -> None:
    """Register all built-in scenarios with the global registry."""
    # Import here to avoid circular imports
    from src.scenarios import BUILTIN_SCENARIOS

    registry = get_global_registry()

    # Only register if not already registered to avoid duplicate warnings
    for scenario_class in BUILTIN_SCENARIOS:
        if not registry.is_key_available(scenario_class.key):
            registry.register_scenario(scenario_class.key, scenario_class)
