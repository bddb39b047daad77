"""Common base classes and utilities for core functionality."""

from .base_scenario import BaseScenario

__all__ = ["BaseScenario"]
