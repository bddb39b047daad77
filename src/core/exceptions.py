"""
Exception Catalogue Error Classes

Custom exceptions raised by the runner, the input source and the scenarios
themselves when a precondition is not met.
"""

from typing import Any


class CatalogueError(Exception):
    """Base exception for all errors raised by this project."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class ValidationError(CatalogueError):
    """Raised when a caller-supplied value violates a precondition."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        expected_type: type | None = None,
        actual_value: Any = None,
    ) -> None:
        context = {}
        if field_name:
            context["field_name"] = field_name
        if expected_type:
            context["expected_type"] = expected_type.__name__
        if actual_value is not None:
            context["actual_value"] = str(actual_value)
        super().__init__(message, "VALIDATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the validation error."""
        if "field_name" in self.context and "expected_type" in self.context:
            field = self.context["field_name"]
            expected = self.context["expected_type"]
            return f"Ensure '{field}' is of type {expected}"
        return "Check the value entered at the prompt"


class ConnectionFailureError(CatalogueError):
    """Raised when no database driver accepts a connection URL."""

    def __init__(self, message: str, url: str | None = None) -> None:
        context = {}
        if url:
            context["url"] = url
        super().__init__(message, "CONNECTION_FAILURE", context)


class ConfigLoadError(CatalogueError):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        context = {}
        if config_path:
            context["config_path"] = config_path
        super().__init__(message, "CONFIG_LOAD_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the configuration file."""
        return "Check that the file exists and is a YAML/JSON mapping of known keys"


class InputExhaustedError(CatalogueError, EOFError):
    """Raised by the input source when the console stream has no more data."""

    def __init__(self, message: str = "No more console input available") -> None:
        super().__init__(message, "INPUT_EXHAUSTED")


class WaitInterruptedError(CatalogueError):
    """Raised when a deliberate pause is cut short by an interrupt signal."""

    def __init__(self, message: str = "sleep interrupted") -> None:
        super().__init__(message, "WAIT_INTERRUPTED")
