"""
models.py – Scenario outcomes
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Classification tags and result records produced by each demonstration, plus
the report envelope written by `ReportWriter`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

SCHEMA_VERSION: str = "1.0.0"

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ErrorKind(str, Enum):
    """Classification applied to a caught failure for reporting purposes."""

    VALIDATION_FAILURE = "validation_failure"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    CONNECTION_FAILURE = "connection_failure"
    TYPE_RESOLUTION_FAILURE = "type_resolution_failure"
    DIVISION_BY_ZERO = "division_by_zero"
    NULL_REFERENCE_ACCESS = "null_reference_access"
    OUT_OF_BOUNDS_ACCESS = "out_of_bounds_access"
    INVALID_TYPE_CAST = "invalid_type_cast"
    INTERRUPTED_WAIT = "interrupted_wait"
    MALFORMED_NUMERIC_INPUT = "malformed_numeric_input"

    @property
    def label(self) -> str:
        """Console prefix used when reporting this kind."""
        return _LABELS[self]


_LABELS: Dict[ErrorKind, str] = {
    ErrorKind.VALIDATION_FAILURE: "Validation Error",
    ErrorKind.RESOURCE_NOT_FOUND: "OSError",
    ErrorKind.UNEXPECTED_END_OF_INPUT: "EOFError",
    ErrorKind.CONNECTION_FAILURE: "DatabaseError",
    ErrorKind.TYPE_RESOLUTION_FAILURE: "ImportError",
    ErrorKind.DIVISION_BY_ZERO: "ZeroDivisionError",
    ErrorKind.NULL_REFERENCE_ACCESS: "AttributeError",
    ErrorKind.OUT_OF_BOUNDS_ACCESS: "IndexError",
    ErrorKind.INVALID_TYPE_CAST: "TypeError",
    ErrorKind.INTERRUPTED_WAIT: "KeyboardInterrupt",
    ErrorKind.MALFORMED_NUMERIC_INPUT: "ValueError",
}


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class ScenarioResult(BaseModel):
    """Outcome of a single scenario invocation."""

    scenario: str = Field(..., description="Registry key of the scenario.")
    kind: Optional[ErrorKind] = Field(
        None, description="Failure classification; `None` on the success path."
    )
    message: str = Field(..., description="Human‑readable outcome message.")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def succeeded(self) -> bool:
        return self.kind is None

    def render(self) -> str:
        """Return the single console line reporting this outcome."""
        if self.kind is None:
            return self.message
        if self.kind is ErrorKind.VALIDATION_FAILURE:
            return f"{self.kind.label}: {self.message}"
        return f"{self.kind.label} caught: {self.message}"


class ReportEntry(BaseModel):
    """Serializable view of a `ScenarioResult`."""

    scenario: str
    kind: Optional[str] = None
    label: Optional[str] = None
    line: str

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_result(cls, result: ScenarioResult) -> ReportEntry:
        return cls(
            scenario=result.scenario,
            kind=result.kind.value if result.kind else None,
            label=result.kind.label if result.kind else None,
            line=result.render(),
        )


class DemoReport(BaseModel):
    """Envelope for a whole run, written to YAML on request."""

    schema_version: str = Field(SCHEMA_VERSION, description="Report schema version.")
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp of the run.",
    )
    entries: List[ReportEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _unique_scenarios(self) -> Self:
        seen = set()
        for entry in self.entries:
            if entry.scenario in seen:
                raise ValueError(f"Duplicate report entry for '{entry.scenario}'")
            seen.add(entry.scenario)
        return self


__all__ = [
    "SCHEMA_VERSION",
    "ErrorKind",
    "ScenarioResult",
    "ReportEntry",
    "DemoReport",
]
