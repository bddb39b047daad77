"""Unit tests for the absent-reference scenario."""

from __future__ import annotations

import io

from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind
from src.scenarios.null_reference import NullReferenceScenario


def test_method_call_on_none_is_classified() -> None:
    out = io.StringIO()
    result = NullReferenceScenario().execute(InputSource(io.StringIO("")), Console(out))

    assert result.kind is ErrorKind.NULL_REFERENCE_ACCESS
    assert "NoneType" in result.message
    assert out.getvalue().startswith("AttributeError caught: ")
