"""Resolve a type from its dotted name."""

import builtins
import contextlib
import importlib
import io
from types import ModuleType

from src.core.common.base_scenario import BaseScenario
from src.core.exceptions import ValidationError
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind


class TypeResolutionError(LookupError):
    """Raised when a name does not resolve to a type."""


def _import_quietly(module_name: str) -> ModuleType:
    # importing runs module code; keep anything it prints off the console
    with contextlib.redirect_stdout(io.StringIO()):
        return importlib.import_module(module_name)


def resolve_type(name: str) -> type:
    """
    Resolve `module.QualName` (or a bare builtin name) to a type object.

    The named module is imported, so its top-level code runs. Output it
    writes to stdout is discarded and any error it raises is reported as a
    failed lookup.

    Raises:
        TypeResolutionError: If the module or attribute is missing, or the
            resolved object is not a type
    """
    module_name, _, qualname = name.rpartition(".")
    try:
        target = _import_quietly(module_name) if module_name else builtins
    except Exception as e:
        raise TypeResolutionError(name) from e

    obj: object = target
    for part in qualname.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            raise TypeResolutionError(name)

    if not isinstance(obj, type):
        raise TypeResolutionError(f"{name} is not a type")
    return obj


class ResolveTypeScenario(BaseScenario):
    key = "resolve-type"
    number = 5
    title = "Dynamically resolve a type by name"
    handled_errors = ((TypeResolutionError, ErrorKind.TYPE_RESOLUTION_FAILURE),)

    def _perform(self, source: InputSource, console: Console) -> str:
        console.prompt("Enter a class name to load: ")
        class_name = source.read_line()
        if not class_name:
            raise ValidationError("Class name cannot be empty.", field_name="class_name")

        resolved = resolve_type(class_name.strip())
        return f"Resolved type: {resolved.__module__}.{resolved.__qualname__}"
