"""Cast a value to a type its runtime type does not support."""

from typing import TypeVar

from src.core.common.base_scenario import BaseScenario
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind

T = TypeVar("T")


def checked_cast(value: object, target: type[T]) -> T:
    """Return `value` typed as `target`, or raise TypeError if it is not one."""
    if not isinstance(value, target):
        raise TypeError(
            f"{type(value).__name__} object cannot be cast to {target.__name__}"
        )
    return value


class CastValueScenario(BaseScenario):
    key = "cast-value"
    number = 9
    title = "Cast a value to an incompatible type"
    handled_errors = ((TypeError, ErrorKind.INVALID_TYPE_CAST),)

    def _perform(self, source: InputSource, console: Console) -> str:
        obj: object = 10
        text = checked_cast(obj, str)
        return f"Cast value: {text}"
