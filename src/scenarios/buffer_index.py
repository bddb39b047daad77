"""Index into a fixed-size buffer."""

from src.core.common.base_scenario import BaseScenario
from src.core.exceptions import ValidationError
from src.core.input_source import Console, InputSource, read_validated_int
from src.report.models import ErrorKind


def element_at(buffer: list[int], index: int) -> int:
    """Return `buffer[index]`; negative indices are out of bounds too."""
    if not 0 <= index < len(buffer):
        raise IndexError(f"Index {index} out of bounds for length {len(buffer)}")
    return buffer[index]


class IndexBufferScenario(BaseScenario):
    key = "index-buffer"
    number = 8
    title = "Index into a fixed-size buffer"
    handled_errors = ((IndexError, ErrorKind.OUT_OF_BOUNDS_ACCESS),)

    def _perform(self, source: InputSource, console: Console) -> str:
        size = read_validated_int(source, console, "Enter an array size: ")
        if size <= 0:
            raise ValidationError(
                "Array size must be greater than zero.",
                field_name="size",
                actual_value=size,
            )
        if size > self.config.max_buffer_size:
            raise ValidationError(
                f"Array size must not exceed {self.config.max_buffer_size}.",
                field_name="size",
                actual_value=size,
            )

        buffer = [0] * size
        index = read_validated_int(source, console, "Enter an index to access: ")
        value = element_at(buffer, index)
        return f"Value at index {index}: {value}"
