"""Deserialize an object from an empty byte buffer."""

import io
import pickle
from contextlib import closing

from src.core.common.base_scenario import BaseScenario
from src.core.config import DemoConfig
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind


class _BufferReader:
    """Unpickler bound to a buffer for the lifetime of a `with` block."""

    def __init__(self, buffer: io.BytesIO):
        self._buffer = buffer
        self._unpickler: pickle.Unpickler | None = pickle.Unpickler(buffer)

    def read_object(self) -> object:
        if self._unpickler is None:
            raise ValueError("reader is closed")
        return self._unpickler.load()

    def close(self) -> None:
        self._unpickler = None


class DeserializeScenario(BaseScenario):
    key = "deserialize"
    number = 3
    title = "Deserialize an object from an empty byte buffer"
    handled_errors = (
        (EOFError, ErrorKind.UNEXPECTED_END_OF_INPUT),
        (pickle.UnpicklingError, ErrorKind.UNEXPECTED_END_OF_INPUT),
    )

    def __init__(self, config: DemoConfig | None = None, payload: bytes = b""):
        super().__init__(config)
        self.payload = payload

    def _perform(self, source: InputSource, console: Console) -> str:
        with io.BytesIO(self.payload) as buffer, closing(_BufferReader(buffer)) as reader:
            obj = reader.read_object()
        return f"Deserialized object: {obj!r}"
