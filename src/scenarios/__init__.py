"""Built-in error-handling scenarios, in their canonical order."""

from .arithmetic import DivideScenario
from .buffer_index import IndexBufferScenario
from .database import ConnectScenario
from .deserialization import DeserializeScenario
from .file_access import OpenStreamScenario, ReadFileScenario
from .null_reference import NullReferenceScenario
from .number_parsing import ParseNumberScenario
from .timed_wait import SleepScenario
from .type_cast import CastValueScenario
from .type_lookup import ResolveTypeScenario

BUILTIN_SCENARIOS = (
    ReadFileScenario,
    OpenStreamScenario,
    DeserializeScenario,
    ConnectScenario,
    ResolveTypeScenario,
    DivideScenario,
    NullReferenceScenario,
    IndexBufferScenario,
    CastValueScenario,
    SleepScenario,
    ParseNumberScenario,
)

__all__ = [
    "BUILTIN_SCENARIOS",
    "ReadFileScenario",
    "OpenStreamScenario",
    "DeserializeScenario",
    "ConnectScenario",
    "ResolveTypeScenario",
    "DivideScenario",
    "NullReferenceScenario",
    "IndexBufferScenario",
    "CastValueScenario",
    "SleepScenario",
    "ParseNumberScenario",
]
