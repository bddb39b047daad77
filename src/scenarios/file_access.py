"""Scenarios that open a user-named file (text reader and binary stream)."""

import errno
from pathlib import Path

from src.core.common.base_scenario import BaseScenario
from src.core.exceptions import ValidationError
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind


def _read_file_name(source: InputSource, console: Console, prompt: str) -> str:
    console.prompt(prompt)
    file_name = source.read_line()
    if not file_name:
        raise ValidationError("File name cannot be empty.", field_name="file_name")
    return file_name


def _check_path(file_name: str) -> Path:
    # the OS cannot represent a NUL inside a path
    if "\x00" in file_name:
        raise FileNotFoundError(errno.ENOENT, "Invalid file path", file_name)
    return Path(file_name)


class ReadFileScenario(BaseScenario):
    """Open a named file as text; missing or unreadable files are reported."""

    key = "read-file"
    number = 1
    title = "Open a named file for reading"
    handled_errors = ((OSError, ErrorKind.RESOURCE_NOT_FOUND),)

    def _perform(self, source: InputSource, console: Console) -> str:
        file_name = _read_file_name(source, console, "Enter a file name to read: ")
        with _check_path(file_name).open(encoding="utf-8"):
            pass
        return f"File opened: {file_name}"


class OpenStreamScenario(BaseScenario):
    """Open a named file as a byte stream."""

    key = "open-stream"
    number = 2
    title = "Open a named file as a byte stream"
    handled_errors = ((OSError, ErrorKind.RESOURCE_NOT_FOUND),)

    def _perform(self, source: InputSource, console: Console) -> str:
        file_name = _read_file_name(source, console, "Enter a file name to open: ")
        with _check_path(file_name).open("rb"):
            pass
        return f"Stream opened: {file_name}"
