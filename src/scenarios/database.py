"""Open a database connection from a connection URL that no driver accepts."""

import sqlite3
from typing import Callable

from src.core.common.base_scenario import BaseScenario
from src.core.exceptions import ConnectionFailureError
from src.core.input_source import Console, InputSource
from src.report.models import ErrorKind

_SQLITE_PREFIX = "sqlite:///"


def _connect_sqlite(url: str, user: str, password: str) -> sqlite3.Connection:
    # read-only so that a missing database file fails instead of being created
    path = url[len(_SQLITE_PREFIX):]
    return sqlite3.connect(f"file:{path}?mode=ro", uri=True)


_DRIVERS: dict[str, Callable[[str, str, str], sqlite3.Connection]] = {
    _SQLITE_PREFIX: _connect_sqlite,
}


def get_connection(url: str, user: str, password: str) -> sqlite3.Connection:
    """
    Open a connection with the first driver that accepts `url`.

    Raises:
        ConnectionFailureError: If no registered driver accepts the URL
        sqlite3.Error: If the driver rejects the connection
    """
    for prefix, connect in _DRIVERS.items():
        if url.startswith(prefix):
            return connect(url, user, password)
    raise ConnectionFailureError(f"No suitable driver found for {url}", url=url)


class ConnectScenario(BaseScenario):
    key = "connect"
    number = 4
    title = "Open a database connection with an invalid connection string"
    handled_errors = (
        (ConnectionFailureError, ErrorKind.CONNECTION_FAILURE),
        (sqlite3.Error, ErrorKind.CONNECTION_FAILURE),
    )

    def _perform(self, source: InputSource, console: Console) -> str:
        url = self.config.database_url
        conn = get_connection(
            url, self.config.database_user, self.config.database_password
        )
        conn.close()
        return f"Connected to {url}"
