import functools
import logging
import threading
from typing import Callable, Optional

from .base import ConnectionConfig
from .connection import create_connection
from .describe_cache import CachedDescribeConnection

logger = logging.getLogger(__name__)


class SalesforceSession:
    """Holds one authenticated connection and hands it to every caller.

    The first ``get()`` runs the factory; concurrent first callers wait for
    that single attempt instead of authenticating again. A failed attempt
    leaves the slot empty so the next ``get()`` starts from scratch.
    """

    def __init__(self, factory: Callable[[], CachedDescribeConnection] = create_connection):
        self._factory = factory
        self._conn: Optional[CachedDescribeConnection] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "SalesforceSession":
        return cls(functools.partial(create_connection, config))

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def get(self) -> CachedDescribeConnection:
        conn = self._conn
        if conn is not None:
            return conn
        with self._lock:
            if self._conn is None:
                self._conn = self._factory()
                logger.debug("Salesforce connection cached")
            return self._conn

    def reset(self) -> None:
        with self._lock:
            self._conn = None
