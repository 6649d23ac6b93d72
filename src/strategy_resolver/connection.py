"""
Database connection singleton.

Holds a process-wide "connected" flag. No real connection is opened.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """
    Lazily created, process-wide connection state.

    Obtain the shared object with ``DatabaseConnection.instance()``;
    calling the class directly raises TypeError.
    """

    _instance: Optional["DatabaseConnection"] = None
    _creating = False

    def __init__(self) -> None:
        if not DatabaseConnection._creating:
            raise TypeError("Use DatabaseConnection.instance() to get the connection")
        self._connected = False

    @classmethod
    def instance(cls) -> "DatabaseConnection":
        """Return the shared connection, creating it on first use."""
        if cls._instance is None:
            DatabaseConnection._creating = True
            try:
                cls._instance = cls()
            finally:
                DatabaseConnection._creating = False
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared connection so the next instance() starts fresh."""
        cls._instance = None

    @property
    def connected(self) -> bool:
        """Whether the connection is currently open."""
        return self._connected

    def connect(self) -> None:
        logger.debug("Opening database connection")
        self._connected = True

    def disconnect(self) -> None:
        logger.debug("Closing database connection")
        self._connected = False
