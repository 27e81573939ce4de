"""Base environment interface for reading ambient process state."""

from __future__ import annotations

import abc
from typing import List, Optional


class BaseEnvironment(metaclass=abc.ABCMeta):
    """Abstract access to environment variables and the filesystem."""

    @abc.abstractmethod
    def getenv(self, name: str) -> Optional[str]:
        """Return the value of environment variable ``name`` or ``None``."""
        raise NotImplementedError

    @abc.abstractmethod
    def read_file(self, path: str) -> bytes:
        """Return the raw contents of the file at ``path``.

        Filesystem errors (``FileNotFoundError``, ``PermissionError``...) are
        raised as-is.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """Return entry names in ``path`` in listing order.

        The local backend sorts names, the in-memory one keeps insertion order.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def cwd(self) -> str:
        """Return the current working directory."""
        raise NotImplementedError
