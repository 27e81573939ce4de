"""Environment backends used by the key resolver."""

from __future__ import annotations

from .base import BaseEnvironment
from .inmemory import InMemoryEnvironment
from .local import LocalEnvironment

__all__ = ["BaseEnvironment", "InMemoryEnvironment", "LocalEnvironment"]
