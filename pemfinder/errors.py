"""Exceptions raised while resolving private keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .models import KeySource


class KeyResolutionError(Exception):
    """Raised when no usable private key can be resolved.

    Filesystem errors raised while reading an explicit or configured path are
    not wrapped in this exception; they propagate unchanged.
    """

    def __init__(self, message: str, source: Optional["KeySource"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
