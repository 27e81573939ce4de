"""Data models describing resolved keys."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

KeyMaterial = Union[bytes, str]


class KeySource(str, Enum):
    """Where a private key was found."""

    EXPLICIT_PATH = "explicit_path"
    ENV_INLINE = "env_inline"
    ENV_PATH = "env_path"
    DIRECTORY_SCAN = "directory_scan"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    KeySource.EXPLICIT_PATH: "explicit path",
    KeySource.ENV_INLINE: "inline environment variable",
    KeySource.ENV_PATH: "path from environment variable",
    KeySource.DIRECTORY_SCAN: "directory scan",
}


class ResolvedKey(BaseModel):
    """Key material together with the source that supplied it."""

    source: KeySource
    material: Union[bytes, str]
    path: Optional[str] = None
    variable: Optional[str] = None
