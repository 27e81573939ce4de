"""Environment backed by the running process."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from .base import BaseEnvironment


class LocalEnvironment(BaseEnvironment):
    """Reads ``os.environ`` and the local filesystem."""

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def read_file(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def list_dir(self, path: str) -> List[str]:
        return sorted(os.listdir(path))

    def cwd(self) -> str:
        return os.getcwd()
