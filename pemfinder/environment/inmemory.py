"""In-memory environment for testing."""

from __future__ import annotations

import errno
import posixpath
from typing import Dict, List, Mapping, Optional, Union

from .base import BaseEnvironment


class InMemoryEnvironment(BaseEnvironment):
    """Dict-backed environment and filesystem for unit tests.

    Paths are POSIX style. Relative paths are resolved against ``cwd``.
    Directories exist implicitly as parents of the stored files.
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        files: Optional[Mapping[str, Union[bytes, str]]] = None,
        cwd: str = "/work",
    ) -> None:
        self._cwd = posixpath.normpath(cwd)
        self.env: Dict[str, str] = dict(env or {})
        self.files: Dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def _abspath(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self._cwd, path))

    def _is_dir(self, path: str) -> bool:
        prefix = self._abspath(path).rstrip("/") + "/"
        return any(name.startswith(prefix) for name in self.files)

    def add_file(self, path: str, content: Union[bytes, str]) -> None:
        """Store ``content`` at ``path``, encoding text as UTF-8."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.files[self._abspath(path)] = content

    def getenv(self, name: str) -> Optional[str]:
        return self.env.get(name)

    def read_file(self, path: str) -> bytes:
        full_path = self._abspath(path)
        if full_path in self.files:
            return self.files[full_path]
        if self._is_dir(full_path):
            raise IsADirectoryError(errno.EISDIR, "Is a directory", path)
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)

    def list_dir(self, path: str) -> List[str]:
        full_path = self._abspath(path)
        if full_path in self.files:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        if full_path != self._cwd and not self._is_dir(full_path):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)

        prefix = full_path.rstrip("/") + "/"
        entries: List[str] = []
        for name in self.files:
            if not name.startswith(prefix):
                continue
            entry = name[len(prefix) :].split("/", 1)[0]
            if entry not in entries:
                entries.append(entry)
        return entries

    def cwd(self) -> str:
        return self._cwd
