"""Filesystem port used by the migration stages.

Stages never touch ``pathlib`` directly; they receive a :class:`FileSystem`
so tests can swap in doubles that simulate failures or project trees.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystem(Protocol):
    """Blocking filesystem operations needed by a migration."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def copy_file(self, source: Path, destination: Path) -> None: ...

    def remove(self, path: Path) -> None: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the real disk."""

    encoding = "utf-8"

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding=self.encoding)

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding=self.encoding)
        logger.debug("Wrote %s", path)

    def copy_file(self, source: Path, destination: Path) -> None:
        shutil.copyfile(source, destination)
        logger.debug("Copied %s -> %s", source, destination)

    def remove(self, path: Path) -> None:
        path.unlink()
        logger.debug("Removed %s", path)


__all__ = ["FileSystem", "LocalFileSystem"]
