"""Package manager invocation.

All supported managers accept ``remove <pkg...>`` and ``add <pkg...>``,
so only the executable name differs between them.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from reactshift_cli.core.config import DEFAULT_PACKAGE_MANAGER
from reactshift_cli.core.errors import PackageManagerError
from reactshift_cli.core.filesystem import FileSystem

logger = logging.getLogger(__name__)

LOCKFILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("package-lock.json", "npm"),
)


@dataclass
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""


class ProcessRunner(Protocol):
    """Runs a command in a working directory and blocks until it exits."""

    def run(self, cwd: Path, args: Sequence[str]) -> CommandResult: ...


class SubprocessRunner:
    """:class:`ProcessRunner` backed by :func:`subprocess.run`."""

    def run(self, cwd: Path, args: Sequence[str]) -> CommandResult:
        logger.debug("Running %s in %s", " ".join(args), cwd)
        # Resolves npm.cmd and friends on Windows.
        executable = shutil.which(args[0])
        if executable is None:
            raise PackageManagerError(f"{args[0]} is not installed or not on PATH")
        try:
            result = subprocess.run(
                [executable, *args[1:]],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise PackageManagerError(f"{args[0]} is not installed or not on PATH") from exc
        return CommandResult(result.returncode, result.stdout, result.stderr)


def detect_package_manager(root: Path, fs: FileSystem, preferred: str = "auto") -> str:
    """Pick the package manager for *root*.

    An explicit *preferred* value wins; ``auto`` inspects lockfiles and falls
    back to npm.
    """
    if preferred and preferred != "auto":
        return preferred
    for lockfile, manager in LOCKFILES:
        if fs.exists(root / lockfile):
            logger.debug("Found %s, using %s", lockfile, manager)
            return manager
    return DEFAULT_PACKAGE_MANAGER


class PackageManager:
    """Thin wrapper issuing add/remove commands through a runner."""

    def __init__(self, executable: str, root: Path, runner: ProcessRunner | None = None):
        self.executable = executable
        self.root = root
        self.runner = runner or SubprocessRunner()

    def remove(self, *packages: str) -> CommandResult:
        return self._invoke("remove", packages)

    def add(self, *packages: str) -> CommandResult:
        return self._invoke("add", packages)

    def _invoke(self, verb: str, packages: Sequence[str]) -> CommandResult:
        args = [self.executable, verb, *[p for p in packages if p]]
        result = self.runner.run(self.root, args)
        if result.returncode != 0:
            stderr = result.stderr.strip()
            message = f"`{' '.join(args)}` exited with code {result.returncode}"
            if stderr:
                message = f"{message}: {stderr.splitlines()[-1]}"
            raise PackageManagerError(message, returncode=result.returncode, stderr=stderr)
        return result


__all__ = [
    "CommandResult",
    "ProcessRunner",
    "SubprocessRunner",
    "PackageManager",
    "detect_package_manager",
]
