"""Exception hierarchy for reactshift."""

from __future__ import annotations


class ReactShiftError(Exception):
    """Base class for all reactshift errors."""


class ConfigError(ReactShiftError):
    """Raised when user settings cannot be parsed or validated."""


class ProjectValidationError(ReactShiftError):
    """Raised when the target path is not a project of the expected kind."""


class PackageManagerError(ReactShiftError):
    """Raised when a package manager invocation fails."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ManifestError(ReactShiftError):
    """Raised when a JSON manifest is missing, unparsable or malformed."""


class MountRootNotFoundError(ReactShiftError):
    """Raised when the HTML entry document has no mount root element."""


__all__ = [
    "ReactShiftError",
    "ConfigError",
    "ProjectValidationError",
    "PackageManagerError",
    "ManifestError",
    "MountRootNotFoundError",
]
