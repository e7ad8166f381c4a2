"""Core utilities and configuration exports."""

from .config import PACKAGE_MANAGER_CHOICES, Settings, load_settings
from .errors import (
    ConfigError,
    ManifestError,
    MountRootNotFoundError,
    PackageManagerError,
    ProjectValidationError,
    ReactShiftError,
)
from .filesystem import FileSystem, LocalFileSystem
from .project import Project, classify_project, validate_cra_project

__all__ = [
    "PACKAGE_MANAGER_CHOICES",
    "Settings",
    "load_settings",
    "ConfigError",
    "ManifestError",
    "MountRootNotFoundError",
    "PackageManagerError",
    "ProjectValidationError",
    "ReactShiftError",
    "FileSystem",
    "LocalFileSystem",
    "Project",
    "classify_project",
    "validate_cra_project",
]
