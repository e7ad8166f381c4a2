"""Project resolution, validation and classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from reactshift_cli.core.constants import (
    COMPILER_OPTIONS_MANIFEST,
    HTML_ENTRY,
    LEGACY_DEPENDENCY,
    PACKAGE_MANIFEST,
    PUBLIC_DIR,
    TAILWIND_CONFIG,
)
from reactshift_cli.core.errors import ManifestError, ProjectValidationError
from reactshift_cli.core.filesystem import FileSystem, LocalFileSystem
from reactshift_cli.core.manifest import load_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectTraits:
    """Flags that change the migration output."""

    typed_source: bool
    css_framework: bool


@dataclass(frozen=True)
class Project:
    """A project under migration.

    Attributes:
        root: Absolute path of the project root.
        typed_source: True when ``tsconfig.json`` sits at the root.
        css_framework: True when ``tailwind.config.js`` sits at the root.
    """

    root: Path
    typed_source: bool
    css_framework: bool

    @property
    def name(self) -> str:
        return self.root.name

    @classmethod
    def resolve(cls, path: Path | str, fs: FileSystem | None = None) -> "Project":
        """Resolve *path* and classify it once."""
        fs = fs or LocalFileSystem()
        root = Path(path).expanduser().resolve()
        traits = classify_project(root, fs)
        return cls(root=root, typed_source=traits.typed_source, css_framework=traits.css_framework)


def classify_project(root: Path, fs: FileSystem) -> ProjectTraits:
    """Inspect marker files directly under *root*."""
    traits = ProjectTraits(
        typed_source=fs.exists(root / COMPILER_OPTIONS_MANIFEST),
        css_framework=fs.exists(root / TAILWIND_CONFIG),
    )
    logger.debug("Classified %s: %s", root, traits)
    return traits


def validate_cra_project(root: Path, fs: FileSystem) -> None:
    """Ensure *root* looks like a Create React App project.

    Raises:
        ProjectValidationError: If the directory, manifest, legacy
            dependency or HTML entry document is missing.
    """
    if not fs.is_dir(root):
        raise ProjectValidationError(f"{root} is not a directory")

    try:
        manifest = load_manifest(fs, root / PACKAGE_MANIFEST)
    except ManifestError as exc:
        raise ProjectValidationError(f"{root.name} is not a valid project: {exc}") from exc

    declared: set[str] = set()
    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section)
        if isinstance(deps, dict):
            declared.update(deps)

    if LEGACY_DEPENDENCY not in declared:
        raise ProjectValidationError(
            f"{root.name} is not a Create React App project ({LEGACY_DEPENDENCY} is not a dependency)"
        )

    if not fs.exists(root / PUBLIC_DIR / HTML_ENTRY):
        raise ProjectValidationError(f"{root.name} has no {PUBLIC_DIR}/{HTML_ENTRY}")


__all__ = ["Project", "ProjectTraits", "classify_project", "validate_cra_project"]
