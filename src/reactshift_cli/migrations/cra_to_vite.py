"""Migration: Create React App (react-scripts) to Vite.

Stages, in order:
- Uninstall ``react-scripts`` and install ``vite`` with its React plugin
  (plus ``vite-tsconfig-paths`` for TypeScript projects). Either failure
  stops the run.
- Rename ``src/index.js``/``src/App.js`` to ``.jsx`` (JavaScript projects
  only) and move ``public/index.html`` to the project root with a module
  entry script injected after the mount root.
- Write ``vite.config.js`` and, for TypeScript projects, ``vite-env.d.ts``.
- Replace the ``package.json`` scripts and, for TypeScript projects, add
  ``vite/client`` to ``compilerOptions.types`` in ``tsconfig.json``.

Everything after the dependency swap is best effort: a failing stage is
reported and the next one still runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from reactshift_cli.core.constants import (
    BUNDLER_PACKAGES,
    COMPILER_OPTIONS_MANIFEST,
    ENTRY_SCRIPT_TAG,
    HTML_ENTRY,
    LEGACY_DEPENDENCY,
    LEGACY_ENTRY_SCRIPTS,
    MOUNT_ROOT_MARKUP,
    PACKAGE_MANIFEST,
    PATH_ALIAS_PACKAGE,
    PUBLIC_DIR,
    PUBLIC_URL_PLACEHOLDER,
    SOURCE_DIR,
    TAILWIND_CSS_OPTION,
    TAILWIND_IMPORT,
    TSCONFIG_PATHS_IMPORT,
    TYPED_JSX_SUFFIX,
    VITE_CLIENT_TYPES,
    VITE_CONFIG_FILE,
    VITE_CONFIG_TEMPLATE,
    VITE_ENV_CONTENT,
    VITE_ENV_FILE,
    VITE_SCRIPTS,
)
from reactshift_cli.core.errors import (
    ManifestError,
    MountRootNotFoundError,
    PackageManagerError,
)
from reactshift_cli.core.filesystem import FileSystem
from reactshift_cli.core.manifest import (
    append_compiler_type,
    dump_manifest,
    load_manifest,
    replace_scripts,
)
from reactshift_cli.core.package_manager import (
    PackageManager,
    detect_package_manager,
)
from reactshift_cli.core.project import Project, validate_cra_project

from .base import BaseMigration, Stage, StageResult
from .registry import MigrationRegistry

logger = logging.getLogger(__name__)

MIGRATION_ID = "cra-to-vite"
MIGRATION_DESCRIPTION = "Create React App (react-scripts) to Vite"


def bundler_packages(typed_source: bool) -> List[str]:
    packages = list(BUNDLER_PACKAGES)
    if typed_source:
        packages.append(PATH_ALIAS_PACKAGE)
    return packages


def remove_legacy_dependency(project: Project, package_manager: PackageManager) -> StageResult:
    try:
        package_manager.remove(LEGACY_DEPENDENCY)
    except PackageManagerError as exc:
        return StageResult(key="remove-legacy", success=False, errors=[str(exc)])
    return StageResult(
        key="remove-legacy",
        success=True,
        changes_made=[f"Uninstalled {LEGACY_DEPENDENCY}"],
    )


def install_bundler(project: Project, package_manager: PackageManager) -> StageResult:
    packages = bundler_packages(project.typed_source)
    try:
        package_manager.add(*packages)
    except PackageManagerError as exc:
        return StageResult(key="install-bundler", success=False, errors=[str(exc)])
    return StageResult(
        key="install-bundler",
        success=True,
        changes_made=[f"Installed {', '.join(packages)}"],
    )


def inject_entry_script(html: str, typed_source: bool) -> str:
    """Insert the module entry script right after the mount root element.

    Only the first exact occurrence of the mount root markup counts; the
    rest of the document is kept verbatim.

    Raises:
        MountRootNotFoundError: If the markup does not appear in *html*.
    """
    head, marker, tail = html.partition(MOUNT_ROOT_MARKUP)
    if not marker:
        raise MountRootNotFoundError(f"{MOUNT_ROOT_MARKUP} not found in {HTML_ENTRY}")

    last_line = head.rsplit("\n", 1)[-1]
    indent = last_line if not last_line.strip() else ""
    script = ENTRY_SCRIPT_TAG.format(ext="tsx" if typed_source else "jsx")
    return f"{head}{marker}\n{indent}{script}{tail}"


def rename_entry_scripts(project: Project, fs: FileSystem) -> List[str]:
    """Rename the legacy ``.js`` entry scripts to ``.jsx``; missing ones are skipped."""
    changes = []
    for filename in LEGACY_ENTRY_SCRIPTS:
        source = project.root / SOURCE_DIR / filename
        if not fs.exists(source):
            logger.debug("No %s, skipping rename", source)
            continue
        target = source.with_suffix(TYPED_JSX_SUFFIX)
        fs.copy_file(source, target)
        fs.remove(source)
        changes.append(f"Renamed {SOURCE_DIR}/{filename} to {SOURCE_DIR}/{target.name}")
    return changes


def restructure_files(project: Project, fs: FileSystem) -> StageResult:
    """Rename entry scripts and move the HTML entry to the project root."""
    changes: List[str] = []
    errors: List[str] = []
    legacy_html = project.root / PUBLIC_DIR / HTML_ENTRY

    try:
        if not project.typed_source:
            changes.extend(rename_entry_scripts(project, fs))

        html = fs.read_text(legacy_html)
        html = html.replace(PUBLIC_URL_PLACEHOLDER, "")
        html = inject_entry_script(html, project.typed_source)

        fs.write_text(project.root / HTML_ENTRY, html)
        fs.remove(legacy_html)
        changes.append(f"Moved {PUBLIC_DIR}/{HTML_ENTRY} to {HTML_ENTRY}")
    except (OSError, UnicodeDecodeError, MountRootNotFoundError) as exc:
        errors.append(str(exc))

    return StageResult(key="restructure", success=not errors, changes_made=changes, errors=errors)


def render_vite_config(css_framework: bool, typed_source: bool = False) -> str:
    """Return ``vite.config.js`` source for the given project traits."""
    imports = ""
    plugins = ["react()"]
    extra = ""

    if typed_source:
        imports += TSCONFIG_PATHS_IMPORT
        plugins.append("tsconfigPaths()")
    if css_framework:
        imports += TAILWIND_IMPORT
        extra += TAILWIND_CSS_OPTION

    return VITE_CONFIG_TEMPLATE.format(imports=imports, plugins=", ".join(plugins), extra=extra)


def emit_config(project: Project, fs: FileSystem) -> StageResult:
    """Write ``vite.config.js`` (and ``vite-env.d.ts`` for TypeScript)."""
    changes: List[str] = []
    errors: List[str] = []

    try:
        config = render_vite_config(project.css_framework, project.typed_source)
        fs.write_text(project.root / VITE_CONFIG_FILE, config)
        changes.append(f"Wrote {VITE_CONFIG_FILE}")

        if project.typed_source:
            fs.write_text(project.root / VITE_ENV_FILE, VITE_ENV_CONTENT)
            changes.append(f"Wrote {VITE_ENV_FILE}")
    except OSError as exc:
        errors.append(str(exc))

    return StageResult(key="vite-config", success=not errors, changes_made=changes, errors=errors)


def patch_package_manifest(project: Project, fs: FileSystem) -> StageResult:
    """Replace the ``scripts`` block of ``package.json``."""
    path = project.root / PACKAGE_MANIFEST
    try:
        data = load_manifest(fs, path)
        dump_manifest(fs, path, replace_scripts(data, VITE_SCRIPTS))
    except (OSError, ManifestError) as exc:
        return StageResult(key="package-json", success=False, errors=[str(exc)])

    return StageResult(
        key="package-json",
        success=True,
        changes_made=[f"Set scripts: {', '.join(VITE_SCRIPTS)}"],
    )


def patch_compiler_options(project: Project, fs: FileSystem) -> StageResult:
    """Append ``vite/client`` to ``compilerOptions.types`` in ``tsconfig.json``."""
    path = project.root / COMPILER_OPTIONS_MANIFEST
    try:
        data = load_manifest(fs, path)
        dump_manifest(fs, path, append_compiler_type(data, VITE_CLIENT_TYPES))
    except (OSError, ManifestError) as exc:
        return StageResult(key="tsconfig", success=False, errors=[str(exc)])

    return StageResult(
        key="tsconfig",
        success=True,
        changes_made=[f"Added {VITE_CLIENT_TYPES} to compilerOptions.types"],
    )


@MigrationRegistry.register
class CraToViteMigration(BaseMigration):
    """Move a Create React App project onto Vite."""

    migration_id = MIGRATION_ID
    description = MIGRATION_DESCRIPTION

    def validate(self, project_path: Path) -> None:
        validate_cra_project(project_path, self.fs)

    def stages(self, project: Project) -> List[Stage]:
        executable = detect_package_manager(project.root, self.fs, self.package_manager)
        manager = PackageManager(executable, project.root, self.runner)
        fs = self.fs

        return [
            Stage(
                "remove-legacy",
                f"Uninstall {LEGACY_DEPENDENCY}",
                lambda p: remove_legacy_dependency(p, manager),
                fatal=True,
            ),
            Stage(
                "install-bundler",
                "Install vite",
                lambda p: install_bundler(p, manager),
                fatal=True,
            ),
            Stage("restructure", "Restructure project", lambda p: restructure_files(p, fs)),
            Stage("vite-config", "Write Vite config", lambda p: emit_config(p, fs)),
            Stage("package-json", f"Update {PACKAGE_MANIFEST}", lambda p: patch_package_manifest(p, fs)),
            Stage(
                "tsconfig",
                f"Update {COMPILER_OPTIONS_MANIFEST}",
                lambda p: patch_compiler_options(p, fs),
                applies=project.typed_source,
            ),
        ]
