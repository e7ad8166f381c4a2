"""Reading, patching and writing JSON manifests.

Manifests are handled as plain ordered dicts. Patch helpers mutate only the
keys they target and leave everything else as parsed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from reactshift_cli.core.constants import JSON_INDENT
from reactshift_cli.core.errors import ManifestError
from reactshift_cli.core.filesystem import FileSystem


def load_manifest(fs: FileSystem, path: Path) -> dict[str, Any]:
    """Parse a JSON manifest into a dict.

    Raises:
        ManifestError: If the file is missing, unparsable, or not an object.
    """
    if not fs.exists(path):
        raise ManifestError(f"{path.name} not found at {path}")

    try:
        data = json.loads(fs.read_text(path))
    except UnicodeDecodeError as exc:
        raise ManifestError(f"{path.name} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path.name} must contain a JSON object")
    return data


def dump_manifest(fs: FileSystem, path: Path, data: Mapping[str, Any]) -> None:
    fs.write_text(path, json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n")


def replace_scripts(data: dict[str, Any], scripts: Mapping[str, str]) -> dict[str, Any]:
    """Overwrite the ``scripts`` block wholesale."""
    data["scripts"] = dict(scripts)
    return data


def append_compiler_type(data: dict[str, Any], type_name: str) -> dict[str, Any]:
    """Append *type_name* to ``compilerOptions.types``.

    A missing ``compilerOptions`` or ``types`` is initialised empty first.
    Existing entries are kept in order and never de-duplicated.
    """
    compiler_options = data.setdefault("compilerOptions", {})
    if not isinstance(compiler_options, dict):
        raise ManifestError("compilerOptions must be a JSON object")

    types = compiler_options.get("types")
    if types is None:
        types = []
    elif not isinstance(types, list):
        raise ManifestError("compilerOptions.types must be a JSON array")

    compiler_options["types"] = [*types, type_name]
    return data


__all__ = ["load_manifest", "dump_manifest", "replace_scripts", "append_compiler_type"]
