"""CLI command modules for reactshift."""

from .migrate_cmd import migrate

__all__ = ["migrate"]
