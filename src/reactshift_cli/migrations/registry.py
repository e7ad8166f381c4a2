"""Migration registry, keyed by migration kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Type

if TYPE_CHECKING:
    from .base import BaseMigration


class MigrationRegistry:
    """Registry of all available migration kinds."""

    _migrations: Dict[str, Type["BaseMigration"]] = {}

    @classmethod
    def register(
        cls, migration_class: Type["BaseMigration"]
    ) -> Type["BaseMigration"]:
        """Decorator to register a migration class.

        Raises:
            ValueError: If migration_id is not set
        """
        if not migration_class.migration_id:
            raise ValueError(
                f"Migration {migration_class.__name__} must have a migration_id"
            )
        cls._migrations[migration_class.migration_id.lower()] = migration_class
        return migration_class

    @classmethod
    def available(cls) -> Dict[str, str]:
        """Return ``{migration_id: description}`` in registration order."""
        return {key: m.description for key, m in cls._migrations.items()}

    @classmethod
    def is_supported(cls, kind: str | None) -> bool:
        return kind is not None and kind.strip().lower() in cls._migrations

    @classmethod
    def get(cls, kind: str) -> Type["BaseMigration"] | None:
        """Look up a migration class, ignoring case and surrounding whitespace."""
        return cls._migrations.get(kind.strip().lower())

    @classmethod
    def ids(cls) -> List[str]:
        return list(cls._migrations)
