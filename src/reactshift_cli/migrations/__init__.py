"""Available project migrations.

Importing this package registers every migration with
:class:`MigrationRegistry`.
"""

from __future__ import annotations

from .base import BaseMigration, MigrationResult, Reporter, Stage, StageResult
from .registry import MigrationRegistry
from .cra_to_vite import CraToViteMigration

__all__ = [
    "BaseMigration",
    "MigrationResult",
    "Reporter",
    "Stage",
    "StageResult",
    "MigrationRegistry",
    "CraToViteMigration",
]
