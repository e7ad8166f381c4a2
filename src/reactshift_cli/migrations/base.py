"""Base classes for migrations.

A migration is an ordered list of :class:`Stage` objects. Stages run one at
a time; a failed stage is reported and the run moves on, unless the stage is
marked ``fatal``, in which case nothing after it runs. There is no rollback.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Protocol

from reactshift_cli.core.filesystem import FileSystem, LocalFileSystem
from reactshift_cli.core.package_manager import ProcessRunner
from reactshift_cli.core.project import Project

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Step status sink, implemented by :class:`~reactshift_cli.cli.ui.StepTracker`."""

    def add(self, key: str, label: str): ...

    def start(self, key: str, detail: str = ""): ...

    def complete(self, key: str, detail: str = ""): ...

    def error(self, key: str, detail: str = ""): ...

    def skip(self, key: str, detail: str = ""): ...


@dataclass
class StageResult:
    """Outcome of a single stage."""

    key: str
    success: bool
    changes_made: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    skipped: bool = False


@dataclass
class Stage:
    key: str
    label: str
    action: Callable[[Project], StageResult]
    applies: bool = True
    fatal: bool = False


@dataclass
class MigrationResult:
    """Outcome of a whole migration run."""

    migration_id: str
    project: Project
    stages: List[StageResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def success(self) -> bool:
        return not self.aborted and all(s.success for s in self.stages if not s.skipped)

    @property
    def errors(self) -> List[str]:
        return [error for stage in self.stages for error in stage.errors]

    def stage(self, key: str) -> Optional[StageResult]:
        for result in self.stages:
            if result.key == key:
                return result
        return None


class BaseMigration(ABC):
    """Base class for all migrations."""

    migration_id: str = ""
    description: str = ""

    def __init__(
        self,
        fs: FileSystem | None = None,
        runner: ProcessRunner | None = None,
        package_manager: str = "auto",
    ):
        self.fs = fs or LocalFileSystem()
        self.runner = runner
        self.package_manager = package_manager

    @abstractmethod
    def validate(self, project_path: Path) -> None:
        """Raise :class:`ProjectValidationError` if the project cannot be migrated."""

    @abstractmethod
    def stages(self, project: Project) -> List[Stage]:
        """Return the ordered stages for *project*."""

    def run(self, project_path: Path | str, reporter: Reporter) -> MigrationResult:
        """Validate, classify and migrate the project at *project_path*."""
        root = Path(project_path).expanduser().resolve()
        self.validate(root)
        project = Project.resolve(root, self.fs)
        logger.info(
            "Migrating %s (typed_source=%s, css_framework=%s)",
            project.name,
            project.typed_source,
            project.css_framework,
        )

        stages = self.stages(project)
        for stage in stages:
            reporter.add(stage.key, stage.label)

        result = MigrationResult(migration_id=self.migration_id, project=project)
        for index, stage in enumerate(stages):
            if not stage.applies:
                reporter.skip(stage.key, "not needed")
                result.stages.append(StageResult(key=stage.key, success=True, skipped=True))
                continue

            reporter.start(stage.key)
            outcome = stage.action(project)
            result.stages.append(outcome)

            if outcome.success:
                reporter.complete(stage.key, "; ".join(outcome.changes_made[:1]))
                continue

            logger.warning("Stage %s failed: %s", stage.key, "; ".join(outcome.errors))
            reporter.error(stage.key, "; ".join(outcome.errors))
            if stage.fatal:
                result.aborted = True
                for remaining in stages[index + 1 :]:
                    reporter.skip(remaining.key, "aborted")
                break

        return result


__all__ = [
    "BaseMigration",
    "MigrationResult",
    "Reporter",
    "Stage",
    "StageResult",
]
