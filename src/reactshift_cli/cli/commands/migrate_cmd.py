"""CLI command for migrating a project to another build tool.

Usage:
    reactshift migrate --path ./my-app                     # Prompt for the migration kind
    reactshift migrate --path ./my-app --type cra-to-vite
    reactshift migrate -p ./my-app -t CRA-TO-VITE -m pnpm  # Force a package manager

The migration is best effort past the dependency swap: failed steps are
reported and the remaining steps still run. Nothing is rolled back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.live import Live
from rich.markup import escape

from reactshift_cli.cli.helpers import configure_logging, console
from reactshift_cli.cli.ui import StepTracker, select_with_arrows
from reactshift_cli.core.config import PACKAGE_MANAGER_CHOICES, load_settings
from reactshift_cli.core.errors import ConfigError, ProjectValidationError
from reactshift_cli.migrations import MigrationRegistry, MigrationResult

logger = logging.getLogger(__name__)


def resolve_migration_kind(requested: Optional[str]) -> str:
    """Return a supported migration id, prompting when needed."""
    options = MigrationRegistry.available()

    if requested is not None and MigrationRegistry.is_supported(requested):
        return requested.strip().lower()

    if requested is not None:
        console.print(f'[red]"{requested}" is not supported yet[/red]\n')

    return select_with_arrows(options, "Select migration type", console=console)


def _print_summary(result: MigrationResult) -> None:
    for stage in result.stages:
        for change in stage.changes_made:
            console.print(f"  [dim]{change}[/dim]")

    if result.aborted:
        console.print(
            "\n[red]Migration stopped before touching project files.[/red] "
            "Fix the package manager error and run again."
        )
    elif result.success:
        console.print(f"\n[green]Migrated {result.project.name}.[/green] Run the dev script to start Vite.")
    else:
        console.print(
            "\n[yellow]Migration finished with errors.[/yellow] "
            "The project is partially migrated; fix the failed steps by hand."
        )
        for error in result.errors:
            console.print(f"  [red]{escape(error)}[/red]", soft_wrap=True)


def migrate(
    path: Path = typer.Option(..., "--path", "-p", help="Path to codebase"),
    migration_type: Optional[str] = typer.Option(None, "--type", "-t", help="Type of migration"),
    package_manager: Optional[str] = typer.Option(
        None,
        "--package-manager",
        "-m",
        help=f"Package manager to use ({', '.join(PACKAGE_MANAGER_CHOICES)})",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Migrate a project to a different build tool.

    Examples:
        reactshift migrate -p ./my-app -t cra-to-vite
    """
    try:
        settings = load_settings()
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    configure_logging("DEBUG" if verbose else settings.log_level)

    if package_manager is not None and package_manager.lower() not in PACKAGE_MANAGER_CHOICES:
        console.print(
            f"[red]Unknown package manager {package_manager!r}.[/red] "
            f"Valid: {', '.join(PACKAGE_MANAGER_CHOICES)}"
        )
        raise typer.Exit(1)

    kind = resolve_migration_kind(migration_type)
    logger.debug("Resolved migration kind %s", kind)
    migration_class = MigrationRegistry.get(kind)
    if migration_class is None:
        console.print(f'[red]"{kind}" is not supported yet[/red]')
        raise typer.Exit(1)

    migration = migration_class(
        package_manager=(package_manager or settings.package_manager).lower()
    )
    project_name = path.expanduser().resolve().name
    console.print(f"[cyan][!] Migrating {project_name}: {migration.description}[/cyan]")

    tracker = StepTracker(f"Migrate {project_name} ({kind})")
    try:
        with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
            tracker.attach_refresh(lambda: live.update(tracker.render()))
            result = migration.run(path, tracker)
    except ProjectValidationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    console.print(tracker.render())
    _print_summary(result)

    if not result.success:
        raise typer.Exit(1)
