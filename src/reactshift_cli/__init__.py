"""
reactshift - migrate React projects between build tools.

Usage:
    reactshift migrate --path ./my-app
    reactshift migrate --path ./my-app --type cra-to-vite
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.align import Align
from typer.core import TyperGroup

from reactshift_cli.cli.commands import migrate
from reactshift_cli.cli.helpers import console, show_banner

try:
    __version__ = version("reactshift")
except PackageNotFoundError:
    __version__ = "0.0.0"


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="reactshift",
    help="Migrate React projects from one build tool to another",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"reactshift {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Show banner when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        show_banner()
        console.print(Align.center("[dim]Run 'reactshift --help' for usage information[/dim]"))
        console.print()


app.command("migrate", help="Migrate project")(migrate)


def main():
    app()


if __name__ == "__main__":
    main()
