"""Shared console and banner for CLI commands."""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

console = Console()

BANNER = r"""
                      _       _     _  __ _
 _ __ ___  __ _  ___| |_ ___| |__ (_)/ _| |_
| '__/ _ \/ _` |/ __| __/ __| '_ \| | |_| __|
| | |  __/ (_| | (__| |_\__ \ | | | |  _| |_
|_|  \___|\__,_|\___|\__|___/_| |_|_|_|  \__|
"""

TAGLINE = "reactshift - move React projects between build tools"


def show_banner() -> None:
    """Display the ASCII art banner."""
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white"]

    styled_banner = Text()
    for i, line in enumerate(BANNER.strip("\n").split("\n")):
        styled_banner.append(line + "\n", style=colors[i % len(colors)])

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def configure_logging(level: str | int) -> None:
    """Route the ``reactshift_cli`` logger through Rich at *level*."""
    logger = logging.getLogger("reactshift_cli")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, markup=False))


__all__ = ["console", "show_banner", "configure_logging", "BANNER", "TAGLINE"]
