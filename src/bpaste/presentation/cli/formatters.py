"""Rich formatting utilities for the CLI.

Keeps all Rich rendering in one module that knows nothing about domain
logic. Results go to stdout; warnings, errors and logs go to stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route ``logging`` through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def info_message(message: str) -> None:
    console.print(escape(message), soft_wrap=True)


def success_message(url: str, copied: bool) -> None:
    """Print the final URL, noting whether it reached the clipboard."""
    if copied:
        console.print(
            f"[green]Upload successful![/] URL copied to clipboard: {escape(url)}",
            soft_wrap=True,
        )
    else:
        console.print(f"[green]Upload successful![/] URL: {escape(url)}", soft_wrap=True)


def warning_message(message: str) -> None:
    """Print a yellow warning to stderr."""
    err_console.print(f"[yellow]Warning: {escape(message)}[/]", soft_wrap=True)


def error_message(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/]", soft_wrap=True)
