"""Thin CLI wrapper — a Typer command that delegates to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from bpaste.application.config_resolver import CliOverrides
from bpaste.bootstrap import Container
from bpaste.domain.errors import BpasteError, ProtocolError, SizeLimitError
from bpaste.domain.models.content import InputSource
from bpaste.domain.sizes import SizeParseError, parse_size
from bpaste.presentation.cli.formatters import (
    error_message,
    info_message,
    setup_logging,
    success_message,
    warning_message,
)

_EPILOG = """\
[bold]Configuration precedence[/] (highest first): command-line options,
environment variables, config file, built-in defaults.

[bold]Environment variables[/]: BPASTE_API_BASE_URL (base URL),
BPASTE_API_KEY (API key, required unless given elsewhere),
BPASTE_MAX_FILE_SIZE (maximum size, e.g. 10M or 512K),
BPASTE_CONFIG_PATH (explicit config file).

[bold]Config file discovery[/] (when neither --config-path nor
BPASTE_CONFIG_PATH is set): $XDG_CONFIG_HOME/bpaste/bpaste.conf
(fallback ~/.config/bpaste/bpaste.conf), then bpaste/bpaste.conf in each
directory of $XDG_CONFIG_DIRS (fallback /etc/xdg).

[bold]Config file format[/]: one key = value per line, # starts a comment.
Keys: base_url, api_key, max_file_size. Sizes use binary units (K, M, G).
"""

app = typer.Typer(
    name="bpaste",
    help="Upload files, stdin or clipboard content to a bepasty server.",
    rich_markup_mode="rich",
    add_completion=False,
)


def _parse_size_option(value: str) -> int:
    try:
        return parse_size(value)
    except SizeParseError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command(epilog=_EPILOG)
def upload(
    file: Annotated[
        Optional[str],
        typer.Argument(help="File to upload, '-' for stdin, omit for clipboard", show_default=False),
    ] = None,
    base_url: Annotated[
        Optional[str], typer.Option("--base-url", help="Override bepasty base URL")
    ] = None,
    api_key: Annotated[
        Optional[str], typer.Option("--api-key", help="Override bepasty API key")
    ] = None,
    config_path: Annotated[
        Optional[str],
        typer.Option("--config-path", help="Path to config file (overrides env / XDG search)"),
    ] = None,
    max_file_size: Annotated[
        Optional[int],
        typer.Option(
            "--max-file-size",
            parser=_parse_size_option,
            metavar="SIZE",
            help="Maximum file size, e.g. 4096, 512K, 10M",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug output")
    ] = False,
) -> None:
    """Upload content and copy the resulting URL to the clipboard."""
    setup_logging(verbose)
    container = Container()
    overrides = CliOverrides(
        base_url=base_url,
        api_key=api_key,
        max_file_size=max_file_size,
        config_path=config_path,
    )

    try:
        config = container.config_resolver().resolve(overrides)
        file_content = container.read_input().execute(InputSource.from_argument(file))
        info_message(f"Uploading {file_content.filename}...")
        url = container.upload_content().execute(config, file_content)
    except (SizeLimitError, ProtocolError) as exc:
        error_message(f"Upload failed: {exc}")
        raise typer.Exit(code=1) from exc
    except BpasteError as exc:
        error_message(f"Error: {exc}")
        raise typer.Exit(code=1) from exc

    result = container.copy_url().execute(url)
    if not result.copied:
        warning_message(f"Failed to copy to clipboard: {result.error}")
    success_message(result.url, copied=result.copied)


def main() -> None:
    app()
