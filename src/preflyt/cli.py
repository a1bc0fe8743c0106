"""preflyt-check CLI - pre-deployment security scanning client."""

import random
import sys

import click

from preflyt.config import get_api_key, load_settings
from preflyt.modules.render import NO_BLOCK_NOTICE, Renderer
from preflyt.modules.scan import ScanClient
from preflyt.utils.async_utils import safe_async_run

from .cli_commands.shared import app, console, err_console

# Register commands on the shared Typer app.
from .cli_commands import check_command as _check_command  # noqa: F401

# Message selection draws from this source; tests pin it.
message_rng = random.random

__all__ = [
    "NO_BLOCK_NOTICE",
    "Renderer",
    "ScanClient",
    "app",
    "console",
    "get_api_key",
    "load_settings",
    "main",
    "message_rng",
    "safe_async_run",
]


def main() -> None:
    """Entry point for the CLI.

    Only a confirmed finding under ``--fail`` exits non-zero; usage errors and
    unexpected failures exit 0.
    """
    try:
        code = app(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        code = 0
    except click.exceptions.Abort:
        code = 0
    except Exception as exc:
        err_console.print(f"  Preflyt encountered an unexpected error: {exc}", markup=False)
        err_console.print(f"  {NO_BLOCK_NOTICE}", markup=False)
        code = 0
    sys.exit(code if isinstance(code, int) else 0)
