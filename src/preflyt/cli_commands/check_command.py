"""The check command: scan a URL and report findings."""

from typing import Optional

import typer

from preflyt.modules.interpret import EXIT_OK, FailFlags
from preflyt.modules.render import RenderOptions
from preflyt.modules.scan import ScanError, ScanRequest
from preflyt.utils.debug import debug_print, set_debug_enabled
from preflyt.version import get_version

from .check_helpers import coerce_timeout, normalize_fail_on, url_guidance
from .check_runner import run_check
from .deps import cli_module
from .shared import app, console, emit, emit_lines

EPILOG = (
    "Examples:\n\n"
    "  preflyt-check https://mysite.com\n\n"
    "  preflyt-check https://mysite.com --key sk_live_xxx\n\n"
    "  preflyt-check https://mysite.com --fail --fail-on medium\n\n"
    "https://preflyt.dev"
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"preflyt-check {get_version()}", markup=False)
        raise typer.Exit(EXIT_OK)


@app.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
def check(
    ctx: typer.Context,
    url: Optional[str] = typer.Argument(None, help="URL of the live site to scan", show_default=False),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Pro API key for unlimited scans"),
    fail: bool = typer.Option(False, "--fail", help="Exit code 1 if issues found"),
    fail_on: str = typer.Option(
        "high",
        "--fail-on",
        help="Minimum severity to fail on (high, medium, low)",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Minimal output, just pass/fail"),
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    share: bool = typer.Option(False, "--share", help="Create a shareable report link"),
    timeout: Optional[str] = typer.Option(
        None,
        "--timeout",
        help="Scan timeout in seconds (default: 60)",
        show_default=False,
    ),
    debug: bool = typer.Option(False, "--debug", help="Print request diagnostics to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the installed version",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Pre-deployment security scanner. Checks your live site for exposed secrets,
    open ports, and misconfigurations."""
    cli = cli_module()
    set_debug_enabled(debug)

    if not url:
        # The rich formatter prints help itself and returns an empty string.
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        raise typer.Exit(EXIT_OK)

    guidance = url_guidance(url)
    if guidance:
        emit_lines("", *(f"  {line}" for line in guidance), "")
        raise typer.Exit(EXIT_OK)

    settings = cli.load_settings()
    request = ScanRequest(
        url=url,
        api_key=key or cli.get_api_key(),
        timeout=coerce_timeout(timeout, settings.default_timeout),
    )
    flags = FailFlags(fail=fail, fail_on=normalize_fail_on(fail_on))
    options = RenderOptions(json=json_output, quiet=quiet, share=share)
    renderer = cli.Renderer(settings)
    debug_print("config", "Resolved run settings", Endpoint=settings.scan_endpoint, Timeout=request.timeout)

    if not json_output:
        emit_lines("", f"🔍 Preflyt scanning {url}...")

    try:
        outcome = cli.safe_async_run(
            run_check(request, settings, flags, cli.message_rng, client_factory=cli.ScanClient)
        )
    except ScanError as exc:
        emit(renderer.render_scan_error(url, str(exc), as_json=json_output))
        raise typer.Exit(EXIT_OK) from exc

    interpretation = outcome.interpretation
    emit(
        renderer.render(
            outcome.result,
            options,
            message=interpretation.message,
            report_url=interpretation.report_url,
        )
    )
    raise typer.Exit(interpretation.exit_code)
