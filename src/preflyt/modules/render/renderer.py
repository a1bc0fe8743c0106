"""Terminal and JSON projections of a scan result.

Rendering is pure: it returns ``rich.text.Text`` and never touches the
network or mutates the result.
"""

import json
from dataclasses import dataclass
from typing import Any

from rich.text import Text

from preflyt.config import PreflytSettings
from preflyt.modules.scan.models import (
    STATUS_CLEAN,
    STATUS_ERROR,
    STATUS_LIMIT_REACHED,
    ScanResult,
)
from preflyt.modules.scan.severity import sort_findings

from .labels import (
    CATEGORY_LABEL_WIDTH,
    CATEGORY_ORDER,
    SEVERITY_LABEL_WIDTH,
    SEVERITY_STYLES,
    category_label,
    severity_label,
)

NO_BLOCK_NOTICE = "Deploy continues. No issues blocked."


@dataclass(frozen=True)
class RenderOptions:
    """Output mode flags."""

    json: bool = False
    quiet: bool = False
    share: bool = False


def format_seconds(value: float | None) -> str:
    if not value:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"({value}s)"


def pluralize_issues(count: int) -> str:
    return f"{count} issue" + ("" if count == 1 else "s")


class Renderer:
    """Produces full, quiet or JSON output for a ScanResult."""

    def __init__(self, settings: PreflytSettings | None = None):
        self.settings = settings or PreflytSettings()

    def render(
        self,
        result: ScanResult,
        options: RenderOptions,
        message: str | None = None,
        report_url: str | None = None,
    ) -> Text:
        if options.json:
            return self.render_json(result)
        if result.status == STATUS_LIMIT_REACHED:
            return self.render_limit_reached()
        if result.status == STATUS_ERROR:
            return self.render_error(result.message)
        if options.quiet:
            return self.render_quiet(result, report_url if options.share else None)
        return self.render_full(result, message, report_url)

    def render_json(self, result: ScanResult) -> Text:
        """Pretty-print the payload exactly as received."""
        return Text(json.dumps(result.raw, indent=2, ensure_ascii=False))

    def render_limit_reached(self) -> Text:
        limit = self.settings.free_scan_limit
        text = Text()
        _line(text)
        _line(text, f"  ⓘ Free scan limit reached ({limit}/{limit} used).", "yellow")
        _line(text)
        _line(text, "  Get unlimited CLI scans with Pro - $9.99/mo")
        _line(text, f"  {self.settings.pricing_url}", "cyan")
        _line(text)
        _line(text, "  Tip: Add --key YOUR_KEY for unlimited scans.", "dim")
        _line(text)
        _line(text, f"  {NO_BLOCK_NOTICE}")
        _line(text)
        return text

    def render_error(self, message: str | None) -> Text:
        text = Text()
        _line(text)
        _line(text, f"  ⚠️  Scan could not complete: {message or 'unknown error'}", "yellow")
        _line(text)
        _line(text, f"  {NO_BLOCK_NOTICE}")
        _line(text)
        return text

    def render_quiet(self, result: ScanResult, share_url: str | None = None) -> Text:
        time_str = format_seconds(result.scan_time_seconds)
        text = Text()
        if result.status == STATUS_CLEAN:
            _line(text, f"  ✅ All clear. {time_str}".rstrip(), "green")
        else:
            _line(text, f"  ⚠️  {pluralize_issues(result.total_issues)} found. {time_str}".rstrip(), "yellow")
        if share_url:
            _line(text, f"  Details: {share_url}")
        return text

    def render_full(
        self,
        result: ScanResult,
        message: str | None = None,
        report_url: str | None = None,
    ) -> Text:
        text = Text()
        _line(text)
        for key in CATEGORY_ORDER:
            category = result.categories.get(key)
            label = category_label(key).ljust(CATEGORY_LABEL_WIDTH)
            if category is None or category.status == STATUS_CLEAN:
                text.append("  ✓ ", style="green")
                _line(text, f"{label} - clean")
            else:
                text.append("  ✗ ", style="red")
                _line(text, f"{label} - {pluralize_issues(category.count)}")

        if result.status != STATUS_CLEAN:
            _line(text)
            _line(text, f"  ⚠️  {pluralize_issues(result.total_issues)} found:", "bold yellow")
            if result.count_mismatch:
                _line(
                    text,
                    f"  (server reported {result.total_issues}, {len(result.findings)} listed)",
                    "dim",
                )
            _line(text)
            for finding in sort_findings(result.findings):
                label = severity_label(finding.severity).ljust(SEVERITY_LABEL_WIDTH)
                text.append("  ")
                text.append(label, style=SEVERITY_STYLES.get(finding.severity, "bold"))
                _line(text, finding.title)

        _line(text)
        if message:
            _line(text, f"  {message}", "italic")
        _line(text)
        details_url = report_url or self.settings.details_url
        time_str = format_seconds(result.scan_time_seconds)
        _line(text, f"  Details: {details_url}  {time_str}".rstrip())
        _line(text)
        return text

    def render_scan_error(self, url: str, message: str, as_json: bool = False) -> Text:
        """Render a dispatcher failure (no ScanResult available)."""
        if as_json:
            payload: dict[str, Any] = {"status": STATUS_ERROR, "url": url, "message": message}
            return Text(json.dumps(payload))
        return self.render_error(message)


def _line(text: Text, content: str = "", style: str | None = None) -> None:
    text.append(content, style=style)
    text.append("\n")
