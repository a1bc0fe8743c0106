"""Output rendering."""

from .labels import CATEGORY_LABELS, CATEGORY_ORDER, SEVERITY_LABELS, severity_label
from .renderer import NO_BLOCK_NOTICE, RenderOptions, Renderer, format_seconds

__all__ = [
    "CATEGORY_LABELS",
    "CATEGORY_ORDER",
    "NO_BLOCK_NOTICE",
    "RenderOptions",
    "Renderer",
    "SEVERITY_LABELS",
    "format_seconds",
    "severity_label",
]
