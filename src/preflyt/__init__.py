"""preflyt-check package."""

__all__ = ["ScanError", "ScanResult", "app", "main", "scan"]


def __getattr__(name: str):
    if name in ("app", "main"):
        from preflyt.cli import app, main

        return {"app": app, "main": main}[name]
    if name in ("scan", "ScanError", "ScanResult"):
        from preflyt.modules import scan as scan_module

        return getattr(scan_module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
