"""Installed package version lookup."""

from importlib.metadata import PackageNotFoundError, version as pkg_version


def get_version() -> str:
    try:
        return pkg_version("preflyt-check")
    except PackageNotFoundError:
        return "0.0.0+unknown"
