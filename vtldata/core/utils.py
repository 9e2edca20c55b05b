"""Miscellaneous helpers for vtldata."""
from __future__ import annotations

from importlib import metadata

__all__ = ["package_version"]


def package_version() -> str:
    """Return the installed vtldata version or a sensible default."""

    try:
        return metadata.version("vtldata")
    except metadata.PackageNotFoundError:  # pragma: no cover - fallback path
        return "0.0.0"
