"""Core collaborators for registering parsed datasets."""
from __future__ import annotations

from .registry import DatasetRegistry
from .utils import package_version

__all__ = ["DatasetRegistry", "package_version"]
