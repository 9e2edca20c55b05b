"""Catalog of named dataset blocks."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

import yaml


class CatalogError(RuntimeError):
    """Raised when the dataset catalog cannot be loaded."""


@dataclass(slots=True)
class DatasetSource:
    """A named dataset block, given inline or as a file reference."""

    name: str
    text: str | None = None
    path: Path | None = None
    encoding: str = "utf-8"
    description: str | None = None

    def read(self) -> str:
        """Return the raw text of the block."""

        if self.text is not None:
            return self.text
        if self.path is None:
            raise CatalogError(f"Dataset '{self.name}' has neither text nor path")
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise CatalogError(f"Unable to read dataset '{self.name}' from {self.path}: {exc}") from exc


def _validate(entry: object, base_dir: Path, default_encoding: str) -> DatasetSource:
    if not isinstance(entry, Mapping):
        raise CatalogError("Each dataset entry must be a mapping")
    if not entry.get("name"):
        raise CatalogError("Missing required key 'name' for dataset definition")
    name = str(entry["name"])
    has_text = entry.get("text") is not None
    has_path = bool(entry.get("path"))
    if has_text == has_path:
        raise CatalogError(f"Dataset '{name}' must define exactly one of 'text' or 'path'")
    path = None
    if has_path:
        path = Path(str(entry["path"]))
        if not path.is_absolute():
            path = base_dir / path
    return DatasetSource(
        name=name,
        text=str(entry["text"]) if has_text else None,
        path=path,
        encoding=str(entry.get("encoding")) if entry.get("encoding") else default_encoding,
        description=str(entry.get("description")) if entry.get("description") else None,
    )


def load_catalog(path: Path | None = None, *, encoding: str = "utf-8") -> List[DatasetSource]:
    """Load the YAML catalog located at *path* or the default location."""

    catalog_path = path or Path("config/datasets.yaml")
    if not catalog_path.exists():
        raise CatalogError(f"Dataset catalog not found at {catalog_path}")
    try:
        with catalog_path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse catalog: {exc}") from exc
    entries = payload.get("datasets") if isinstance(payload, Mapping) else None
    if not entries:
        raise CatalogError("Catalog does not define any datasets under 'datasets'")
    if not isinstance(entries, list):
        raise CatalogError("'datasets' must be a list")
    return [_validate(entry, catalog_path.parent, encoding) for entry in entries]


__all__ = ["CatalogError", "DatasetSource", "load_catalog"]
