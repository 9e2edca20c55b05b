"""Load catalog datasets into a registry."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from vtldata.catalog import CatalogError, DatasetSource, load_catalog
from vtldata.core.registry import DatasetRegistry
from vtldata.parsing import DatasetParseError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadResult:
    """Outcome of loading a single dataset block."""

    name: str
    status: str
    column_count: int = 0
    row_count: int = 0
    error: str | None = None
    description: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


def load_datasets(
    sources: Iterable[DatasetSource],
    registry: DatasetRegistry,
    *,
    strict: bool = False,
) -> List[LoadResult]:
    """Parse every source into *registry* and report one result per source.

    Failures are logged and recorded unless *strict* is set, in which case the
    first failure is raised.
    """

    results: List[LoadResult] = []
    for source in sources:
        logger.info("Loading dataset %s", source.name)
        try:
            dataset = registry.add_text(source.read(), source.name)
        except (CatalogError, DatasetParseError) as exc:
            if strict:
                raise
            logger.error("Failed to load dataset %s: %s", source.name, exc)
            results.append(
                LoadResult(
                    name=source.name,
                    status="failed",
                    error=str(exc),
                    description=source.description,
                )
            )
            continue
        if dataset is None:
            logger.warning("Dataset %s has no content; skipped", source.name)
            results.append(
                LoadResult(name=source.name, status="skipped", description=source.description)
            )
            continue
        results.append(
            LoadResult(
                name=dataset.name,
                status="success",
                column_count=dataset.column_count,
                row_count=dataset.row_count,
                description=source.description,
            )
        )
    failures = sum(1 for result in results if result.status == "failed")
    logger.info(
        "Loaded %d dataset(s): %d failure(s)",
        len(results) - failures,
        failures,
    )
    return results


def load_catalog_into(
    path: Path | None,
    registry: DatasetRegistry,
    *,
    encoding: str = "utf-8",
    strict: bool = False,
) -> List[LoadResult]:
    """Load the catalog at *path* and parse its datasets into *registry*."""

    try:
        sources = load_catalog(path, encoding=encoding)
    except CatalogError as exc:
        logger.error("Unable to load dataset catalog: %s", exc)
        raise
    logger.info("Loaded %d dataset source(s) from catalog", len(sources))
    return load_datasets(sources, registry, strict=strict)


__all__ = ["LoadResult", "load_catalog_into", "load_datasets"]
