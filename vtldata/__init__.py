"""vtldata - parse inline VTL example datasets into column metadata and rows."""
from __future__ import annotations

from vtldata.core import DatasetRegistry
from vtldata.parsing import (
    ColumnDescriptor,
    ColumnType,
    Dataset,
    DatasetParseError,
    HeaderFormatInvalid,
    HeaderMissing,
    Role,
    RowSizeMismatch,
    parse,
    parse_dataset,
)
from vtldata.settings import Settings

__all__ = [
    "__version__",
    "ColumnDescriptor",
    "ColumnType",
    "Dataset",
    "DatasetParseError",
    "DatasetRegistry",
    "HeaderFormatInvalid",
    "HeaderMissing",
    "Role",
    "RowSizeMismatch",
    "Settings",
    "parse",
    "parse_dataset",
]


def __getattr__(name: str):  # pragma: no cover - passthrough to package metadata
    if name == "__version__":
        from vtldata.core.utils import package_version

        return package_version()
    raise AttributeError(name)
