"""Inline dataset parsing."""
from __future__ import annotations

from .base import ColumnDescriptor, ColumnType, Dataset, Role
from .errors import DatasetParseError, HeaderFormatInvalid, HeaderMissing, RowSizeMismatch
from .parser import parse_dataset

parse = parse_dataset

__all__ = [
    "ColumnDescriptor",
    "ColumnType",
    "Dataset",
    "DatasetParseError",
    "HeaderFormatInvalid",
    "HeaderMissing",
    "Role",
    "RowSizeMismatch",
    "parse",
    "parse_dataset",
]
