"""Errors raised while parsing inline dataset text."""
from __future__ import annotations


class DatasetParseError(ValueError):
    """Base class for failures that abort a dataset parse."""

    def __init__(self, message: str, *, dataset: str | None = None) -> None:
        self.dataset = dataset
        if dataset:
            message = f"{message} (dataset '{dataset}')"
        super().__init__(message)


class HeaderMissing(DatasetParseError):
    """Raised when the text holds no header line."""


class HeaderFormatInvalid(DatasetParseError):
    """Raised when a header column does not follow ``Name[Role,Type]``."""

    def __init__(self, message: str, *, segment: str | None = None, dataset: str | None = None) -> None:
        self.segment = segment
        super().__init__(message, dataset=dataset)


class RowSizeMismatch(DatasetParseError):
    """Raised when a data row has a different cell count than the header."""

    def __init__(self, row_index: int, expected: int, actual: int, *, dataset: str | None = None) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"row {row_index} size inconsistent with header: "
            f"expected {expected} cell(s), got {actual}",
            dataset=dataset,
        )


__all__ = ["DatasetParseError", "HeaderFormatInvalid", "HeaderMissing", "RowSizeMismatch"]
