"""Parser for inline dataset blocks.

A block is a header line describing the columns followed by data rows::

    Country[I,String],Year[I,String],Population[M,Number]
    NO,2016,5213985
    SE,2016,9903122

Each header column reads ``Name[RoleCode,TypeName]`` where the role code is
one of ``I``, ``M`` or ``A`` and the type name is ``String`` or ``Number``.
Cell values are kept as text.
"""
from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from .base import ColumnDescriptor, ColumnType, Dataset, Role
from .errors import HeaderFormatInvalid, HeaderMissing, RowSizeMismatch

# Leading newlines, any literal period and trailing newlines each become one space.
_NOISE_PATTERN = re.compile(r"\A[\r\n]+|\.|[\r\n]+\Z")
_LINE_PATTERN = re.compile(r"\r\n|\n")
_COLUMN_PATTERN = re.compile(r"([^,\[]+)\[(I|M|A),(String|Number)]?")
_BOM = "\ufeff"
COLUMN_SEPARATOR = "],"
CELL_SEPARATOR = ","


def normalize_text(text: str) -> str:
    """Replace newline runs at both ends and every ``.`` with a space, then trim.

    Trimming also drops a byte order mark at either end.
    """

    return _NOISE_PATTERN.sub(" ", text).strip().strip(_BOM).strip()


def split_lines(text: str) -> List[str]:
    """Split normalized *text* into lines; empty text has no lines."""

    if not text:
        return []
    return _LINE_PATTERN.split(text)


def parse_column(segment: str, *, dataset: str | None = None) -> ColumnDescriptor:
    """Parse a single ``Name[Role,Type]`` header segment."""

    match = _COLUMN_PATTERN.search(segment.strip())
    if match is None:
        raise HeaderFormatInvalid(
            f"invalid header format in column '{segment.strip()}'",
            segment=segment,
            dataset=dataset,
        )
    name, code, type_name = match.groups()
    try:
        role = Role.from_code(code)
    except HeaderFormatInvalid as exc:
        raise HeaderFormatInvalid(str(exc), segment=segment, dataset=dataset) from exc
    return ColumnDescriptor(name=name, role=role, type=ColumnType(type_name).tag)


def parse_header(line: str, *, dataset: str | None = None) -> Tuple[ColumnDescriptor, ...]:
    """Parse the header *line* into ordered column descriptors."""

    segments = line.split(COLUMN_SEPARATOR)
    if len(segments) < 1:
        raise HeaderFormatInvalid("invalid header format", dataset=dataset)
    return tuple(parse_column(segment, dataset=dataset) for segment in segments)


def parse_rows(
    lines: Sequence[str], column_count: int, *, dataset: str | None = None
) -> Tuple[Tuple[str, ...], ...]:
    """Split each body line into cells, enforcing *column_count* per row."""

    rows: List[Tuple[str, ...]] = []
    for index, line in enumerate(lines):
        cells = line.strip().split(CELL_SEPARATOR)
        if len(cells) != column_count:
            raise RowSizeMismatch(index, column_count, len(cells), dataset=dataset)
        rows.append(tuple(cells))
    return tuple(rows)


def parse_dataset(text: str, name: str) -> Dataset:
    """Parse an inline dataset block called *name*.

    Raises a :class:`~vtldata.parsing.errors.DatasetParseError` subclass on the
    first problem found; no partial dataset is ever returned.
    """

    lines = split_lines(normalize_text(text))
    if len(lines) < 1:
        raise HeaderMissing("no header found", dataset=name)
    header, body = lines[0], lines[1:]
    structure = parse_header(header, dataset=name)
    data = parse_rows(body, len(structure), dataset=name)
    return Dataset(name=name, structure=structure, data=data)


__all__ = [
    "CELL_SEPARATOR",
    "COLUMN_SEPARATOR",
    "normalize_text",
    "parse_column",
    "parse_dataset",
    "parse_header",
    "parse_rows",
    "split_lines",
]
