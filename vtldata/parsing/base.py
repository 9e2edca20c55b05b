"""Column and dataset records produced by the parser."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

from .errors import HeaderFormatInvalid

TYPE_TAG_PREFIX = "java.lang."


class Role(str, Enum):
    """Semantic role of a dataset column."""

    IDENTIFIER = "IDENTIFIER"
    MEASURE = "MEASURE"
    ATTRIBUTE = "ATTRIBUTE"

    @classmethod
    def from_code(cls, code: str) -> "Role":
        """Return the role for the one-letter header *code*."""

        try:
            return _ROLE_CODES[code]
        except KeyError as exc:
            raise HeaderFormatInvalid(f"unknown role code '{code}'") from exc


_ROLE_CODES: Dict[str, Role] = {
    "I": Role.IDENTIFIER,
    "M": Role.MEASURE,
    "A": Role.ATTRIBUTE,
}


class ColumnType(str, Enum):
    """Value types accepted in a header."""

    STRING = "String"
    NUMBER = "Number"

    @property
    def tag(self) -> str:
        return TYPE_TAG_PREFIX + self.value


@dataclass(slots=True, frozen=True)
class ColumnDescriptor:
    """Name, role and type tag of a single column."""

    name: str
    role: Role
    type: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "role": self.role.value, "type": self.type}


@dataclass(slots=True, frozen=True)
class Dataset:
    """Parsed column structure plus raw row cells."""

    name: str
    structure: Tuple[ColumnDescriptor, ...]
    data: Tuple[Tuple[str, ...], ...]

    @property
    def column_count(self) -> int:
        return len(self.structure)

    @property
    def row_count(self) -> int:
        return len(self.data)

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.structure]

    def column(self, name: str) -> ColumnDescriptor:
        """Return the first column called *name*."""

        for column in self.structure:
            if column.name == name:
                return column
        raise KeyError(f"Column '{name}' not found in dataset '{self.name}'")

    def roles(self) -> Dict[str, Role]:
        return {column.name: column.role for column in self.structure}

    def types(self) -> Dict[str, str]:
        return {column.name: column.type for column in self.structure}

    def records(self) -> List[Dict[str, str]]:
        """Return rows as mappings keyed by column name."""

        names = self.column_names
        return [dict(zip(names, row)) for row in self.data]

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready representation used by downstream consumers."""

        return {
            "name": self.name,
            "structure": [column.to_dict() for column in self.structure],
            "data": [list(row) for row in self.data],
        }


__all__ = ["ColumnDescriptor", "ColumnType", "Dataset", "Role", "TYPE_TAG_PREFIX"]
