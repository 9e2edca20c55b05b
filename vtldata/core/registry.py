"""Input registry that collects parsed datasets for an example."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from vtldata.parsing import Dataset, parse_dataset

logger = logging.getLogger(__name__)


class DatasetRegistry:
    """Append-only collection of the datasets available to an example."""

    def __init__(self) -> None:
        self._inputs: List[Dataset] = []

    def add_input(self, dataset: Dataset) -> Dataset:
        """Append *dataset* and return it."""

        if dataset.name in self:
            logger.warning("Dataset '%s' is already registered; the new one shadows it", dataset.name)
        self._inputs.append(dataset)
        logger.debug(
            "Registered dataset '%s' (%d column(s), %d row(s))",
            dataset.name,
            dataset.column_count,
            dataset.row_count,
        )
        return dataset

    def add_text(self, text: str | None, name: str) -> Dataset | None:
        """Parse *text* as dataset *name* and register it.

        Empty text is ignored and returns ``None``. Parse errors propagate.
        """

        if not text:
            logger.debug("Skipping dataset '%s' without content", name)
            return None
        return self.add_input(parse_dataset(text, name))

    def get(self, name: str) -> Dataset:
        """Return the most recently registered dataset called *name*."""

        for dataset in reversed(self._inputs):
            if dataset.name == name:
                return dataset
        raise KeyError(f"Dataset '{name}' is not registered")

    def __contains__(self, name: object) -> bool:
        return any(dataset.name == name for dataset in self._inputs)

    def __iter__(self) -> Iterator[Dataset]:
        return iter(list(self._inputs))

    def __len__(self) -> int:
        return len(self._inputs)

    def names(self) -> List[str]:
        """Return registered dataset names in registration order."""

        return [dataset.name for dataset in self._inputs]

    def items(self) -> Iterable[Dataset]:
        """Return a snapshot of the registered datasets."""

        return list(self._inputs)


__all__ = ["DatasetRegistry"]
