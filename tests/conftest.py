from __future__ import annotations

from pathlib import Path

import pytest

from vtldata.core.registry import DatasetRegistry


SAMPLE_TEXT = """
Country[I,String],Year[I,String],Population[M,Number]
NO,2016,5213985
SE,2016,9903122
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def registry() -> DatasetRegistry:
    return DatasetRegistry()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a catalog with an inline block, a file block and a broken block."""

    (tmp_path / "blocks").mkdir()
    (tmp_path / "blocks" / "ds2.txt").write_text(
        "id[I,String],value[M,Number]\na,1\nb,2\n", encoding="utf-8"
    )
    path = tmp_path / "datasets.yaml"
    path.write_text(
        """
datasets:
  - name: ds1
    description: One identifier and one measure.
    text: |
      A[I,String],B[M,Number]
      x,1
      y,2
  - name: ds2
    path: blocks/ds2.txt
  - name: broken
    text: |
      A[I,String],B[M,Number]
      x,1,2
""",
        encoding="utf-8",
    )
    return path
