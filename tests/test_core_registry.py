from __future__ import annotations

import logging

import pytest

from vtldata.core.registry import DatasetRegistry
from vtldata.parsing import RowSizeMismatch, parse_dataset


def test_registry_appends_datasets_in_order(registry: DatasetRegistry, sample_text: str) -> None:
    registry.add_text(sample_text, "first")
    registry.add_text("A[I,String]\nx", "second")

    assert registry.names() == ["first", "second"]
    assert len(registry) == 2
    assert "second" in registry
    assert [dataset.name for dataset in registry] == ["first", "second"]


def test_registry_stores_dataset_by_reference(registry: DatasetRegistry) -> None:
    dataset = parse_dataset("A[I,String]\nx", "ds")

    assert registry.add_input(dataset) is dataset
    assert registry.get("ds") is dataset


def test_registry_duplicate_names_shadow_earlier_entries(
    registry: DatasetRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    registry.add_text("A[I,String]\nx", "ds")
    with caplog.at_level(logging.WARNING, logger="vtldata.core.registry"):
        latest = registry.add_text("B[M,Number]\n1", "ds")

    assert registry.names() == ["ds", "ds"]
    assert registry.get("ds") is latest
    assert "already registered" in caplog.text


def test_registry_skips_empty_text(registry: DatasetRegistry) -> None:
    assert registry.add_text("", "empty") is None
    assert registry.add_text(None, "missing") is None
    assert len(registry) == 0


def test_registry_propagates_parse_errors(registry: DatasetRegistry) -> None:
    with pytest.raises(RowSizeMismatch):
        registry.add_text("A[I,String]\nx,y", "ds")

    assert "ds" not in registry


def test_registry_get_unknown_name(registry: DatasetRegistry) -> None:
    with pytest.raises(KeyError):
        registry.get("missing")


def test_registry_items_returns_a_snapshot(registry: DatasetRegistry) -> None:
    dataset = registry.add_text("A[I,String]\nx", "ds")
    snapshot = registry.items()

    registry.add_text("B[M,Number]\n1", "other")

    assert list(snapshot) == [dataset]
    assert len(registry.items()) == 2
