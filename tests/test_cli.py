from __future__ import annotations

import json
from pathlib import Path

import pytest

from vtldata import cli


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    # setenv first so values written by load_environment() are undone on teardown.
    for key in ("ENV_FILE", "LOGGING_CONFIG", "VTLDATA_CATALOG", "VTLDATA_STRICT", "VTLDATA_ENCODING"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def test_parse_command_prints_dataset_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "population.txt"
    source.write_text("A[I,String],B[M,Number]\nx,1\n", encoding="utf-8")

    assert cli.main(["parse", str(source)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "population"
    assert payload["structure"][1] == {"name": "B", "role": "MEASURE", "type": "java.lang.Number"}
    assert payload["data"] == [["x", "1"]]


def test_parse_command_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "bad.txt"
    source.write_text("A[I]\n", encoding="utf-8")

    assert cli.main(["parse", str(source), "--name", "bad"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_load_command_summarizes_catalog(catalog_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["load", str(catalog_file)]) == 1

    out = capsys.readouterr().out
    assert "- ds1: 2 column(s), 2 row(s)" in out
    assert "- broken: failed" in out


def test_load_command_uses_catalog_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    catalog = tmp_path / "ok.yaml"
    catalog.write_text("datasets:\n  - name: ds\n    text: 'A[I,String]'\n", encoding="utf-8")
    (tmp_path / ".env").write_text(f"VTLDATA_CATALOG={catalog}\n", encoding="utf-8")

    assert cli.main(["load"]) == 0
    assert "- ds: 1 column(s), 0 row(s)" in capsys.readouterr().out


def test_load_command_missing_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["load", str(tmp_path / "missing.yaml")]) == 1
    assert "Dataset catalog not found" in capsys.readouterr().err


def test_parse_command_reports_undecodable_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "latin.txt"
    source.write_bytes(b"\xff\xfeA[I,String]\n")

    assert cli.main(["parse", str(source)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_parse_command_reports_unknown_encoding(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "ok.txt"
    source.write_text("A[I,String]\nx\n", encoding="utf-8")

    assert cli.main(["parse", str(source), "--encoding", "no-such-codec"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_load_command_prints_descriptions(catalog_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["load", str(catalog_file)])

    assert "# One identifier and one measure." in capsys.readouterr().out
