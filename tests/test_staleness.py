"""Tests for timestamp-driven rebuild decisions."""

from __future__ import annotations

from pathlib import Path

import pytest

from ejbpack.errors import ArtifactError
from ejbpack.models import OutputArtifact
from ejbpack.staleness import input_timestamps, is_stale
from tests._fixtures.descriptor_tree import touch


def test_missing_output_is_stale(tmp_path: Path) -> None:
    assert is_stale(OutputArtifact(tmp_path / "a.jar"), []) is True
    assert is_stale(OutputArtifact(tmp_path / "a.jar"), [1.0]) is True


def test_newer_input_makes_output_stale(tmp_path: Path) -> None:
    output = OutputArtifact(tmp_path / "a.jar", modified=100.0)

    assert is_stale(output, [50.0, 100.5]) is True


def test_equal_or_older_inputs_are_fresh(tmp_path: Path) -> None:
    output = OutputArtifact(tmp_path / "a.jar", modified=100.0)

    assert is_stale(output, [50.0, 100.0]) is False
    assert is_stale(output, []) is False


def test_input_timestamps_reads_every_inventory_file(tmp_path: Path) -> None:
    first = touch(_write(tmp_path / "a.class"), 10.0)
    second = touch(_write(tmp_path / "b.class"), 20.0)

    timestamps = input_timestamps({"b.class": second, "a.class": first})

    assert timestamps == [10.0, 20.0]


def test_input_timestamps_fails_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ArtifactError) as excinfo:
        input_timestamps({"x.class": tmp_path / "x.class"})

    assert excinfo.value.path == (tmp_path / "x.class").resolve()


def _write(path: Path) -> Path:
    path.write_bytes(b"")
    return path
