"""Unit tests for scene file reading and writing"""
from pathlib import Path

import pytest

from shear.exceptions import InvalidInputError, ShearError, WriteError
from shear.scenes.output import format_boundaries, read_boundaries, write_boundaries


def test_format_boundaries():
    assert format_boundaries([0, 240, 480]) == "0\n240\n480\n"


def test_format_single_boundary():
    assert format_boundaries([0]) == "0\n"


def test_write_boundaries(tmp_path: Path):
    out = tmp_path / "scenes.txt"
    assert write_boundaries([0, 250, 500, 750], out) == out
    assert out.read_bytes() == b"0\n250\n500\n750\n"


def test_write_overwrites_existing_file(tmp_path: Path):
    out = tmp_path / "scenes.txt"
    out.write_text("stale\ncontent\nhere\n")
    write_boundaries([0, 50], out)
    assert out.read_text() == "0\n50\n"


def test_write_to_missing_directory_raises(tmp_path: Path):
    out = tmp_path / "missing" / "scenes.txt"
    with pytest.raises(WriteError) as excinfo:
        write_boundaries([0], out)
    assert excinfo.value.path == out
    assert isinstance(excinfo.value.__cause__, OSError)


def test_write_to_directory_raises(tmp_path: Path):
    with pytest.raises(WriteError):
        write_boundaries([0], tmp_path)


def test_read_boundaries(tmp_path: Path):
    scene_file = tmp_path / "scenes.txt"
    scene_file.write_text("0\n240\n480\n")
    assert read_boundaries(scene_file) == [0, 240, 480]


def test_read_rejects_garbage(tmp_path: Path):
    scene_file = tmp_path / "scenes.txt"
    scene_file.write_text("0\nabc\n")
    with pytest.raises(InvalidInputError, match=":2:"):
        read_boundaries(scene_file)


def test_read_rejects_blank_lines(tmp_path: Path):
    scene_file = tmp_path / "scenes.txt"
    scene_file.write_text("0\n\n10\n")
    with pytest.raises(InvalidInputError):
        read_boundaries(scene_file)


def test_read_missing_file(tmp_path: Path):
    with pytest.raises(ShearError):
        read_boundaries(tmp_path / "nope.txt")
