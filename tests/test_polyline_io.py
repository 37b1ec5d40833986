"""Tests for polyline file reading and writing."""

import numpy as np
import pytest

from polyline_simplification.geometry import Point2
from polyline_simplification.utils import (
    read_line_file,
    read_polyline,
    read_polylines,
    to_array,
    to_points,
    write_polyline,
)


def test_read_line_file_skips_header_and_blank_lines(tmp_path):
    path = tmp_path / "track.line"
    path.write_text("3\n0 0\n\n1.5 2\n3 -1\n")

    vertices = read_line_file(path)

    np.testing.assert_array_equal(vertices, [[0, 0], [1.5, 2], [3, -1]])


def test_read_line_file_rejects_bad_rows(tmp_path):
    path = tmp_path / "bad.line"
    path.write_text("2\n0 0 0\n1 1\n")

    with pytest.raises(ValueError, match="Invalid line format"):
        read_line_file(path)


def test_read_line_file_rejects_non_numeric(tmp_path):
    path = tmp_path / "bad.line"
    path.write_text("1\nx y\n")

    with pytest.raises(ValueError, match="Error parsing"):
        read_line_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_polyline(tmp_path / "missing.npy")


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        read_polyline(tmp_path / "track.gpx")
    with pytest.raises(ValueError, match="Unsupported"):
        write_polyline(tmp_path / "track.gpx", np.zeros((2, 2)))


def test_single_row_csv(tmp_path):
    path = tmp_path / "point.csv"
    path.write_text("1.0,2.0\n")

    np.testing.assert_array_equal(read_polyline(path), [[1.0, 2.0]])


@pytest.mark.parametrize("suffix", [".line", ".npy", ".csv"])
def test_write_then_read_points(tmp_path, suffix):
    points = [Point2(0.1, 0.2), Point2(1.0 / 3.0, -4.0), Point2(5.0, 6.5)]
    path = tmp_path / f"track{suffix}"

    write_polyline(path, points)

    assert to_points(read_polyline(path)) == points


def test_npy_rejects_wrong_shape(tmp_path):
    path = tmp_path / "cube.npy"
    np.save(path, np.zeros((4, 3)))

    with pytest.raises(ValueError, match="Expected"):
        read_polyline(path)


def test_read_polylines_skips_invalid_files(tmp_path):
    (tmp_path / "a.line").write_text("2\n0 0\n1 1\n")
    (tmp_path / "b.line").write_text("1\nnot numbers\n")
    (tmp_path / "c.line").write_text("1\n5 5\n")

    polylines = read_polylines(tmp_path, "*.line")

    assert [path.name for path, _ in polylines] == ["a.line", "c.line"]


def test_read_polylines_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_polylines(tmp_path / "nowhere")


def test_array_conversions():
    assert to_points(np.empty((0, 2))) == []
    assert to_array([]).shape == (0, 2)
    np.testing.assert_array_equal(to_array([(1, 2), Point2(3, 4)]), [[1, 2], [3, 4]])

    with pytest.raises(ValueError):
        to_points(np.zeros((3, 3)))
