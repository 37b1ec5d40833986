# polyline_simplification/utils/polyline_io.py
"""
Reading and writing polyline files.

Supported formats:

- ``.line``: plain text, the first line holds the vertex count and each
  following line holds the ``x y`` coordinates of one vertex.
- ``.npy``: a numpy array of shape (num_vertices, 2).
- ``.csv``: one ``x,y`` pair per row, no header.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import numpy as np

from polyline_simplification.geometry import Point2

# Configure module logger
logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = (".line", ".npy", ".csv")


def to_points(array: np.ndarray) -> List[Point2]:
    """
    Convert an array of shape (num_vertices, 2) to a list of points.

    Raises:
        ValueError: If the array has the wrong shape.
    """
    array = np.asarray(array, dtype=float)
    if array.size == 0:
        return []
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Invalid polyline shape: {array.shape}. Expected (N, 2)")
    return [Point2(float(x), float(y)) for x, y in array]


def to_array(points: Iterable[Point2]) -> np.ndarray:
    """Convert points to a float array of shape (num_vertices, 2)."""
    coords = [Point2.of(p).as_tuple() for p in points]
    return np.array(coords, dtype=float).reshape(len(coords), 2)


def read_line_file(file_path: Union[str, Path]) -> np.ndarray:
    """
    Read a .line file and return its vertices as a numpy array.

    Args:
        file_path: Path to the .line file.

    Returns:
        np.ndarray: Array of shape (num_vertices, 2).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file format is invalid.

    Example:
        >>> vertices = read_line_file("track_0001.line")
        >>> print(vertices.shape)
        (100, 2)
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Line file not found: {file_path}")

    with open(file_path, 'r') as f:
        # Skip the vertex count, it is not always accurate
        next(f, None)
        lines = f.readlines()

    vertices = []
    for line in lines:
        line = line.strip()
        if not line:
            continue

        try:
            coords = list(map(float, line.split()))
        except ValueError as e:
            raise ValueError(f"Error parsing coordinates in {file_path}: {e}") from e

        if len(coords) != 2:
            raise ValueError(f"Invalid line format in {file_path}: {line}")

        vertices.append(coords)

    return np.array(vertices, dtype=float).reshape(len(vertices), 2)


def write_line_file(file_path: Union[str, Path], vertices: np.ndarray) -> None:
    """Write vertices to a .line file."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w') as f:
        f.write(f"{len(vertices)}\n")
        for x, y in vertices:
            f.write(f"{float(x)!r} {float(y)!r}\n")


def read_polyline(file_path: Union[str, Path]) -> np.ndarray:
    """
    Read a polyline file in any supported format.

    Args:
        file_path: Path to a .line, .npy or .csv file.

    Returns:
        np.ndarray: Array of shape (num_vertices, 2).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the format is unsupported or the content is invalid.
    """
    file_path = Path(file_path)
    suffix = file_path.suffix.lower()

    if suffix not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported polyline format '{suffix}'. Supported: {list(SUPPORTED_FORMATS)}"
        )

    if not file_path.exists():
        raise FileNotFoundError(f"Polyline file not found: {file_path}")

    if suffix == ".line":
        vertices = read_line_file(file_path)
    elif suffix == ".npy":
        vertices = np.load(file_path)
    else:
        try:
            vertices = np.loadtxt(file_path, delimiter=",", ndmin=2)
        except ValueError as e:
            raise ValueError(f"Error parsing coordinates in {file_path}: {e}") from e

    vertices = np.asarray(vertices, dtype=float)
    if vertices.size == 0:
        return vertices.reshape(0, 2)
    if vertices.ndim != 2 or vertices.shape[1] != 2:
        raise ValueError(f"Invalid polyline shape in {file_path}: {vertices.shape}. Expected (N, 2)")

    return vertices


def write_polyline(file_path: Union[str, Path], points: Union[np.ndarray, Iterable[Point2]]) -> None:
    """
    Write a polyline to a file, choosing the format from the extension.

    Args:
        file_path: Output path (.line, .npy or .csv).
        points: Vertices as an (N, 2) array or an iterable of points.

    Raises:
        ValueError: If the format is unsupported.
    """
    file_path = Path(file_path)
    suffix = file_path.suffix.lower()

    if suffix not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported polyline format '{suffix}'. Supported: {list(SUPPORTED_FORMATS)}"
        )

    vertices = points if isinstance(points, np.ndarray) else to_array(points)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".line":
        write_line_file(file_path, vertices)
    elif suffix == ".npy":
        np.save(file_path, vertices)
    else:
        np.savetxt(file_path, vertices, delimiter=",", fmt="%.17g")


def read_polylines(
        directory: Union[str, Path],
        pattern: str = "*.line"
) -> List[Tuple[Path, np.ndarray]]:
    """
    Read every polyline file in a directory matching a glob pattern.

    Files that cannot be parsed are logged and skipped.

    Args:
        directory: Directory to search.
        pattern: Glob pattern for file names.

    Returns:
        List[Tuple[Path, np.ndarray]]: (path, vertices) pairs sorted by path.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    polylines: List[Tuple[Path, np.ndarray]] = []

    for file_path in sorted(directory.glob(pattern)):
        try:
            polylines.append((file_path, read_polyline(file_path)))
        except ValueError as e:
            logger.warning(f"Error reading {file_path}: {e}")

    if not polylines:
        logger.warning(f"No valid polylines found in {directory} matching '{pattern}'")
    else:
        logger.info(f"Read {len(polylines)} polylines from {directory}")

    return polylines
