# polyline_simplification/utils/__init__.py
"""
Utility functions for the polyline simplification package.

This subpackage contains the generic registry, work distribution helpers
and polyline file reading/writing.
"""

from polyline_simplification.utils.registry import Registry
from polyline_simplification.utils.chunking import distribute_work
from polyline_simplification.utils.polyline_io import (
    SUPPORTED_FORMATS,
    read_line_file,
    read_polyline,
    read_polylines,
    to_array,
    to_points,
    write_line_file,
    write_polyline,
)

__all__ = [
    "Registry",
    "distribute_work",
    "SUPPORTED_FORMATS",
    "read_line_file",
    "read_polyline",
    "read_polylines",
    "to_array",
    "to_points",
    "write_line_file",
    "write_polyline",
]
