# polyline_simplification/core/__init__.py
"""
Core functionality for the polyline simplification package.

This sub-package contains the batch simplifier and the file pipeline.
"""

from polyline_simplification.core.simplifier import PolylineSimplifier
from polyline_simplification.core.pipeline import build_simplifier, simplify_files

__all__ = [
    "PolylineSimplifier",
    "build_simplifier",
    "simplify_files",
]
