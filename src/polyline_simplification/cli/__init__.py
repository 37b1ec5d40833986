"""
Command-line entry points for polyline simplification.
"""
