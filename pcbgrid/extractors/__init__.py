"""Extractors: dialect detection and row reading for centroid files."""

from .dialect import (
    ColumnBinding,
    Dialect,
    MIL_COLUMNS,
    MM_COLUMNS,
    Unit,
    detect_dialect,
    detect_file_dialect,
)
from .centroid_extractor import CentroidExtractor

__all__ = [
    'CentroidExtractor',
    'ColumnBinding',
    'Dialect',
    'MIL_COLUMNS',
    'MM_COLUMNS',
    'Unit',
    'detect_dialect',
    'detect_file_dialect',
]
