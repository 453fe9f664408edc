"""
Schemas for board geometry, zone labels and mapped components.

Usage:
    from pcbgrid.schemas import BoardSpec, ComponentRecord, ZoneLabel
"""

from .zone import ZoneLabel, parse_primary_zone, row_letter
from .board import BoardSpec
from .component import ComponentRecord, normalize_key

__all__ = [
    'BoardSpec',
    'ComponentRecord',
    'ZoneLabel',
    'normalize_key',
    'parse_primary_zone',
    'row_letter',
]
