"""
PCB Grid Mapper - locate placed components on a zoned board grid.

Reads a pick-and-place (centroid) export, assigns every component a two-tier
zone label such as ``B3-21`` and answers "where is C102" with a grid view.

Usage:
    from pcbgrid import BoardGridMapper, BoardSpec

    mapper = BoardGridMapper(BoardSpec(width=120.0, height=80.0))
    report = mapper.load('Panel_PICK.csv')
    component = mapper.find('c102')
    view = mapper.render(component.zone.primary)
"""

__version__ = '0.1.0'

from pcbgrid.schemas import BoardSpec, ComponentRecord, ZoneLabel
from pcbgrid.mapper import BoardGridMapper, LoadReport

__all__ = [
    'BoardGridMapper',
    'BoardSpec',
    'ComponentRecord',
    'LoadReport',
    'ZoneLabel',
]
