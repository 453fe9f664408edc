"""Pytest configuration and fixtures."""
import pytest
from pathlib import Path
from typing import Callable

from pcbgrid.schemas import BoardSpec


# Altium-style export in millimeters; header row is line index 12
MM_CENTROID = '\n'.join([
    'Altium Designer Pick and Place Locations',
    r'C:\Projects\Panel 436-5002\Project Outputs\Pick Place for Panel.csv',
    '',
    '========================================================================',
    'File Design Information:',
    '',
    'Date:       19/10/26',
    'Time:       10:12',
    'Revision:   Not in VersionControl',
    'Variant:    No variations',
    'Units used: mm',
    '',
    '"Designator","Comment","Layer","Footprint","Center-X(mm)","Center-Y(mm)","Rotation","Description"',
    '"C102","100nF","TopLayer","0402","12.50mm","12.50mm","90","Capacitor"',
    '"R16","10k","BottomLayer","0603","87.3mm","62.0mm","0","Resistor"',
    '',
    '"U1","MCU","TopLayer","QFN48","100.0mm","100.0mm","0","Microcontroller"',
    '"c102","1uF","TopLayer","0402","50mm","50mm","0","Duplicate of C102"',
    '',
])

# Export in mils; units on line index 2, header on line index 4
MIL_CENTROID = '\n'.join([
    'Pick and Place Locations',
    'Board: 436-5002',
    'Units used: mil',
    '',
    '"Designator","Layer","Center-X(mil)","Center-Y(mil)"',
    '"C1","TopLayer","1000mil","2000mil"',
    '"R2","BottomLayer","","3937.0079mil"',
    '"Q3","TopLayer","abc","10mil"',
    '',
])


@pytest.fixture
def board() -> BoardSpec:
    """100 x 100 mm board with the default 4x4 / 3x3 grid."""
    return BoardSpec(width=100.0, height=100.0, rows=4, cols=4, secondary_res=3)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text to a file under tmp_path and return its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def mm_centroid_file(write_file) -> Path:
    """Centroid file in millimeters with one case-only duplicate."""
    return write_file('panel_mm.csv', MM_CENTROID)


@pytest.fixture
def mil_centroid_file(write_file) -> Path:
    """Centroid file in mils with one unparseable coordinate."""
    return write_file('panel_mil.csv', MIL_CENTROID)
