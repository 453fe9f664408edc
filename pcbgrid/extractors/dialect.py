"""
Centroid file dialect detection.

Pick-and-place exports start with a free-form header region, for example:

    Altium Designer Pick and Place Locations
    ...
    Units used: mil

    "Designator","Footprint","Center-X(mil)","Center-Y(mil)","Layer",...

The dialect is the 0-based line index of the "Designator" header row plus
the unit system announced before it. The unit decides which coordinate
columns are read and the factor that converts them to millimeters.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Tuple, Union
import logging

from pcbgrid.exceptions import SourceNotFoundError

logger = logging.getLogger(__name__)

HEADER_TOKEN = '"Designator"'
UNITS_MARKER = 'Units used:'
NOT_FOUND = -1


class Unit(str, Enum):
    """Linear unit of the coordinate columns."""
    MM = 'mm'
    MIL = 'mil'

    @property
    def factor(self) -> float:
        """Multiplier converting this unit to millimeters."""
        return UNIT_FACTORS[self]


# 1 mil = 0.0254 mm
UNIT_FACTORS = {
    Unit.MM: 1.0,
    Unit.MIL: 0.0254,
}


@dataclass(frozen=True)
class ColumnBinding:
    """Names of the header fields read for each placement row."""
    x: str
    y: str
    designator: str = 'Designator'
    layer: str = 'Layer'

    @property
    def required(self) -> Tuple[str, ...]:
        """All column names that must be present in the header."""
        return (self.designator, self.layer, self.x, self.y)


MM_COLUMNS = ColumnBinding(x='Center-X(mm)', y='Center-Y(mm)')
MIL_COLUMNS = ColumnBinding(x='Center-X(mil)', y='Center-Y(mil)')

COLUMN_BINDINGS = {
    Unit.MM: MM_COLUMNS,
    Unit.MIL: MIL_COLUMNS,
}


@dataclass(frozen=True)
class Dialect:
    """Structural dialect of one centroid file."""
    header_offset: int = NOT_FOUND   # 0-based line index of the header row
    unit: Unit = Unit.MM

    @property
    def found(self) -> bool:
        """Returns True if the header row was located."""
        return self.header_offset >= 0

    @property
    def header_line(self) -> int:
        """1-based line number of the header row (0 when not found)."""
        return self.header_offset + 1

    @property
    def conversion_factor(self) -> float:
        return self.unit.factor

    @property
    def columns(self) -> ColumnBinding:
        return COLUMN_BINDINGS[self.unit]


def detect_dialect(lines: Iterable[str]) -> Dialect:
    """
    Scan lines from the start of a file for the header row and units.

    Stops at the first line that begins (ignoring leading whitespace) with
    the quoted "Designator" token. A "Units used:" line mentioning mil before
    that switches the unit to mil.

    Args:
        lines: Text lines, e.g. an open file

    Returns:
        Dialect; header_offset is -1 if no header row was found
    """
    unit = Unit.MM

    for index, line in enumerate(lines):
        if line.lstrip().startswith(HEADER_TOKEN):
            return Dialect(header_offset=index, unit=unit)

        if UNITS_MARKER in line and Unit.MIL.value in line.lower():
            unit = Unit.MIL

    return Dialect(header_offset=NOT_FOUND, unit=unit)


def detect_file_dialect(path: Union[str, Path]) -> Dialect:
    """
    Detect the dialect of a centroid file on disk.

    Args:
        path: Path to the centroid file

    Returns:
        Detected Dialect

    Raises:
        SourceNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(path)

    with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
        dialect = detect_dialect(f)

    if dialect.found:
        logger.debug(
            f'{path.name}: header on line {dialect.header_line}, '
            f'units {dialect.unit.value}'
        )
    else:
        logger.warning(f'{path.name}: no {HEADER_TOKEN} header row found')

    return dialect
