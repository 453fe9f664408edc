"""
Two-tier zone labels.

A zone label such as ``B3-21`` combines:
- Primary zone: row letter (A = lowest row on the board) + 1-based column
- Secondary zone: 1-based row then column inside the owning primary cell
"""

import re
from dataclasses import dataclass
from typing import Tuple

from pcbgrid.exceptions import InvalidZoneError

PRIMARY_ZONE_PATTERN = re.compile(r'^([A-Z])(\d+)$')


def row_letter(row_index: int) -> str:
    """Row letter for a 0-based primary row index (0 -> 'A')."""
    return chr(ord('A') + row_index)


def parse_primary_zone(label: str) -> Tuple[int, int]:
    """
    Parse a primary zone label into 0-based (row, col) indices.

    Args:
        label: Primary zone label, case-insensitive (e.g., "b3")

    Returns:
        Tuple of (row_index, col_index)

    Raises:
        InvalidZoneError: If the label is not a letter followed by a number
    """
    val = str(label or '').strip().upper()
    m = PRIMARY_ZONE_PATTERN.match(val)
    if not m or int(m.group(2)) < 1:
        raise InvalidZoneError(f'Not a primary zone label: {label!r}')
    return ord(m.group(1)) - ord('A'), int(m.group(2)) - 1


@dataclass(frozen=True)
class ZoneLabel:
    """Zone assigned to a single (x, y) position on a board."""
    primary_row: int      # 0-based, 0 = 'A' = lowest Y
    primary_col: int      # 0-based
    secondary_row: int    # 1-based within the S x S subdivision
    secondary_col: int    # 1-based within the S x S subdivision

    @property
    def row_letter(self) -> str:
        """Letter of the primary row."""
        return row_letter(self.primary_row)

    @property
    def primary(self) -> str:
        """Primary zone designation (e.g., 'A1')."""
        return f'{self.row_letter}{self.primary_col + 1}'

    @property
    def secondary(self) -> str:
        """Secondary zone designation, row then column (e.g., '23')."""
        return f'{self.secondary_row}{self.secondary_col}'

    @property
    def label(self) -> str:
        """Full two-tier label (e.g., 'A1-23')."""
        return f'{self.primary}-{self.secondary}'

    def __str__(self) -> str:
        return self.label
