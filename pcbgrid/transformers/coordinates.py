"""
Coordinate text normalization.

Centroid exports write coordinates as text, sometimes with the unit glued
on ("12.5mm", "492.13mil"). Values are parsed with a period as the decimal
separator regardless of locale and scaled to millimeters.
"""

import math
import re
from typing import Optional

from pcbgrid.exceptions import MalformedFieldError

UNIT_SUFFIXES = ('mm', 'mil')

DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


def strip_unit_suffixes(text: str) -> str:
    """Trim text and remove 'mm' and 'mil' tokens wherever they appear."""
    cleaned = text.strip()
    for suffix in UNIT_SUFFIXES:
        cleaned = re.sub(suffix, '', cleaned, flags=re.IGNORECASE)
    return cleaned.strip()


def normalize_coordinate(
    text: Optional[str],
    factor: float = 1.0,
    field: str = 'coordinate',
) -> float:
    """
    Parse a raw coordinate cell into millimeters.

    Empty or whitespace-only text gives 0.0.

    Args:
        text: Raw cell text (e.g., "12.5mil")
        factor: Unit conversion factor to millimeters
        field: Field name used in error messages

    Returns:
        Coordinate in millimeters

    Raises:
        MalformedFieldError: If the text is not a number after stripping units

    Examples:
        >>> normalize_coordinate("12.5mm")
        12.5
        >>> normalize_coordinate("", 0.0254)
        0.0
    """
    if text is None or not str(text).strip():
        return 0.0

    cleaned = strip_unit_suffixes(str(text))
    if not DECIMAL_PATTERN.match(cleaned):
        raise MalformedFieldError(field, str(text))

    value = float(cleaned) * factor
    if not math.isfinite(value):
        raise MalformedFieldError(field, str(text))
    return value
