"""
Zone Classifier for board positions

Maps a canonical (x, y) position in millimeters to a two-tier zone label.

================================================================================
GRID SYSTEM OVERVIEW
================================================================================

- Primary grid: R rows x C columns over the whole board.
  Rows are lettered bottom to top (row 0 = 'A' = lowest Y), columns are
  numbered left to right starting at 1.
- Secondary grid: every primary cell is split into S x S cells, numbered
  1..S from the cell's own origin (bottom-left).

Label format: "{row letter}{column}-{secondary row}{secondary column}"
  e.g. "B3-21" = primary row B, column 3, secondary row 2, column 1.

================================================================================
BOUNDARIES
================================================================================

- Positions on or beyond the top/right edge clamp into the last row/column.
- Positions below zero (boards with a centered origin) clamp into the first
  row/column and the first secondary cell.

Usage:
    from pcbgrid.classifiers import ZoneClassifier

    classifier = ZoneClassifier(board)
    zone = classifier.classify(12.5, 40.0)
    print(zone.label)   # 'B1-22' on a 100 x 100 board with a 4x4/3x3 grid
"""

import math

from pcbgrid.schemas import BoardSpec, ZoneLabel


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


class ZoneClassifier:
    """Classifier for component positions on a single board."""

    def __init__(self, board: BoardSpec):
        self.board = board

    def classify(self, x: float, y: float) -> ZoneLabel:
        """
        Classify a canonical position.

        Args:
            x: Center X in millimeters
            y: Center Y in millimeters

        Returns:
            ZoneLabel for the position. Same inputs always give the same label.

        Raises:
            ValueError: If a coordinate is NaN or infinite
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f'Cannot classify non-finite position ({x}, {y})')

        board = self.board
        cell_width = board.cell_width
        cell_height = board.cell_height

        # Primary grid
        col = _clamp(math.floor(x / cell_width), 0, board.cols - 1)
        row = _clamp(math.floor(y / cell_height), 0, board.rows - 1)

        # Secondary grid, relative to the primary cell origin
        x_rel = x - col * cell_width
        y_rel = y - row * cell_height
        sub_width = cell_width / board.secondary_res
        sub_height = cell_height / board.secondary_res

        sub_col = _clamp(math.floor(x_rel / sub_width) + 1, 1, board.secondary_res)
        sub_row = _clamp(math.floor(y_rel / sub_height) + 1, 1, board.secondary_res)

        return ZoneLabel(
            primary_row=row,
            primary_col=col,
            secondary_row=sub_row,
            secondary_col=sub_col,
        )


def classify_zone(board: BoardSpec, x: float, y: float) -> ZoneLabel:
    """Classify (x, y) on ``board``. See ZoneClassifier.classify."""
    return ZoneClassifier(board).classify(x, y)
