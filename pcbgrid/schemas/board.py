"""
Board geometry schema.

A board is a width x height rectangle (millimeters) split into a primary
grid of rows x cols cells; every primary cell is split again into a
secondary_res x secondary_res subdivision.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .zone import row_letter


class BoardSpec(BaseModel):
    """
    Board dimensions and grid resolution for one mapping session.

    Rows are lettered, so at most 26 primary rows are supported.
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0, description="Board width in millimeters")
    height: float = Field(gt=0, description="Board height in millimeters")
    rows: int = Field(default=4, ge=1, le=26, description="Primary grid row count (R)")
    cols: int = Field(default=4, ge=1, description="Primary grid column count (C)")
    secondary_res: int = Field(default=3, ge=1, description="Secondary subdivision per axis (S)")

    @property
    def cell_width(self) -> float:
        """Width of one primary cell."""
        return self.width / self.cols

    @property
    def cell_height(self) -> float:
        """Height of one primary cell."""
        return self.height / self.rows

    def primary_labels(self) -> List[str]:
        """All primary zone labels, row A first, columns left to right."""
        return [
            f'{row_letter(r)}{c + 1}'
            for r in range(self.rows)
            for c in range(self.cols)
        ]

    def has_primary(self, row_index: int, col_index: int) -> bool:
        """Returns True if the 0-based primary cell lies on this board."""
        return 0 <= row_index < self.rows and 0 <= col_index < self.cols
