"""
Primary grid renderer.

Produces a GridView describing every primary cell (label, occupancy,
highlight) with the top row first, and lays it out as a bordered text grid:

    --- Board Grid (2x2) ---
    +-------+-------+
    |  B1•  |  B2   |
    |       |       |
    +-------+-------+
    |  A1   |  A2•  |
    |   ⦿   |       |
    +-------+-------+

The second line of each cell carries the target marker. Coloring is left to
a presentation adapter (see pcbgrid.render.console).
"""
from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from pcbgrid.exceptions import InvalidZoneError
from pcbgrid.schemas import BoardSpec, parse_primary_zone, row_letter

TARGET_MARKER = '⦿'
OCCUPIED_MARKER = '•'
EMPTY_MARKER = ' '

MIN_CELL_WIDTH = 7

# A laid-out line: (text, cell the text belongs to or None for borders)
Segment = Tuple[str, Optional['GridCell']]


@dataclass(frozen=True)
class GridCell:
    """One primary zone as shown in the grid."""
    label: str
    occupant_count: int = 0
    highlighted: bool = False

    @property
    def occupied(self) -> bool:
        return self.occupant_count > 0

    @property
    def marker(self) -> str:
        """Marker shown after the label."""
        if self.occupied and not self.highlighted:
            return OCCUPIED_MARKER
        return EMPTY_MARKER


@dataclass(frozen=True)
class GridView:
    """Rendered primary grid, rows ordered top (highest letter) to bottom."""
    rows: Tuple[Tuple[GridCell, ...], ...]
    target: Optional[str] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.rows), len(self.rows[0]) if self.rows else 0

    def cells(self) -> Iterator[GridCell]:
        for row in self.rows:
            yield from row

    def cell(self, label: str) -> Optional[GridCell]:
        label = label.strip().upper()
        return next((c for c in self.cells() if c.label == label), None)

    @property
    def title(self) -> str:
        rows, cols = self.shape
        return f'--- Board Grid ({rows}x{cols}) ---'


class GridRenderer:
    """Build GridViews for one board."""

    def __init__(self, board: BoardSpec):
        self.board = board

    def render(
        self,
        occupancy: Mapping[str, Sequence[str]],
        target: Optional[str] = None,
    ) -> GridView:
        """
        Describe the primary grid.

        Args:
            occupancy: Primary zone label -> designators in that zone
            target: Primary zone to highlight (case-insensitive), or None

        Returns:
            GridView with the top row first

        Raises:
            InvalidZoneError: If target is not a primary zone of this board
        """
        target_label = None
        if target is not None:
            row, col = parse_primary_zone(target)
            if not self.board.has_primary(row, col):
                raise InvalidZoneError(
                    f'Zone {target!r} is outside the '
                    f'{self.board.rows}x{self.board.cols} grid'
                )
            target_label = f'{row_letter(row)}{col + 1}'

        rows = []
        for r in reversed(range(self.board.rows)):
            cells = []
            for c in range(self.board.cols):
                label = f'{row_letter(r)}{c + 1}'
                cells.append(GridCell(
                    label=label,
                    occupant_count=len(occupancy.get(label, ())),
                    highlighted=label == target_label,
                ))
            rows.append(tuple(cells))

        return GridView(rows=tuple(rows), target=target_label)


def cell_width(view: GridView) -> int:
    """Inner width of every cell, wide enough for the longest label."""
    longest = max((len(c.label) for c in view.cells()), default=0)
    return max(MIN_CELL_WIDTH, longest + 5)


def layout(view: GridView) -> List[List[Segment]]:
    """
    Lay a view out as text lines made of segments.

    Cell segments keep a reference to their GridCell so a presentation
    adapter can style them; border segments carry None.
    """
    width = cell_width(view)
    _, cols = view.shape
    border = [('+' + '+'.join(['-' * width] * cols) + '+', None)]

    lines = []
    for row in view.rows:
        lines.append(border)

        label_line: List[Segment] = []
        marker_line: List[Segment] = []
        for cell in row:
            label_line.append(('|', None))
            label_line.append((f'  {cell.label}{cell.marker}'.ljust(width), cell))
            marker_line.append(('|', None))
            marker = TARGET_MARKER if cell.highlighted else ''
            marker_line.append((marker.center(width), cell))
        label_line.append(('|', None))
        marker_line.append(('|', None))

        lines.append(label_line)
        lines.append(marker_line)

    lines.append(border)
    return lines


def to_text(view: GridView) -> str:
    """Plain text form of a view, title included."""
    body = [''.join(text for text, _ in line) for line in layout(view)]
    return '\n'.join([view.title] + body)
