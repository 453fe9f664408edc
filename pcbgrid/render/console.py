"""
Terminal presentation of mapping results.

Turns GridViews and component records into colored output with rich. The
core never touches terminal state; everything here writes to a Console.
"""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from pcbgrid.render.grid_renderer import GridView, layout
from pcbgrid.schemas import BoardSpec, ComponentRecord

TARGET_STYLE = 'bold white on dark_green'
OCCUPIED_STYLE = 'yellow'

console = Console()


def grid_text(view: GridView) -> Text:
    """Styled grid: the target cell highlighted, occupied cells colored."""
    text = Text()
    text.append(view.title + '\n', style='bold')
    for line in layout(view):
        for segment, cell in line:
            style = None
            if cell is not None and cell.highlighted:
                style = TARGET_STYLE
            elif cell is not None and cell.occupied:
                style = OCCUPIED_STYLE
            text.append(segment, style=style)
        text.append('\n')
    text.rstrip()
    return text


def print_grid(view: GridView, out: Optional[Console] = None) -> None:
    """Print a grid view."""
    out = out or console
    out.print()
    out.print(grid_text(view))


def print_board_summary(board: BoardSpec, out: Optional[Console] = None) -> None:
    """Print board size and primary cell size."""
    out = out or console
    out.print(
        f'Board Size: {board.width:g}x{board.height:g}mm. '
        f'Grid Zone Size: {board.cell_width:.2f}x{board.cell_height:.2f}mm.'
    )


def print_load_report(report, out: Optional[Console] = None) -> None:
    """Print the detected file configuration and load results."""
    out = out or console
    dialect = report.dialect
    columns = dialect.columns

    out.print('\n[bold]File Configuration Detected:[/]')
    if dialect.found:
        out.print(f'  Header starts on line: {dialect.header_line}')
    else:
        out.print('  Header starts on line: [red]not found[/]')
    out.print(f'  Units: {dialect.unit.value} (Factor: {dialect.conversion_factor})')
    out.print(f'  X/Y Headers: {columns.x}, {columns.y}')

    out.print(f'[green]Successfully mapped {report.loaded} unique components.[/]')
    for designator in report.duplicates:
        out.print(f'[yellow]Warning:[/] Duplicate designator found: {escape(designator)}')
    for error in report.errors:
        out.print(f'[yellow]Skipped:[/] {escape(error["error"])}')
    for warning in report.warnings:
        out.print(f'[yellow]Warning:[/] {escape(warning)}')


def print_component(record: ComponentRecord, board: BoardSpec, out: Optional[Console] = None) -> None:
    """Print where a found component sits."""
    out = out or console
    res = board.secondary_res
    out.print(f'\n[bold green]FOUND: {escape(record.designator)}[/]')
    out.print(
        f'   Precise Location: [bold]{record.zone.label}[/] '
        f'(Primary Zone-Secondary Row/Col)'
    )
    out.print(
        f'      -> Primary Zone ({record.zone.primary}): '
        f'the coarse {board.rows}x{board.cols} section.'
    )
    out.print(
        f'      -> Secondary Zone (-{record.zone.secondary}): '
        f'the fine {res}x{res} subdivision within that section.'
    )
    out.print(f'   Side: {escape(record.layer)}')
    out.print(f'   Coordinates: X={record.x:.2f}mm, Y={record.y:.2f}mm')


def print_not_found(identifier: str, out: Optional[Console] = None) -> None:
    """Print a lookup miss."""
    out = out or console
    out.print(
        f"\n[bold red]ERROR:[/] Reference Designator '{escape(identifier)}' not found.",
        highlight=False,
    )
