"""
CLI interface for the board grid mapper.

Loads a centroid file, then answers "where is this designator" with a
grid view, either for designators given on the command line or in an
interactive prompt loop.
"""

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from pcbgrid import __version__
from pcbgrid.config.settings import settings
from pcbgrid.exceptions import PcbGridError
from pcbgrid.loaders.file_loader import FileLoader
from pcbgrid.mapper import BoardGridMapper
from pcbgrid.render import console as display
from pcbgrid.schemas import BoardSpec
from pcbgrid.utils.logger import configure_logging

logger = logging.getLogger(__name__)

QUIT_COMMAND = 'q'


def parse_dimension(text: Optional[str], default: float) -> float:
    """Parse a board dimension, falling back to ``default`` on bad input."""
    try:
        value = float(str(text).strip())
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value


def prompt_dimension(
    label: str,
    default: float,
    input_fn: Callable[[str], str],
) -> float:
    """Ask for one board dimension in millimeters."""
    try:
        text = input_fn(f'Enter Board {label} in mm (e.g., {default:.1f}): ')
    except EOFError:
        return default
    return parse_dimension(text, default)


def build_board(
    args: argparse.Namespace,
    input_fn: Callable[[str], str],
    out: Console,
) -> BoardSpec:
    """Board from command-line options, prompting for missing dimensions."""
    width, height = args.width, args.height
    if width is None or height is None:
        out.print('[bold]--- Board Setup ---[/]')
    if width is None:
        width = prompt_dimension('Width', settings.BOARD_WIDTH, input_fn)
    if height is None:
        height = prompt_dimension('Height', settings.BOARD_HEIGHT, input_fn)

    board = settings.default_board(width=width, height=height)
    overrides = {
        name: value
        for name, value in (
            ('rows', args.rows),
            ('cols', args.cols),
            ('secondary_res', args.secondary),
        )
        if value is not None
    }
    if overrides:
        board = BoardSpec(**{**board.model_dump(), **overrides})
    return board


def show_component(mapper: BoardGridMapper, identifier: str, out: Console) -> bool:
    """Print the grid and location for one designator. Returns True if found."""
    component = mapper.find(identifier)
    if component is None:
        display.print_not_found(identifier, out)
        return False

    display.print_grid(mapper.render(component.zone.primary), out)
    display.print_component(component, mapper.board, out)
    return True


def search_loop(
    mapper: BoardGridMapper,
    input_fn: Callable[[str], str],
    out: Console,
) -> None:
    """Read designators until 'q' or end of input."""
    out.print('\n[bold]--- Reference Designator Search ---[/]')
    out.print(f"Type '{QUIT_COMMAND}' to quit.")

    while True:
        try:
            text = input_fn('Enter RD to search (e.g., c102, R16): ')
        except EOFError:
            break

        query = (text or '').strip()
        if query.lower() == QUIT_COMMAND:
            break
        if not query:
            continue

        show_component(mapper, query, out)


def run_find(mapper: BoardGridMapper, identifiers: Iterable[str], out: Console) -> bool:
    """Look up each designator. Returns True if all were found."""
    found = [show_component(mapper, identifier, out) for identifier in identifiers]
    return all(found)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pcbgrid',
        description='Locate components of a pick-and-place file on a zoned board grid',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive: prompts for board size, then for designators
  pcbgrid Panel_PICK.csv

  # One-shot lookups
  pcbgrid Panel_PICK.csv --width 120 --height 80 --find C102 R16

  # Finer 6x6 primary grid, export every classified component
  pcbgrid Panel_PICK.csv --width 120 --height 80 --rows 6 --cols 6 \\
      --export zones.csv

  # Show only the occupancy grid
  pcbgrid Panel_PICK.csv --width 120 --height 80 --grid
""",
    )

    parser.add_argument(
        'centroid_file',
        type=Path,
        help='Centroid / pick-and-place CSV file',
    )
    parser.add_argument(
        '--width',
        type=float,
        help='Board width in mm (prompted if omitted)',
    )
    parser.add_argument(
        '--height',
        type=float,
        help='Board height in mm (prompted if omitted)',
    )
    parser.add_argument(
        '--rows',
        type=int,
        help=f'Primary grid rows, at most 26 (default: {settings.GRID_ROWS})',
    )
    parser.add_argument(
        '--cols',
        type=int,
        help=f'Primary grid columns (default: {settings.GRID_COLS})',
    )
    parser.add_argument(
        '--secondary',
        type=int,
        help=f'Secondary subdivision per axis (default: {settings.SECONDARY_RES})',
    )
    parser.add_argument(
        '--find',
        nargs='+',
        metavar='RD',
        help='Designators to look up instead of starting the prompt loop',
    )
    parser.add_argument(
        '--grid',
        action='store_true',
        help='Print the occupancy grid after loading',
    )
    parser.add_argument(
        '--export',
        type=Path,
        dest='export_path',
        help='Write every classified component to this CSV/JSON file',
    )
    parser.add_argument(
        '--format',
        choices=FileLoader.FORMATS,
        dest='export_format',
        help='Export format (default: from the file extension)',
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        help='Also write logs to this file',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    input_fn: Callable[[str], str] = input,
    out: Optional[Console] = None,
) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or display.console

    configure_logging(
        'pcbgrid',
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        log_file=args.log_file,
    )

    problems = settings.validate_required_settings()
    if problems:
        for problem in problems:
            out.print(f'[red]Configuration error:[/] {problem}')
        return 2

    try:
        board = build_board(args, input_fn, out)
    except ValidationError as e:
        parser.error(f'invalid board geometry: {e.errors()[0]["msg"]}')

    mapper = BoardGridMapper(board)
    display.print_board_summary(board, out)
    out.print('Reading Centroid file and mapping components...')

    try:
        report = mapper.load(args.centroid_file)
    except PcbGridError as e:
        out.print(f'[bold red]ERROR:[/] {escape(str(e))}', highlight=False)
        return 1

    display.print_load_report(report, out)

    if args.export_path:
        exporter = FileLoader()
        records = mapper.registry.records()
        if exporter.load(
            records,
            file_path=args.export_path,
            format=args.export_format,
        ) and exporter.validate_load(len(records)):
            out.print(f'[green]Exported {exporter.loaded_count} components to:[/] {exporter.file_path}')
        else:
            out.print(f'[yellow]Nothing exported to {args.export_path}[/]')

    if args.grid:
        display.print_grid(mapper.render(), out)

    if args.find:
        return 0 if run_find(mapper, args.find, out) else 1

    if not args.grid and not args.export_path:
        search_loop(mapper, input_fn, out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
