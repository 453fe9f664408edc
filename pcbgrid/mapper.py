"""
Board grid mapping session.

Runs the pipeline for one board:

    detect dialect -> extract rows -> normalize + classify -> registry

and then serves lookups and grid views from the registry. A session is
built once; loading more files adds to the same registry with the same
first-seen-wins duplicate policy.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from pcbgrid.exceptions import SourceNotFoundError
from pcbgrid.extractors.centroid_extractor import CentroidExtractor
from pcbgrid.extractors.dialect import Dialect, detect_file_dialect
from pcbgrid.loaders.component_registry import ComponentRegistry
from pcbgrid.loaders.registry_loader import RegistryLoader
from pcbgrid.render.grid_renderer import GridRenderer, GridView
from pcbgrid.schemas import BoardSpec, ComponentRecord
from pcbgrid.transformers.placement_transformer import PlacementTransformer

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """Result of loading one centroid file."""
    path: Path
    dialect: Dialect
    total_rows: int = 0
    loaded: int = 0
    duplicates: List[str] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        """Rows dropped because they could not be converted."""
        return len(self.errors)


class BoardGridMapper:
    """Map the components of a centroid file onto a board grid."""

    def __init__(self, board: BoardSpec, registry: Optional[ComponentRegistry] = None):
        self.board = board
        self.registry = registry if registry is not None else ComponentRegistry()
        self.renderer = GridRenderer(board)

    def load(self, path: Union[str, Path]) -> LoadReport:
        """
        Read a centroid file and register its components.

        A file without a "Designator" header row is not an error: the report
        comes back with dialect.found False and nothing loaded.

        Args:
            path: Path to the centroid file

        Returns:
            LoadReport with counts, duplicates, skipped rows and any
            pipeline validation warnings

        Raises:
            SourceNotFoundError: If the file does not exist
            MissingColumnsError: If the header lacks a required column
            MalformedFileError: If the data region is not valid CSV
        """
        path = Path(path)
        if not path.is_file():
            logger.error(f'File not found at {path}')
            raise SourceNotFoundError(path)

        dialect = detect_file_dialect(path)
        report = LoadReport(path=path, dialect=dialect)
        if not dialect.found:
            logger.warning(f'{path.name}: header row not found, no components loaded')
            return report

        logger.info(
            f'Reading {path.name}: header on line {dialect.header_line}, '
            f'units {dialect.unit.value} (factor {dialect.conversion_factor})'
        )

        extractor = CentroidExtractor()
        rows = extractor.extract(path, dialect=dialect)
        if not extractor.validate_extraction(rows):
            report.warnings.append('extracted rows are missing fields')
        report.total_rows = len(rows)

        transformer = PlacementTransformer(self.board, dialect.conversion_factor)
        records = transformer.transform(rows)
        if not transformer.validate_transformation(records):
            report.warnings.append('some components were classified off the board')
        report.errors = transformer.errors

        loader = RegistryLoader(self.registry)
        loader.load(records)
        if not loader.validate_load(len(records)):
            report.warnings.append('some components were neither registered nor duplicates')
        report.loaded = loader.loaded_count
        report.duplicates = loader.duplicates

        for warning in report.warnings:
            logger.warning(f'{path.name}: {warning}')

        return report

    def find(self, identifier: Optional[str]) -> Optional[ComponentRecord]:
        """Look up a component by designator (case-insensitive); None if absent."""
        return self.registry.lookup(identifier)

    def render(self, primary_zone: Optional[str] = None) -> GridView:
        """
        Describe the primary grid with ``primary_zone`` highlighted.

        Raises:
            InvalidZoneError: If the zone is not on this board
        """
        return self.renderer.render(self.registry.occupancy, primary_zone)
