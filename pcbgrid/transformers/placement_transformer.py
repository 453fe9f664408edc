"""Transformer for extracted centroid rows."""
from typing import Any, List, Dict
import logging

from pcbgrid.classifiers.zone_classifier import ZoneClassifier
from pcbgrid.exceptions import MalformedFieldError
from pcbgrid.schemas import BoardSpec, ComponentRecord
from pcbgrid.transformers.base_transformer import BaseTransformer
from pcbgrid.transformers.coordinates import normalize_coordinate

logger = logging.getLogger(__name__)


class PlacementTransformer(BaseTransformer):
    """
    Turn raw centroid rows into classified ComponentRecords.

    Rows that cannot be converted (blank designator, unparseable coordinate)
    are skipped and logged; details are kept in ``errors``.
    """

    def __init__(self, board: BoardSpec, conversion_factor: float = 1.0):
        """
        Initialize placement transformer.

        Args:
            board: Board geometry used for zone classification
            conversion_factor: Unit factor from the detected dialect
        """
        super().__init__('placement')
        self.board = board
        self.conversion_factor = conversion_factor
        self.classifier = ZoneClassifier(board)

    def transform(self, rows: List[Dict[str, Any]]) -> List[ComponentRecord]:
        """
        Transform extracted rows.

        Tasks:
        - Convert coordinate text to millimeters
        - Assign the two-tier zone label
        - Skip rows that fail, recording why

        Args:
            rows: Rows from CentroidExtractor

        Returns:
            ComponentRecords in file order
        """
        self.logger.info(f'Transforming {len(rows)} centroid rows...')
        self.errors = []

        transformed = []
        for row in rows:
            try:
                transformed.append(self._transform_row(row))
            except MalformedFieldError as e:
                self.skip_row(e)

        self.logger.info(f'Successfully transformed {len(transformed)} records')
        return transformed

    def _transform_row(self, row: Dict[str, Any]) -> ComponentRecord:
        """Transform a single centroid row."""
        row_number = row.get('row_number')
        designator = str(row.get('designator') or '').strip()
        if not designator:
            raise MalformedFieldError(
                'designator', row.get('designator') or '', row_number=row_number,
            )

        coords = {}
        for axis in ('x', 'y'):
            try:
                coords[axis] = normalize_coordinate(
                    row.get(axis), self.conversion_factor, field=axis,
                )
            except MalformedFieldError as e:
                raise MalformedFieldError(
                    e.field, e.value, row_number=row_number, designator=designator,
                ) from e

        zone = self.classifier.classify(coords['x'], coords['y'])
        return ComponentRecord(
            designator=designator,
            x=coords['x'],
            y=coords['y'],
            layer=str(row.get('layer') or '').strip(),
            zone=zone,
        )

    def validate_transformation(self, records: List[ComponentRecord]) -> bool:
        """
        Validate that every record carries a zone on this board.

        Args:
            records: Transformed records to validate

        Returns:
            True if all records are valid
        """
        for record in records:
            zone = record.zone
            if not self.board.has_primary(zone.primary_row, zone.primary_col):
                self.logger.error(f'{record.designator}: zone {zone} is off the board')
                return False

        self.logger.info(f'Validated {len(records)} transformed records')
        return True
