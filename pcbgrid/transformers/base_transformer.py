"""Base transformer class for placement transformations."""
from abc import ABC, abstractmethod
from typing import Any, List, Dict
import logging

from pcbgrid.exceptions import MalformedFieldError
from pcbgrid.schemas import ComponentRecord

logger = logging.getLogger(__name__)


class BaseTransformer(ABC):
    """
    Abstract base class for placement transformers.

    Turns raw extracted rows into ComponentRecords. A row that fails with
    MalformedFieldError is skipped; ``skip_row`` logs it and keeps the
    details in ``errors`` for the load report.
    """

    def __init__(self, name: str):
        """
        Initialize the transformer.

        Args:
            name: Name of the transformer (for logging)
        """
        self.name = name
        self.logger = logging.getLogger(f'{__name__}.{name}')
        self.errors: List[Dict[str, Any]] = []

    @abstractmethod
    def transform(self, rows: List[Dict[str, Any]]) -> List[ComponentRecord]:
        """
        Transform extracted rows into records.

        Args:
            rows: Raw rows from an extractor

        Returns:
            Records for the rows that converted
        """

    @abstractmethod
    def validate_transformation(self, records: List[ComponentRecord]) -> bool:
        """
        Validate the transformed records.

        Args:
            records: Transformed records to validate

        Returns:
            True if validation passes, False otherwise
        """

    def skip_row(self, error: MalformedFieldError) -> None:
        """Log a rejected row and remember why it was dropped."""
        self.logger.warning(f'Skipping row: {error}')
        self.errors.append({
            'row_number': error.row_number,
            'designator': error.designator,
            'field': error.field,
            'value': error.value,
            'error': str(error),
        })
