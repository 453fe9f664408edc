"""Base extractor class for placement sources."""
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, List, Dict, Optional, Union
import logging

from pcbgrid.extractors.dialect import Dialect

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """
    Abstract base class for placement extractors.

    An extractor reads one source file in a detected dialect and returns
    raw rows (text cells keyed by field name). Parsing and classification
    happen later, in a transformer.
    """

    def __init__(self, name: str):
        """
        Initialize the extractor.

        Args:
            name: Name of the extractor (for logging)
        """
        self.name = name
        self.logger = logging.getLogger(f'{__name__}.{name}')
        self.source: Optional[Path] = None
        self.extracted_at: Optional[datetime] = None
        self.row_count = 0

    @abstractmethod
    def extract(
        self,
        path: Union[str, Path],
        dialect: Optional[Dialect] = None,
    ) -> List[Dict[str, Any]]:
        """
        Extract raw rows from a placement file.

        Args:
            path: Source file
            dialect: Pre-detected dialect, detected from the file if omitted

        Returns:
            Rows in file order
        """

    @abstractmethod
    def validate_extraction(self, rows: List[Dict[str, Any]]) -> bool:
        """
        Validate the extracted rows.

        Args:
            rows: Extracted rows to validate

        Returns:
            True if validation passes, False otherwise
        """

    def log_extraction(self, source: Path, row_count: int) -> None:
        """Record and log what was read from ``source``."""
        self.source = source
        self.extracted_at = datetime.now()
        self.row_count = row_count
        self.logger.info(f'{source.name}: extracted {row_count} placement rows')
