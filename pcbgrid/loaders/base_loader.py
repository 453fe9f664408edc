"""Base loader class for classified components."""
from abc import ABC, abstractmethod
from typing import List
import logging

from pcbgrid.schemas import ComponentRecord

logger = logging.getLogger(__name__)


class BaseLoader(ABC):
    """
    Abstract base class for component loaders.

    A loader hands classified records to a destination (the in-memory
    registry, an export file) and counts how many arrived.
    """

    def __init__(self, name: str):
        """
        Initialize the loader.

        Args:
            name: Name of the loader (for logging)
        """
        self.name = name
        self.logger = logging.getLogger(f'{__name__}.{name}')
        self.loaded_count = 0

    @abstractmethod
    def load(self, records: List[ComponentRecord], **kwargs) -> bool:
        """
        Load records to the destination.

        Args:
            records: Classified components, in file order
            **kwargs: Destination options (file_path, format)

        Returns:
            True if load successful, False otherwise
        """

    @abstractmethod
    def validate_load(self, record_count: int) -> bool:
        """
        Validate that records were loaded successfully.

        Args:
            record_count: Number of records passed to load()

        Returns:
            True if validation passes, False otherwise
        """
