"""Loader that fills a ComponentRegistry."""
from typing import List, Optional
import logging

from pcbgrid.loaders.base_loader import BaseLoader
from pcbgrid.loaders.component_registry import ComponentRegistry
from pcbgrid.schemas import ComponentRecord

logger = logging.getLogger(__name__)


class RegistryLoader(BaseLoader):
    """Insert classified records into a registry, first-seen wins."""

    def __init__(self, registry: Optional[ComponentRegistry] = None):
        """Initialize registry loader."""
        super().__init__('registry')
        self.registry = registry if registry is not None else ComponentRegistry()
        self.duplicates: List[str] = []

    def load(self, records: List[ComponentRecord], **kwargs) -> bool:
        """
        Load records into the registry.

        Duplicates are not a failure: they are skipped and listed in
        ``duplicates``.

        Args:
            records: Classified records, in file order

        Returns:
            True if at least one record was inserted
        """
        self.loaded_count = 0
        self.duplicates = []

        if not records:
            self.logger.warning('No records to load')
            return False

        for record in records:
            if self.registry.insert(record):
                self.loaded_count += 1
            else:
                self.duplicates.append(record.designator)

        self.logger.info(
            f'Successfully mapped {len(self.registry)} unique components '
            f'({len(self.duplicates)} duplicates skipped)'
        )
        return self.loaded_count > 0

    def validate_load(self, record_count: int) -> bool:
        """
        Validate that every record was either inserted or a duplicate.

        Args:
            record_count: Number of records passed to load()

        Returns:
            True if nothing went missing
        """
        return self.loaded_count + len(self.duplicates) == record_count
