"""
Component registry.

Holds one ComponentRecord per designator. Keys are compared without regard
to case by storing them upper-cased. The first record seen for a designator
wins; later duplicates are rejected with a warning.
"""
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple
import logging

from pcbgrid.schemas import ComponentRecord, normalize_key

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Write-once store of mapped components with a primary-zone index."""

    def __init__(self):
        self._records: Dict[str, ComponentRecord] = {}
        self._occupancy: Dict[str, List[str]] = defaultdict(list)
        self.duplicates: List[str] = []

    def insert(self, record: ComponentRecord) -> bool:
        """
        Add a record unless its designator is already present.

        Args:
            record: Classified component

        Returns:
            True if inserted, False if rejected as a duplicate
        """
        key = record.key
        if key in self._records:
            logger.warning(f'Duplicate designator found: {record.designator}')
            self.duplicates.append(record.designator)
            return False

        self._records[key] = record
        self._occupancy[record.zone.primary].append(record.designator)
        return True

    def lookup(self, identifier: Optional[str]) -> Optional[ComponentRecord]:
        """
        Find a record by designator, ignoring case and surrounding spaces.

        Returns:
            The record, or None if no such designator was loaded
        """
        if identifier is None:
            return None
        return self._records.get(normalize_key(identifier))

    def occupants(self, primary_zone: str) -> Tuple[str, ...]:
        """Designators placed in a primary zone (e.g., 'B3')."""
        return tuple(self._occupancy.get(normalize_key(primary_zone), ()))

    @property
    def occupancy(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only view: primary zone -> designators, non-empty zones only."""
        return MappingProxyType({
            zone: tuple(designators)
            for zone, designators in self._occupancy.items()
            if designators
        })

    def records(self) -> List[ComponentRecord]:
        """All records in insertion order."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and normalize_key(identifier) in self._records

    def __iter__(self) -> Iterator[ComponentRecord]:
        return iter(list(self._records.values()))
