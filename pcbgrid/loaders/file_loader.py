"""Loader for file-based exports of mapped components (CSV, JSON)."""
from typing import Any, List, Dict, Optional
import logging
import json
from pathlib import Path
import pandas as pd

from pcbgrid.loaders.base_loader import BaseLoader
from pcbgrid.config.settings import settings
from pcbgrid.schemas import ComponentRecord

logger = logging.getLogger(__name__)


class FileLoader(BaseLoader):
    """Write classified components to CSV or JSON."""

    FORMATS = ('csv', 'json')

    def __init__(self):
        """Initialize file loader."""
        super().__init__('file')
        self.file_path = None

    def load(
        self,
        records: List[ComponentRecord],
        file_path: Optional[str] = None,
        format: Optional[str] = None,
        **kwargs,
    ) -> bool:
        """
        Write records to a file.

        Args:
            records: Records to export
            file_path: Output file path (relative to OUTPUT_DATA_DIR, the working directory by default)
            format: 'csv' or 'json' (default: from the file extension, else csv)
            **kwargs: Additional parameters passed to the writer

        Returns:
            True if export successful
        """
        if not records:
            self.logger.warning('No components to export')
            return False

        try:
            # Resolve file path
            if not file_path:
                raise ValueError('file_path is required')

            path = Path(file_path)
            if not path.is_absolute():
                path = settings.OUTPUT_DATA_DIR / path

            format = (format or path.suffix.lstrip('.') or 'csv').lower()
            writers = {
                'csv': self._load_csv,
                'json': self._load_json,
            }
            if format not in writers:
                raise ValueError(f'Unsupported format: {format}')

            # Create parent directories
            path.parent.mkdir(parents=True, exist_ok=True)

            rows = [record.to_dict() for record in records]
            writers[format](rows, path, **kwargs)
            self.loaded_count = len(rows)
            self.file_path = str(path)

            self.logger.info(
                f'Successfully loaded {self.loaded_count} records to {path}'
            )
            return True

        except (ValueError, OSError) as e:
            self.logger.error(f'Load failed: {str(e)}')
            return False

    def _load_csv(
        self,
        data: List[Dict[str, Any]],
        file_path: Path,
        **kwargs,
    ) -> None:
        """Write rows as CSV."""
        df = pd.DataFrame(data)
        df.to_csv(file_path, index=False, **kwargs)

    def _load_json(
        self,
        data: List[Dict[str, Any]],
        file_path: Path,
        **kwargs,
    ) -> None:
        """Write rows as JSON."""
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, default=str)

    def validate_load(self, record_count: int) -> bool:
        """
        Validate that data was loaded.

        Args:
            record_count: Expected number of records

        Returns:
            True if loaded record count matches
        """
        return self.loaded_count == record_count
