"""Extractor for pick-and-place centroid CSV files."""
from io import StringIO
from pathlib import Path
from typing import Any, List, Dict, Optional, Union
import logging
import re

import pandas as pd

from pcbgrid.exceptions import (
    MalformedFileError,
    MissingColumnsError,
    SourceNotFoundError,
)
from pcbgrid.extractors.base_extractor import BaseExtractor
from pcbgrid.extractors.dialect import Dialect, detect_file_dialect
from pcbgrid.utils.validators import missing_columns, validate_required_fields

logger = logging.getLogger(__name__)

# Keys of every extracted row
ROW_FIELDS = {'row_number', 'designator', 'layer', 'x', 'y'}

# Parser messages number lines from the header row
PARSER_LINE_PATTERN = re.compile(r'\bline (\d+)')


def file_line_context(message: str, header_offset: int) -> str:
    """Rewrite parser line numbers (1 = header row) as 1-based file lines."""
    return PARSER_LINE_PATTERN.sub(
        lambda m: f'line {header_offset + int(m.group(1))}', message,
    )


class CentroidExtractor(BaseExtractor):
    """
    Extractor for comma-separated centroid files.

    Skips the header region found by the dialect detector and reads the
    four bound columns as raw text. Coordinates are not parsed here.

    Columns are matched by header name; cells past the header's width
    are ignored and the row is kept.
    """

    def __init__(self):
        """Initialize centroid extractor."""
        super().__init__('centroid')
        self.dialect: Optional[Dialect] = None

    def extract(
        self,
        path: Union[str, Path],
        dialect: Optional[Dialect] = None,
    ) -> List[Dict[str, Any]]:
        """
        Extract placement rows from a centroid file.

        Args:
            path: Path to the centroid file
            dialect: Pre-detected dialect (detected from the file if omitted)

        Returns:
            List of rows with keys row_number, designator, layer, x, y.
            row_number is the 1-based data row. Empty if no header was found.
            Rows whose bound cells are all empty count as blank lines and
            are left out.

        Raises:
            SourceNotFoundError: If the file does not exist
            MissingColumnsError: If a bound column is absent from the header
            MalformedFileError: If the data region is not valid CSV
        """
        path = Path(path)
        if not path.is_file():
            raise SourceNotFoundError(path)

        self.dialect = dialect or detect_file_dialect(path)
        if not self.dialect.found:
            self.logger.warning(f'{path.name}: no header row, nothing to extract')
            self.log_extraction(path, 0)
            return []

        required = list(self.dialect.columns.required)
        df = self._read_data_region(path, self.dialect.header_offset, required)

        rows = []
        for row in df[required].itertuples(index=False, name=None):
            if not any(str(cell).strip() for cell in row):
                continue
            designator, layer, x, y = row
            rows.append({
                'row_number': len(rows) + 1,
                'designator': designator,
                'layer': layer,
                'x': x,
                'y': y,
            })

        self.log_extraction(path, len(rows))
        return rows

    def _read_data_region(
        self,
        path: Path,
        header_offset: int,
        required: List[str],
    ) -> pd.DataFrame:
        """
        Read the bound columns of the header row and everything after it.

        Columns are selected by header name, so cells beyond the header's
        width (an unquoted comma in a description) never shift the fields
        that are kept.
        """
        with open(path, 'r', encoding='utf-8-sig', errors='replace', newline='') as f:
            lines = f.read().splitlines()

        data = '\n'.join(lines[header_offset:])
        options = dict(
            sep=',',
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
        try:
            header = pd.read_csv(StringIO(data), nrows=0, **options).columns
            header = [str(col).strip() for col in header]
            missing = missing_columns(header, required)
            if missing:
                raise MissingColumnsError(path, missing, header)

            df = pd.read_csv(
                StringIO(data),
                usecols=lambda col: str(col).strip() in required,
                **options,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise MalformedFileError(path, file_line_context(str(e), header_offset)) from e
        df.columns = [str(col).strip() for col in df.columns]
        # Short rows leave NaN in the trailing cells
        return df.fillna('')

    def validate_extraction(self, rows: List[Dict[str, Any]]) -> bool:
        """
        Validate extracted rows.

        Every row should carry the bound fields and a row number.

        Args:
            rows: Extracted rows to validate

        Returns:
            True if all rows have required fields
        """
        is_valid, errors = validate_required_fields(rows, ROW_FIELDS)
        for error in errors:
            self.logger.error(error)

        if is_valid:
            self.logger.info(f'Validated {len(rows)} centroid rows')
        return is_valid
