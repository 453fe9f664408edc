"""Unit tests for centroid dialect detection."""
import io

import pytest

from pcbgrid.exceptions import SourceNotFoundError
from pcbgrid.extractors.dialect import (
    MIL_COLUMNS,
    MM_COLUMNS,
    NOT_FOUND,
    Unit,
    detect_dialect,
    detect_file_dialect,
)


class TestDetectDialect:
    """Test header and unit detection on text lines."""

    def test_mil_units_and_header_offset(self):
        """Units on line 2 and header on line 4 give offset 4 and factor 0.0254."""
        lines = [
            'Pick and Place Locations',
            'Board: 436-5002',
            '"Units used: mil"',
            '',
            '"Designator","Layer","Center-X(mil)","Center-Y(mil)"',
            '"C1","TopLayer","10","20"',
        ]
        dialect = detect_dialect(lines)
        assert dialect.header_offset == 4
        assert dialect.conversion_factor == 0.0254
        assert dialect.unit is Unit.MIL
        assert dialect.columns == MIL_COLUMNS

    def test_defaults_to_millimeters(self):
        """Without a units line the unit is mm with factor 1.0."""
        dialect = detect_dialect(['"Designator","Layer"'])
        assert dialect.header_offset == 0
        assert dialect.unit is Unit.MM
        assert dialect.conversion_factor == 1.0
        assert dialect.columns == MM_COLUMNS

    def test_mm_units_line_keeps_millimeters(self):
        """A units line naming mm does not switch units."""
        dialect = detect_dialect(['Units used: mm', '"Designator"'])
        assert dialect.unit is Unit.MM

    def test_unit_token_is_case_insensitive(self):
        """'MIL' in upper case is still recognized."""
        dialect = detect_dialect(['Units used: MIL', '"Designator"'])
        assert dialect.unit is Unit.MIL

    def test_mil_without_marker_is_ignored(self):
        """'mil' outside a 'Units used:' line does not change units."""
        dialect = detect_dialect(['Family: milling fixtures', '"Designator"'])
        assert dialect.unit is Unit.MM

    def test_header_after_leading_whitespace(self):
        """Leading whitespace before the header token is ignored."""
        dialect = detect_dialect(['title', '   "Designator","Layer"'])
        assert dialect.header_offset == 1

    def test_unquoted_header_is_not_matched(self):
        """The header token must be quoted."""
        dialect = detect_dialect(['Designator,Layer'])
        assert not dialect.found

    def test_header_not_found_keeps_unit(self):
        """Missing header gives the sentinel offset with detected units."""
        dialect = detect_dialect(io.StringIO('Units used: mil\nno header here\n'))
        assert dialect.header_offset == NOT_FOUND
        assert not dialect.found
        assert dialect.conversion_factor == 0.0254

    def test_units_after_header_are_ignored(self):
        """Scanning stops at the header row."""
        dialect = detect_dialect(['"Designator"', 'Units used: mil'])
        assert dialect.unit is Unit.MM

    def test_header_line_is_one_based(self):
        """header_line is for display."""
        dialect = detect_dialect(['a', 'b', '"Designator"'])
        assert dialect.header_line == 3


class TestDetectFileDialect:
    """Test detection on files."""

    def test_reads_file(self, mm_centroid_file):
        """Header row of the sample mm file is on index 12."""
        dialect = detect_file_dialect(mm_centroid_file)
        assert dialect.header_offset == 12
        assert dialect.unit is Unit.MM

    def test_utf8_bom_is_ignored(self, tmp_path):
        """A BOM before the header does not hide it."""
        path = tmp_path / 'bom.csv'
        path.write_bytes('\ufeff"Designator","Layer"\n'.encode('utf-8'))
        assert detect_file_dialect(path).header_offset == 0

    def test_missing_file(self, tmp_path):
        """A missing file raises SourceNotFoundError."""
        with pytest.raises(SourceNotFoundError) as exc_info:
            detect_file_dialect(tmp_path / 'missing.csv')
        assert isinstance(exc_info.value, FileNotFoundError)
        assert 'missing.csv' in str(exc_info.value)
