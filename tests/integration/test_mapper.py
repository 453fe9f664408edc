"""End-to-end tests of a mapping session."""
import logging

import pytest

from pcbgrid import BoardGridMapper, BoardSpec
from pcbgrid.exceptions import InvalidZoneError, MissingColumnsError, SourceNotFoundError
from pcbgrid.extractors.dialect import Unit
from pcbgrid.transformers.placement_transformer import PlacementTransformer


class TestBoardGridMapper:
    """Load a file, then find and render."""

    def test_load_mm_file(self, board, mm_centroid_file):
        """mm file: three unique components, one case-only duplicate."""
        mapper = BoardGridMapper(board)
        report = mapper.load(mm_centroid_file)

        assert report.dialect.header_offset == 12
        assert report.dialect.unit is Unit.MM
        assert report.total_rows == 4
        assert report.loaded == 3
        assert report.duplicates == ['c102']
        assert report.skipped == 0
        assert len(mapper.registry) == 3

    def test_find(self, board, mm_centroid_file):
        """Lookup is case-insensitive and first-seen wins."""
        mapper = BoardGridMapper(board)
        mapper.load(mm_centroid_file)

        c102 = mapper.find('c102')
        assert c102.designator == 'C102'
        assert c102.zone.label == 'A1-22'
        assert c102.layer == 'TopLayer'

        assert mapper.find('R16').zone.label == 'C4-22'
        assert mapper.find('u1').zone.label == 'D4-33'
        assert mapper.find('NOT-THERE') is None

    def test_render_found_zone(self, board, mm_centroid_file):
        """Rendering a found zone highlights it and marks occupancy."""
        mapper = BoardGridMapper(board)
        mapper.load(mm_centroid_file)

        view = mapper.render(mapper.find('R16').zone.primary)
        assert view.target == 'C4'
        assert view.cell('C4').highlighted
        assert {c.label for c in view.cells() if c.occupied} == {'A1', 'C4', 'D4'}

    def test_render_invalid_zone(self, board):
        """Zones off the grid are rejected."""
        with pytest.raises(InvalidZoneError):
            BoardGridMapper(board).render('E1')

    def test_load_mil_file(self, board, mil_centroid_file):
        """mil file: values converted, malformed row skipped."""
        mapper = BoardGridMapper(board)
        report = mapper.load(mil_centroid_file)

        assert report.dialect.header_offset == 4
        assert report.dialect.conversion_factor == 0.0254
        assert report.loaded == 2
        assert report.skipped == 1
        assert report.errors[0]['designator'] == 'Q3'

        c1 = mapper.find('C1')
        assert c1.x == pytest.approx(25.4)
        assert c1.zone.label == 'C2-11'

        r2 = mapper.find('r2')
        assert r2.x == 0.0
        assert r2.zone.label == 'D1-31'

    def test_missing_file(self, board, tmp_path):
        """Missing source aborts that file only."""
        mapper = BoardGridMapper(board)
        with pytest.raises(SourceNotFoundError):
            mapper.load(tmp_path / 'missing.csv')
        assert len(mapper.registry) == 0

    def test_dialect_not_found(self, board, write_file):
        """No header row: recoverable, nothing loaded."""
        path = write_file('readme.txt', 'Units used: mil\nno data\n')
        report = BoardGridMapper(board).load(path)
        assert not report.dialect.found
        assert report.loaded == 0
        assert report.total_rows == 0

    def test_missing_columns(self, board, write_file):
        """A header without the bound columns is surfaced."""
        path = write_file('bad.csv', '"Designator","Layer","X","Y"\n"C1","Top","1","2"\n')
        with pytest.raises(MissingColumnsError):
            BoardGridMapper(board).load(path)

    def test_second_file_keeps_first_records(self, board, mm_centroid_file, write_file):
        """Loading more files keeps first-seen-wins across files."""
        mapper = BoardGridMapper(board)
        mapper.load(mm_centroid_file)
        other = write_file('other.csv', '\n'.join([
            '"Designator","Layer","Center-X(mm)","Center-Y(mm)"',
            '"C102","BottomLayer","90","90"',
            '"J1","BottomLayer","60","10"',
        ]))
        report = mapper.load(other)
        assert report.duplicates == ['C102']
        assert mapper.find('C102').layer == 'TopLayer'
        assert mapper.find('J1').zone.primary == 'A3'

    def test_board_size_changes_zones(self, mm_centroid_file):
        """Zones depend on the board given to the session."""
        mapper = BoardGridMapper(BoardSpec(width=200.0, height=200.0))
        mapper.load(mm_centroid_file)
        assert mapper.find('U1').zone.primary == 'C3'
        assert mapper.find('C102').zone.label == 'A1-11'

    def test_ragged_row_does_not_abort_file(self, board, write_file):
        """A row with extra unquoted fields loads, and so do its neighbours."""
        path = write_file('ragged.csv', '\n'.join([
            '"Designator","Layer","Center-X(mm)","Center-Y(mm)","Comment"',
            '"C1","TopLayer","10","10","Cap"',
            '"C2","TopLayer","20","20",Cap, 10uF, 0402',
            '"C3","TopLayer","30","30","Cap"',
        ]))
        mapper = BoardGridMapper(board)
        report = mapper.load(path)

        assert report.loaded == 3
        assert report.errors == []
        assert mapper.find('C1') is not None
        assert mapper.find('C2').x == 20.0
        assert mapper.find('C3') is not None

    def test_empty_separator_row_is_not_an_error(self, board, write_file):
        """A ,,, row is treated as a blank line."""
        path = write_file('gaps.csv', '\n'.join([
            '"Designator","Layer","Center-X(mm)","Center-Y(mm)"',
            '"C1","TopLayer","10","10"',
            ',,,',
            '"C2","TopLayer","20","20"',
        ]))
        report = BoardGridMapper(board).load(path)
        assert report.loaded == 2
        assert report.total_rows == 2
        assert report.errors == []

    def test_clean_load_has_no_warnings(self, board, mm_centroid_file):
        """Validation passes on a well-formed file."""
        report = BoardGridMapper(board).load(mm_centroid_file)
        assert report.warnings == []

    def test_failed_validation_is_reported(self, board, mm_centroid_file, monkeypatch, caplog):
        """A failed classification check is logged and kept on the report."""
        monkeypatch.setattr(
            PlacementTransformer, 'validate_transformation', lambda self, records: False,
        )
        with caplog.at_level(logging.WARNING):
            report = BoardGridMapper(board).load(mm_centroid_file)

        assert report.warnings == ['some components were classified off the board']
        assert 'classified off the board' in caplog.text
        assert report.loaded == 3
