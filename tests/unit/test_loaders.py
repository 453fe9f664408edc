"""Unit tests for the file export loader."""
import json
import os
from pathlib import Path

import pandas as pd
import pytest

from pcbgrid.classifiers.zone_classifier import classify_zone
from pcbgrid.config.settings import settings
from pcbgrid.loaders.file_loader import FileLoader
from pcbgrid.schemas import ComponentRecord


@pytest.fixture
def records(board):
    return [
        ComponentRecord(designator='C102', x=12.5, y=12.5, layer='TopLayer',
                        zone=classify_zone(board, 12.5, 12.5)),
        ComponentRecord(designator='R16', x=87.3, y=62.0, layer='BottomLayer',
                        zone=classify_zone(board, 87.3, 62.0)),
    ]


class TestFileLoader:
    """Test CSV / JSON export."""

    def test_export_csv(self, records, tmp_path):
        """CSV export has one row per record with zone columns."""
        loader = FileLoader()
        path = tmp_path / 'out' / 'zones.csv'
        assert loader.load(records, file_path=str(path)) is True
        assert loader.validate_load(2)

        df = pd.read_csv(path)
        assert list(df['designator']) == ['C102', 'R16']
        assert list(df['zone']) == ['A1-22', 'C4-22']
        assert loader.file_path == str(path)

    def test_export_json_by_extension(self, records, tmp_path):
        """The format follows the file extension."""
        path = tmp_path / 'zones.json'
        assert FileLoader().load(records, file_path=str(path)) is True
        data = json.loads(path.read_text(encoding='utf-8'))
        assert data[1]['primary_zone'] == 'C4'
        assert data[1]['layer'] == 'BottomLayer'

    def test_relative_path_uses_output_dir(self, records, tmp_path, monkeypatch):
        """Relative paths resolve under OUTPUT_DATA_DIR."""
        monkeypatch.setattr(settings, 'OUTPUT_DATA_DIR', tmp_path)
        loader = FileLoader()
        assert loader.load(records, file_path='nested/zones.csv')
        assert (tmp_path / 'nested' / 'zones.csv').exists()

    def test_default_output_dir_is_working_directory(self, records, tmp_path, monkeypatch):
        """With the default output dir, relative paths land in the working directory."""
        monkeypatch.setattr(settings, 'OUTPUT_DATA_DIR', Path(os.curdir))
        monkeypatch.chdir(tmp_path)
        assert FileLoader().load(records, file_path='zones.csv')
        assert (tmp_path / 'zones.csv').exists()

    def test_unsupported_format(self, records, tmp_path):
        """Unknown formats fail without writing."""
        path = tmp_path / 'zones.xlsx'
        assert FileLoader().load(records, file_path=str(path)) is False
        assert not path.exists()

    def test_no_data(self, tmp_path):
        """Nothing to export returns False."""
        assert FileLoader().load([], file_path=str(tmp_path / 'x.csv')) is False

    def test_missing_path(self, records):
        """A path is required."""
        assert FileLoader().load(records) is False
