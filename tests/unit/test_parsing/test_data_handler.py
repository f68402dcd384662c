"""Tests for the stress-strain file loader."""

import pytest
import pandas as pd
import numpy as np
from pathlib import Path

from pytensile.core.samples import Dataset
from pytensile.parsing.io.data_handler import load_curve_data, _clean_and_validate_data


def _config(path, strain='strain', stress='stress'):
    return {'file_path': str(path), 'strain_column': strain, 'stress_column': stress}


class TestLoadCurveData:
    """Test the main data loading function."""

    def test_load_csv_data(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("strain,stress\n0.0,0\n0.001,200\n0.002,400\n")
        dataset = load_curve_data(_config(csv_path))
        assert isinstance(dataset, Dataset)
        assert len(dataset) == 3
        np.testing.assert_array_equal(dataset.stresses, [0.0, 200.0, 400.0])

    def test_load_csv_by_index(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("time,eps,sigma\n0,0.0,0\n1,0.001,200\n")
        dataset = load_curve_data(_config(csv_path, strain=1, stress=2))
        np.testing.assert_array_equal(dataset.strains, [0.0, 0.001])

    def test_load_text_data(self, tmp_path):
        txt_path = tmp_path / "curve.txt"
        txt_path.write_text("strain stress\n0.002 400\n0.000 0\n0.001 200\n")
        dataset = load_curve_data(_config(txt_path))
        np.testing.assert_array_equal(dataset.strains, [0.0, 0.001, 0.002])
        np.testing.assert_array_equal(dataset.stresses, [0.0, 200.0, 400.0])

    def test_load_excel_data(self, tmp_path):
        pytest.importorskip("openpyxl")
        excel_path = tmp_path / "curve.xlsx"
        pd.DataFrame({'Strain': [0.0, 0.001, 0.002], 'Stress': [0, 200, 400]}).to_excel(excel_path, index=False)
        dataset = load_curve_data(_config(excel_path, strain='Strain', stress='Stress'))
        assert len(dataset) == 3

    def test_unsorted_rows_are_stably_sorted(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("strain,stress\n0.002,400\n0.001,210\n0.001,190\n0.0,0\n")
        dataset = load_curve_data(_config(csv_path))
        np.testing.assert_array_equal(dataset.strains, [0.0, 0.001, 0.001, 0.002])
        # equal strains keep file order
        np.testing.assert_array_equal(dataset.stresses, [0.0, 210.0, 190.0, 400.0])

    def test_cleaning_leaves_row_order_to_dataset(self, caplog):
        strains = np.array([0.002, 0.001, 0.0])
        stresses = np.array([400.0, 200.0, 0.0])
        with caplog.at_level("INFO", logger="pytensile.parsing.io.data_handler"):
            cleaned_strains, cleaned_stresses = _clean_and_validate_data(strains, stresses, "test.csv")
        np.testing.assert_array_equal(cleaned_strains, strains)
        np.testing.assert_array_equal(cleaned_stresses, stresses)
        assert "not ascending" in caplog.text

    def test_duplicate_rows_are_kept(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("strain,stress\n0.0,0\n0.001,200\n0.001,200\n")
        assert len(load_curve_data(_config(csv_path))) == 3

    def test_missing_values_dropped(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("strain,stress\n0.0,0\n0.001,N/A\n0.002,400\n0.003,oops\n0.004,420\n")
        dataset = load_curve_data(_config(csv_path))
        np.testing.assert_array_equal(dataset.strains, [0.0, 0.002, 0.004])

    def test_load_data_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_curve_data(_config(Path("nonexistent.csv")))

    def test_load_data_unsupported_format(self, tmp_path):
        xyz_path = tmp_path / "curve.xyz"
        xyz_path.write_text("strain,stress\n")
        with pytest.raises(ValueError, match="Unsupported file type"):
            load_curve_data(_config(xyz_path))

    def test_missing_column(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("strain,load\n0.0,0\n0.001,200\n")
        with pytest.raises(ValueError, match="Stress column 'stress' not found"):
            load_curve_data(_config(csv_path))

    def test_column_index_out_of_bounds(self, tmp_path):
        csv_path = tmp_path / "curve.csv"
        csv_path.write_text("strain,stress\n0.0,0\n0.001,200\n")
        with pytest.raises(ValueError, match="out of bounds"):
            load_curve_data(_config(csv_path, strain=0, stress=5))

    def test_missing_config_keys(self):
        with pytest.raises(ValueError, match="Missing required configuration keys"):
            load_curve_data({'file_path': 'curve.csv'})

    def test_directory_path(self, tmp_path):
        with pytest.raises(ValueError, match="not a file"):
            load_curve_data(_config(tmp_path))


class TestCleanAndValidateData:
    def test_too_many_missing_values(self):
        strains = np.array([0.0, np.nan, np.nan, 0.3])
        stresses = np.array([0.0, 1.0, np.nan, np.nan])
        with pytest.raises(ValueError, match="Too many missing values"):
            _clean_and_validate_data(strains, stresses, "test.csv")

    def test_insufficient_points(self):
        with pytest.raises(ValueError, match="Insufficient valid data points"):
            _clean_and_validate_data(np.array([0.0]), np.array([1.0]), "test.csv")

    def test_empty_arrays(self):
        with pytest.raises(ValueError, match="No valid data"):
            _clean_and_validate_data(np.array([]), np.array([]), "test.csv")
