"""Unit tests for the public parsing API."""

import pytest

from pytensile.core.results import Computed, Unavailable
from pytensile.parsing.api import analyze_specimen, validate_yaml_file, compute_from_arrays


class TestApi:
    def test_compute_from_arrays(self):
        outcome = compute_from_arrays([0.020, 0.0, 0.001, 0.010, 0.002], [460, 0, 200, 450, 400])
        assert isinstance(outcome, Computed)
        assert outcome.properties.youngs_modulus == pytest.approx(200.0)

    def test_compute_from_arrays_unavailable(self):
        assert isinstance(compute_from_arrays([0.1], [5.0]), Unavailable)

    def test_validate_yaml_file(self, steel_yaml_path):
        assert validate_yaml_file(steel_yaml_path) is True

    def test_validate_yaml_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="YAML file not found"):
            validate_yaml_file(tmp_path / "missing.yaml")

    def test_validate_yaml_file_invalid(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: X\n")
        with pytest.raises(ValueError, match="YAML validation failed"):
            validate_yaml_file(path)

    def test_analyze_specimen_without_plot(self, steel_yaml_path):
        analysis = analyze_specimen(steel_yaml_path, enable_plotting=False)
        assert analysis.name == "Structural steel coupon"
        assert analysis.plot_path is None
        assert analysis.outcome.properties.tensile_strength == 460.0

    def test_analyze_specimen_exports_svg(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_text("name: S\ntitle: S curve\ndata:\n  points: [[0, 0], [0.001, 200], [0.002, 400]]\n"
                        "plot:\n  output: charts/s.svg\n")
        analysis = analyze_specimen(path)
        assert analysis.plot_path == tmp_path / "charts" / "s.svg"
        assert analysis.plot_path.exists()

    def test_analyze_specimen_plot_disabled_in_file(self, aluminium_yaml_path):
        analysis = analyze_specimen(aluminium_yaml_path, enable_plotting=True)
        assert analysis.plot_path is None
        assert len(analysis.dataset) == 12

    def test_bundled_specimens_write_no_charts(self, specimen_dir):
        for yaml_path in sorted(specimen_dir.glob("*.yaml")):
            analysis = analyze_specimen(yaml_path, enable_plotting=True)
            assert analysis.plot_path is None
        assert not (specimen_dir / "pytensile_plots").exists()
