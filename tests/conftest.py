"""Shared pytest fixtures for pytensile tests."""
import matplotlib
matplotlib.use("Agg")

import pytest
import numpy as np
from pathlib import Path

from pytensile.core.samples import Sample, Dataset


@pytest.fixture
def specimen_dir():
    """Path to bundled specimen descriptions."""
    return Path(__file__).parent.parent / "src" / "pytensile" / "data" / "specimens"


@pytest.fixture
def steel_yaml_path(specimen_dir):
    """Path to the inline-points steel specimen."""
    return specimen_dir / "structural_steel.yaml"


@pytest.fixture
def aluminium_yaml_path(specimen_dir):
    """Path to the file-backed aluminium specimen."""
    return specimen_dir / "aluminium_6061.yaml"


@pytest.fixture
def steel_dataset():
    """Five-point curve with a 200 GPa elastic start."""
    return Dataset.from_arrays(
        [0.000, 0.001, 0.002, 0.010, 0.020],
        [0.0, 200.0, 400.0, 450.0, 460.0]
    )


@pytest.fixture
def linear_dataset():
    """Perfectly linear curve, stress = 150000 * strain."""
    strains = np.linspace(0.0, 0.005, 9)
    return Dataset.from_arrays(strains, 150000.0 * strains)


@pytest.fixture
def never_yielding_dataset():
    """Curve that stays below the 0.2% offset line everywhere."""
    return Dataset.from_arrays(
        [0.010, 0.011, 0.012, 0.020, 0.030, 0.040],
        [0.0, 100.0, 150.0, 200.0, 250.0, 260.0]
    )


@pytest.fixture
def single_sample():
    return Sample(strain=0.001, stress=200.0)
