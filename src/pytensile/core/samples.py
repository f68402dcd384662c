import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple, Union

import numpy as np

from pytensile.core.exceptions import SampleError, DatasetError
from pytensile.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    """
    A single point of a stress-strain curve.

    Attributes:
        strain: Dimensionless engineering strain (mm/mm).
        stress: Engineering stress in MPa.
    """
    strain: float
    stress: float

    def __post_init__(self) -> None:
        for field_name in ('strain', 'stress'):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
                raise SampleError(ErrorMessages.NON_FINITE_VALUE.format(field=field_name, value=value))
            if not math.isfinite(value):
                raise SampleError(ErrorMessages.NON_FINITE_VALUE.format(field=field_name, value=value))
            # store plain floats
            object.__setattr__(self, field_name, float(value))


def _sorted_by_strain(samples: Iterable[Sample]) -> Tuple[Sample, ...]:
    # sorted() is stable: equal strains keep their insertion order
    return tuple(sorted(samples, key=lambda s: s.strain))


@dataclass(frozen=True)
class Dataset:
    """
    Immutable, strain-ordered collection of samples.

    Every constructor and every mutation-like method returns a Dataset whose
    samples are stably sorted by ascending strain. Duplicate samples are kept.
    """
    samples: Tuple[Sample, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        samples = tuple(self.samples)
        for sample in samples:
            if not isinstance(sample, Sample):
                raise DatasetError(f"Dataset entries must be Sample instances, got {type(sample).__name__}")
        object.__setattr__(self, 'samples', _sorted_by_strain(samples))

    # --- Constructors ---
    @classmethod
    def from_arrays(cls, strains: Union[Sequence[float], np.ndarray],
                    stresses: Union[Sequence[float], np.ndarray]) -> "Dataset":
        """Build a dataset from parallel strain and stress arrays."""
        strain_array = np.asarray(strains, dtype=np.float64)
        stress_array = np.asarray(stresses, dtype=np.float64)
        if strain_array.ndim != 1 or stress_array.ndim != 1:
            raise DatasetError(f"Strain and stress arrays must be one-dimensional, "
                               f"got shapes {strain_array.shape} and {stress_array.shape}")
        if len(strain_array) != len(stress_array):
            raise DatasetError(ErrorMessages.ARRAY_LENGTH_MISMATCH.format(
                strains=len(strain_array), stresses=len(stress_array)))
        logger.debug("Building dataset from %d strain/stress pairs", len(strain_array))
        return cls(tuple(Sample(strain=float(e), stress=float(s)) for e, s in zip(strain_array, stress_array)))

    # --- Mutation-like API ---
    def with_sample(self, sample: Sample) -> "Dataset":
        """Return a new dataset with ``sample`` inserted at its strain position."""
        logger.debug("Adding sample (strain=%.6g, stress=%.6g) to dataset of %d",
                     sample.strain, sample.stress, len(self))
        return Dataset(self.samples + (sample,))

    def with_samples(self, samples: Iterable[Sample]) -> "Dataset":
        return Dataset(self.samples + tuple(samples))

    def cleared(self) -> "Dataset":
        return Dataset()

    # --- Array views ---
    @property
    def strains(self) -> np.ndarray:
        return np.array([s.strain for s in self.samples], dtype=np.float64)

    @property
    def stresses(self) -> np.ndarray:
        return np.array([s.stress for s in self.samples], dtype=np.float64)

    @property
    def is_empty(self) -> bool:
        return not self.samples

    # --- Sequence protocol ---
    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __getitem__(self, index: Union[int, slice]) -> Union[Sample, Tuple[Sample, ...]]:
        return self.samples[index]
