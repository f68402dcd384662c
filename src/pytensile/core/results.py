"""
Outcome types returned by the property calculator.

A computation either produces ``Computed`` (wrapping ``DerivedProperties``) or
``Unavailable`` when the dataset has too few samples. Degenerate numeric cases
inside a computed result are carried as explicit flags instead of NaN.
"""
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class DerivedProperties:
    """
    Material properties derived from one dataset snapshot, at full precision.

    Attributes:
        tensile_strength: Maximum stress (MPa).
        youngs_modulus: Elastic modulus (GPa), or None when indeterminate.
        youngs_modulus_raw: Elastic modulus (MPa per unit strain), or None when indeterminate.
        yield_strength: 0.2% offset yield stress (MPa); 0.0 when the curve never reaches the offset line.
        toughness: Area under the full curve (MJ/m³).
        ductility: Strain range of the dataset.
        resilience: Area under the curve up to the yield point (MJ/m³).
        linear_region_size: Number of leading samples used for the modulus fit.
        yield_strain: Strain of the yielding sample, or None when no sample reached the offset line.
        yield_found: Whether a sample reached the offset line.
    """
    tensile_strength: float
    youngs_modulus: Optional[float]
    youngs_modulus_raw: Optional[float]
    yield_strength: float
    yield_strain: Optional[float]
    toughness: float
    ductility: float
    resilience: float
    linear_region_size: int
    yield_found: bool

    @property
    def modulus_indeterminate(self) -> bool:
        return self.youngs_modulus_raw is None


@dataclass(frozen=True)
class Computed:
    properties: DerivedProperties

    @property
    def is_available(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    """Fewer samples than needed to derive any property."""
    sample_count: int

    @property
    def is_available(self) -> bool:
        return False


PropertyOutcome = Union[Computed, Unavailable]
