import logging
from typing import List, Tuple

from pytensile.core.results import PropertyOutcome
from pytensile.core.samples import Dataset
from pytensile.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

INDETERMINATE_TEXT = "indeterminate"


def _fixed(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def format_properties(outcome: PropertyOutcome) -> List[Tuple[str, str, str]]:
    """
    Display rows (label, value text, unit) for a property outcome.

    Strengths and modulus use 2 decimals, energies and ductility 4. An
    unavailable outcome yields no rows.
    """
    if not outcome.is_available:
        logger.debug("No property rows: outcome unavailable (%d samples)", outcome.sample_count)
        return []
    props = outcome.properties
    strength = ProcessingConstants.STRENGTH_DECIMALS
    energy = ProcessingConstants.ENERGY_DECIMALS
    modulus_text = (INDETERMINATE_TEXT if props.modulus_indeterminate
                    else _fixed(props.youngs_modulus, strength))
    return [
        ("Tensile Strength", _fixed(props.tensile_strength, strength), "MPa"),
        ("Young's Modulus", modulus_text, "GPa"),
        ("Yield Strength (0.2% offset)", _fixed(props.yield_strength, strength), "MPa"),
        ("Toughness", _fixed(props.toughness, energy), "MJ/m³"),
        ("Ductility", _fixed(props.ductility, energy), ""),
        ("Resilience", _fixed(props.resilience, energy), "MJ/m³"),
    ]


def property_lines(outcome: PropertyOutcome) -> List[str]:
    """Lines such as 'Tensile Strength: 460.00 MPa' for the properties panel."""
    lines = []
    for label, value, unit in format_properties(outcome):
        if unit and value != INDETERMINATE_TEXT:
            lines.append(f"{label}: {value} {unit}")
        else:
            lines.append(f"{label}: {value}")
    return lines


def data_point_lines(dataset: Dataset) -> List[str]:
    """One 'Stress: ..., Strain: ...' line per sample, in dataset order."""
    return [f"Stress: {sample.stress:g}, Strain: {sample.strain:g}" for sample in dataset]
