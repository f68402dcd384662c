import logging
from typing import Iterable, Union

import numpy as np

from pytensile.algorithms.elastic import youngs_modulus, offset_yield_strength
from pytensile.algorithms.energy import trapezoid_area, elastic_area
from pytensile.core.results import Computed, DerivedProperties, PropertyOutcome, Unavailable
from pytensile.core.samples import Dataset, Sample
from pytensile.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def compute_properties(dataset: Union[Dataset, Iterable[Sample]]) -> PropertyOutcome:
    """
    Derive material properties from a stress-strain dataset.

    The whole dataset is re-evaluated on every call; nothing is cached.
    Args:
        dataset: A Dataset, or any iterable of Samples (stably sorted by strain first)
    Returns:
        Unavailable when fewer than two samples are given, otherwise Computed
        wrapping the DerivedProperties at full precision.
    Examples:
        outcome = compute_properties(Dataset.from_arrays([0.0, 0.001, 0.002], [0, 200, 400]))
        if outcome.is_available:
            print(outcome.properties.youngs_modulus)  # 200.0 GPa
    """
    if not isinstance(dataset, Dataset):
        dataset = Dataset(tuple(dataset))
    count = len(dataset)
    if count < ProcessingConstants.MIN_DATA_POINTS:
        logger.debug("Properties unavailable: %d sample(s), need %d",
                     count, ProcessingConstants.MIN_DATA_POINTS)
        return Unavailable(sample_count=count)
    strains = dataset.strains
    stresses = dataset.stresses
    logger.debug("Computing properties for %d samples, strain∈[%.4g, %.4g]", count, strains[0], strains[-1])
    tensile_strength = float(np.max(stresses))
    modulus_raw, region = youngs_modulus(strains, stresses)
    yield_strength, yield_index = offset_yield_strength(strains, stresses, modulus_raw)
    toughness = trapezoid_area(strains, stresses)
    ductility = float(strains[-1] - strains[0])
    resilience = elastic_area(strains, stresses, yield_strength)
    properties = DerivedProperties(
        tensile_strength=tensile_strength,
        youngs_modulus=None if modulus_raw is None else modulus_raw / ProcessingConstants.MPA_PER_GPA,
        youngs_modulus_raw=modulus_raw,
        yield_strength=yield_strength,
        yield_strain=None if yield_index is None else float(strains[yield_index]),
        toughness=toughness,
        ductility=ductility,
        resilience=resilience,
        linear_region_size=region,
        yield_found=yield_index is not None,
    )
    logger.info("Computed properties for %d samples: UTS=%.2f MPa, E=%s GPa, yield=%.2f MPa",
                count, tensile_strength,
                "indeterminate" if modulus_raw is None else f"{properties.youngs_modulus:.2f}",
                yield_strength)
    return Computed(properties)
