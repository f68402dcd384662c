import logging
from typing import Callable, Optional

import numpy as np
import sympy as sp

from pytensile.core.results import DerivedProperties
from pytensile.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

STRAIN = sp.Symbol('strain')


def elastic_line_expression(modulus_raw: float, x: sp.Symbol = STRAIN) -> sp.Expr:
    """Elastic line through the origin, E*x."""
    return sp.Float(modulus_raw) * x


def offset_line_expression(modulus_raw: float, x: sp.Symbol = STRAIN,
                           offset: float = ProcessingConstants.YIELD_OFFSET_STRAIN) -> sp.Expr:
    """Offset line E*(x - offset) used for the proof-stress construction."""
    return sp.Float(modulus_raw) * (x - sp.Float(offset))


def offset_line_function(properties: DerivedProperties,
                         offset: float = ProcessingConstants.YIELD_OFFSET_STRAIN) \
        -> Optional[Callable[[np.ndarray], np.ndarray]]:
    """Numpy-callable offset line for the given properties, or None when the modulus is indeterminate."""
    if properties.modulus_indeterminate:
        logger.debug("No offset line: modulus is indeterminate")
        return None
    expr = offset_line_expression(properties.youngs_modulus_raw, STRAIN, offset)
    logger.debug("Offset line expression: %s", expr)
    func = sp.lambdify(STRAIN, expr, 'numpy')

    def evaluate(strains: np.ndarray) -> np.ndarray:
        # broadcast so constant expressions still return one value per strain
        return np.broadcast_to(np.asarray(func(strains), dtype=np.float64), np.shape(strains)).copy()

    return evaluate
