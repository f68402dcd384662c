import logging
import math
from typing import Optional

from pytensile.core.samples import Sample

logger = logging.getLogger(__name__)


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse free text as a finite float, or return None."""
    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        logger.debug("Rejected non-numeric input: %r", text)
        return None
    if not math.isfinite(value):
        logger.debug("Rejected non-finite input: %r", text)
        return None
    return value


def parse_sample(stress_text: Optional[str], strain_text: Optional[str]) -> Optional[Sample]:
    """
    Build a Sample from the text of the stress and strain entry fields.

    Blank, non-numeric and non-finite entries are rejected by returning None;
    nothing is raised.
    """
    stress = parse_number(stress_text)
    strain = parse_number(strain_text)
    if stress is None or strain is None:
        logger.warning("Point not added: stress=%r, strain=%r", stress_text, strain_text)
        return None
    return Sample(strain=strain, stress=stress)
