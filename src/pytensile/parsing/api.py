import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from pytensile.algorithms.calculator import compute_properties
from pytensile.core.results import PropertyOutcome
from pytensile.core.samples import Dataset
from pytensile.parsing.config.specimen_yaml_parser import SpecimenYAMLParser
from pytensile.visualization.plotters import CurveVisualizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpecimenAnalysis:
    """Result of analysing one specimen description."""
    name: str
    title: Optional[str]
    dataset: Dataset
    outcome: PropertyOutcome
    plot_path: Optional[Path] = None


def analyze_specimen(yaml_path: Union[str, Path], enable_plotting: bool = True) -> SpecimenAnalysis:
    """
    Analyse a tensile specimen from a YAML description.

    This is the main entry point for file-driven use. It loads the curve
    (inline points or a data file), derives the material properties and,
    when plotting is enabled both here and in the file, exports the chart as SVG.
    Args:
        yaml_path: Path to the YAML specimen description
        enable_plotting: Whether to export the chart (default: True)
    Returns:
        SpecimenAnalysis with the dataset, the property outcome and the SVG path
    Examples:
        analysis = analyze_specimen('coupon1.yaml', enable_plotting=False)
        if analysis.outcome.is_available:
            print(analysis.outcome.properties.tensile_strength)
    """
    logger.info("Analysing specimen from: %s, plotting=%s", yaml_path, enable_plotting)
    try:
        parser = SpecimenYAMLParser(yaml_path=yaml_path)
        dataset = parser.create_dataset()
        outcome = compute_properties(dataset)
        plot_path = None
        if enable_plotting and parser.plotting_enabled:
            visualizer = CurveVisualizer(title=parser.title, show_offset_line=parser.show_offset_line)
            visualizer.render(dataset, outcome)
            plot_path = visualizer.export_svg(parser.plot_output_path)
        else:
            logger.debug("Plot export skipped for specimen '%s'", parser.name)
        logger.info("Successfully analysed specimen: %s (%d samples)", parser.name, len(dataset))
        return SpecimenAnalysis(name=parser.name, title=parser.title, dataset=dataset,
                                outcome=outcome, plot_path=plot_path)
    except Exception as e:
        logger.error("Failed to analyse specimen from %s: %s", yaml_path, e, exc_info=True)
        raise


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML specimen description without loading its data.
    Args:
        yaml_path: Path to the YAML file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        _ = SpecimenYAMLParser(yaml_path)
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e


def compute_from_arrays(strains: Union[Sequence[float], np.ndarray],
                        stresses: Union[Sequence[float], np.ndarray]) -> PropertyOutcome:
    """Derive properties from parallel strain/stress arrays in any order."""
    return compute_properties(Dataset.from_arrays(strains, stresses))
