import logging
from pathlib import Path
from typing import List, Optional, Union

from pytensile.algorithms.calculator import compute_properties
from pytensile.core.results import PropertyOutcome
from pytensile.core.samples import Dataset, Sample
from pytensile.parsing.entry import parse_sample
from pytensile.visualization.formatting import property_lines, data_point_lines
from pytensile.visualization.plotters import CurveVisualizer

logger = logging.getLogger(__name__)


class PlotterSession:
    """
    State container for interactive stress-strain entry.

    Holds the current Dataset and chart title. Every mutation replaces the
    Dataset with a new value; derived properties are recomputed on access.
    """

    def __init__(self, title: Optional[str] = None, dataset: Optional[Dataset] = None) -> None:
        self.title = title
        self.dataset = dataset if dataset is not None else Dataset()
        logger.debug("PlotterSession created with %d samples", len(self.dataset))

    # --- Data entry ---
    def add_point(self, stress_text: Optional[str], strain_text: Optional[str]) -> bool:
        """Parse the entry fields and insert the point; returns False when the text is rejected."""
        sample = parse_sample(stress_text, strain_text)
        if sample is None:
            return False
        self.add_sample(sample)
        return True

    def add_sample(self, sample: Sample) -> None:
        self.dataset = self.dataset.with_sample(sample)
        logger.info("Added point (strain=%g, stress=%g); dataset now has %d samples",
                    sample.strain, sample.stress, len(self.dataset))

    def load(self, dataset: Dataset) -> None:
        self.dataset = dataset
        logger.info("Loaded dataset with %d samples", len(dataset))

    def clear(self) -> None:
        self.dataset = self.dataset.cleared()
        logger.info("Dataset cleared")

    # --- Derived views ---
    @property
    def properties(self) -> PropertyOutcome:
        return compute_properties(self.dataset)

    def property_lines(self) -> List[str]:
        return property_lines(self.properties)

    def data_point_lines(self) -> List[str]:
        return data_point_lines(self.dataset)

    # --- Chart ---
    def render(self, show_offset_line: bool = True):
        visualizer = CurveVisualizer(title=self.title, show_offset_line=show_offset_line)
        return visualizer.render(self.dataset, self.properties)

    def export_svg(self, path: Union[str, Path], show_offset_line: bool = True) -> Path:
        visualizer = CurveVisualizer(title=self.title, show_offset_line=show_offset_line)
        visualizer.render(self.dataset, self.properties)
        return visualizer.export_svg(path)
