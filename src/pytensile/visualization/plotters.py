import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from pytensile.algorithms.symbolic import offset_line_function
from pytensile.core.results import PropertyOutcome
from pytensile.core.samples import Dataset
from pytensile.data.constants import ProcessingConstants, FileConstants

logger = logging.getLogger(__name__)


class CurveVisualizer:
    """Renders a stress-strain dataset as a line chart and exports it as SVG."""

    # --- Constructor ---
    def __init__(self, title: Optional[str] = None, show_offset_line: bool = True) -> None:
        self.title = title
        self.show_offset_line = show_offset_line
        self.fig = None
        self.ax = None
        self.setup_style()
        logger.debug("CurveVisualizer initialized (title=%r, backend=%s)", title, matplotlib.get_backend())

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'Liberation Sans'],
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'xtick.labelsize': 9,
            'ytick.labelsize': 9,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.edgecolor': 'none',
            'svg.fonttype': 'none',
        })

    def has_figure(self) -> bool:
        return self.fig is not None

    # --- Public API Methods ---
    def render(self, dataset: Dataset, outcome: Optional[PropertyOutcome] = None):
        """
        Draw stress against strain for the dataset.

        When a computed outcome with a determinate modulus is given, the offset
        line and the yield point are overlaid. Any previous figure is closed.
        Returns:
            The matplotlib Figure
        """
        self.close()
        logger.info("Rendering stress-strain curve with %d samples", len(dataset))
        self.fig, self.ax = plt.subplots(figsize=ProcessingConstants.DEFAULT_FIGURE_SIZE)
        ax = self.ax
        strains = dataset.strains
        stresses = dataset.stresses
        ax.plot(strains, stresses, color=ProcessingConstants.CURVE_COLOR, linewidth=2,
                marker='o', markersize=3, label='stress')
        if outcome is not None and outcome.is_available and self.show_offset_line and len(dataset) > 0:
            self._draw_yield_construction(strains, outcome)
        ax.set_xlabel("Strain")
        ax.set_ylabel("Stress (MPa)")
        if self.title:
            ax.set_title(self.title, fontweight='bold')
        ax.grid(True, linestyle='--', alpha=0.3)
        for spine in ax.spines.values():
            spine.set_color('#CCCCCC')
        ax.legend(loc='best', framealpha=0.9)
        return self.fig

    def export_svg(self, path: Union[str, Path]) -> Path:
        """Write the current figure as an SVG file and close it."""
        if self.fig is None:
            logger.error("export_svg called before render")
            raise ValueError("Nothing to export: call render() first.")
        filepath = Path(path)
        if filepath.suffix.lower() != FileConstants.SVG_EXTENSION:
            filepath = filepath.with_suffix(FileConstants.SVG_EXTENSION)
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            self.fig.savefig(str(filepath), format='svg', bbox_inches='tight', pad_inches=0.2)
            logger.info("Stress-strain chart saved as %s", filepath)
            return filepath
        finally:  # Always close the figure to prevent memory leaks
            self.close()

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            logger.debug("Figure closed and memory cleaned up")

    # --- Helpers ---
    def _draw_yield_construction(self, strains: np.ndarray, outcome: PropertyOutcome) -> None:
        props = outcome.properties
        line = offset_line_function(props)
        if line is None:
            logger.debug("Offset line not drawn: modulus indeterminate")
            return
        # Clip the offset line to the stress range so steep lines do not flatten the curve
        grid = np.linspace(strains[0], strains[-1], ProcessingConstants.OFFSET_LINE_POINTS)
        line_stress = line(grid)
        stress_top = max(props.tensile_strength, 0.0)
        visible = (line_stress >= 0.0) & (line_stress <= stress_top)
        if np.any(visible):
            offset_pct = ProcessingConstants.YIELD_OFFSET_STRAIN * 100
            self.ax.plot(grid[visible], line_stress[visible], color=ProcessingConstants.OFFSET_LINE_COLOR,
                         linestyle='--', linewidth=1.2, label=f'{offset_pct:.1f}% offset line')
        if props.yield_found:
            self.ax.plot([props.yield_strain], [props.yield_strength], 'o',
                         color=ProcessingConstants.YIELD_MARKER_COLOR, markersize=7, label='yield')
