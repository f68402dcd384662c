"""Demonstration script for stress-strain property evaluation."""
import logging
from pathlib import Path

from pytensile.core.session import PlotterSession
from pytensile.parsing.api import analyze_specimen
from pytensile.visualization.formatting import property_lines
from pytensile.visualization.plotters import CurveVisualizer

OUTPUT_DIR = Path(__file__).parent / "pytensile_plots"


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_specimens():
    """Analyse the bundled specimen descriptions."""
    current_file = Path(__file__)
    specimen_dir = current_file.parent.parent / "src" / "pytensile" / "data" / "specimens"
    for yaml_path in sorted(specimen_dir.glob("*.yaml")):
        analysis = analyze_specimen(yaml_path, enable_plotting=False)
        print(f"\n{'=' * 80}")
        print(f"SPECIMEN: {analysis.name}")
        print(f"{'=' * 80}")
        print(f"Samples: {len(analysis.dataset)}")
        for line in property_lines(analysis.outcome):
            print(f"  {line}")
        visualizer = CurveVisualizer(title=analysis.title)
        visualizer.render(analysis.dataset, analysis.outcome)
        print(f"Chart: {visualizer.export_svg(OUTPUT_DIR / yaml_path.with_suffix('.svg').name)}")


def demonstrate_session():
    """Enter points as text the way the entry form does."""
    session = PlotterSession(title="Manual entry")
    entries = [("0", "0"), ("200", "0.001"), ("400", "0.002"), ("oops", "0.005"),
               ("450", "0.010"), ("460", "0.020")]
    for stress, strain in entries:
        added = session.add_point(stress, strain)
        print(f"Stress={stress!r:>8} Strain={strain!r:>8} -> {'added' if added else 'rejected'}")
    print(f"\n{'=' * 80}")
    print("DATA POINTS")
    for line in session.data_point_lines():
        print(f"  {line}")
    print("MATERIAL PROPERTIES")
    for line in session.property_lines():
        print(f"  {line}")
    print(f"Chart: {session.export_svg(OUTPUT_DIR / 'manual_entry.svg')}")


if __name__ == "__main__":
    setup_logging()
    demonstrate_specimens()
    demonstrate_session()
