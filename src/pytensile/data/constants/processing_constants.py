from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used by the property calculator and loaders."""
    # Data validation
    MONOTONICITY_THRESHOLD: Final[float] = 0.0
    MIN_DATA_POINTS: Final[int] = 2
    # Elastic region and yield
    LINEAR_REGION_DIVISOR: Final[int] = 3  # first ceil(N/3) samples are taken as linear
    YIELD_OFFSET_STRAIN: Final[float] = 0.002  # 0.2% offset
    MPA_PER_GPA: Final[float] = 1000.0
    # Display precision
    STRENGTH_DECIMALS: Final[int] = 2
    ENERGY_DECIMALS: Final[int] = 4
    # File processing
    MAX_MISSING_VALUE_PERCENTAGE: Final[float] = 50.0
    # Visualization
    DEFAULT_FIGURE_SIZE: Final[tuple] = (8.0, 5.0)
    OFFSET_LINE_POINTS: Final[int] = 200
    CURVE_COLOR: Final[str] = '#8884d8'
    OFFSET_LINE_COLOR: Final[str] = '#e62728'
    YIELD_MARKER_COLOR: Final[str] = '#2ca02c'


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    NON_FINITE_VALUE: Final[str] = "{field} must be a finite number, got {value!r}"
    ARRAY_LENGTH_MISMATCH: Final[str] = "Array length mismatch: strains({strains}) != stresses({stresses})"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    SVG_EXTENSION: Final[str] = '.svg'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
