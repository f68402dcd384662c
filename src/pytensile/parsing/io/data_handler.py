import logging
import numpy as np
from typing import Union, Tuple, Dict
import pandas as pd
from pathlib import Path

from pytensile.core.samples import Dataset
from pytensile.parsing.config.yaml_keys import FILE_PATH_KEY, STRAIN_COLUMN_KEY, STRESS_COLUMN_KEY
from pytensile.parsing.validation.array_validator import is_monotonic
from pytensile.data.constants import ProcessingConstants, FileConstants

logger = logging.getLogger(__name__)


def load_curve_data(file_config: Dict[str, Union[str, int]], header: bool = True) -> Dataset:
    """
    Reads strain and stress data from a file with comprehensive error handling.
    Args:
        file_config: Dictionary containing file configuration with keys:
            - file_path: Path to data file
            - strain_column: Strain column name/index
            - stress_column: Stress column name/index
        header: Indicates if the file contains a header row
    Returns:
        Dataset stably sorted by ascending strain; duplicate strains are kept
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: If data validation fails or file format is unsupported
        PermissionError: If file cannot be read due to permissions
    """
    # Validate input configuration
    _validate_file_config(file_config)
    # Extract configuration
    file_path = Path(file_config[FILE_PATH_KEY])
    strain_col = file_config[STRAIN_COLUMN_KEY]
    stress_col = file_config[STRESS_COLUMN_KEY]
    # Check file existence and permissions
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")
    # Validate file extension early
    file_extension = file_path.suffix.lower()
    if file_extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    # Check file size
    file_size_mb = file_path.stat().st_size / (1024 * 1024)
    if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"File size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                         f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")
    logger.info("Loading stress-strain data from %s", file_path)
    try:
        if file_extension == '.xlsx':
            df = _read_excel_file(file_path, header)
        elif file_extension == '.csv':
            df = _read_csv_file(file_path, header)
        else:  # .txt files
            df = _read_text_file(file_path, header)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading file {file_path}: {str(e)}") from e
    except Exception as e:
        raise ValueError(f"Error reading file {file_path}: {str(e)}") from e
    # Extract and validate data
    strain_array, stress_array = _extract_data_columns(df, strain_col, stress_col, str(file_path))
    strain_array, stress_array = _clean_and_validate_data(strain_array, stress_array, str(file_path))
    dataset = Dataset.from_arrays(strain_array, stress_array)
    logger.info("Loaded %d samples from %s", len(dataset), file_path)
    return dataset


def _validate_file_config(file_config: Dict) -> None:
    """Validate the file configuration dictionary."""
    required_keys = {FILE_PATH_KEY, STRAIN_COLUMN_KEY, STRESS_COLUMN_KEY}
    missing_keys = required_keys - set(file_config.keys())
    if missing_keys:
        raise ValueError(f"Missing required configuration keys: {missing_keys}")
    if not file_config[FILE_PATH_KEY]:
        raise ValueError("File path cannot be empty")


def _read_excel_file(file_path: Path, header: bool) -> pd.DataFrame:
    """Read Excel file with proper error handling."""
    try:
        return pd.read_excel(
            file_path,
            header=0 if header else None,
            na_values=list(FileConstants.NA_VALUES),
        )
    except ImportError as e:
        raise ValueError("Excel file support requires openpyxl. Install with: pip install openpyxl") from e


def _read_csv_file(file_path: Path, header: bool) -> pd.DataFrame:
    """Read CSV file with proper error handling."""
    return pd.read_csv(
        file_path,
        header=0 if header else None,
        na_values=list(FileConstants.NA_VALUES),
        encoding=FileConstants.DEFAULT_ENCODING,
    )


def _read_text_file(file_path: Path, header: bool) -> pd.DataFrame:
    """Read whitespace-separated text file."""
    try:
        return pd.read_csv(
            file_path,
            sep=r'\s+',
            header=0 if header else None,
            na_values=list(FileConstants.NA_VALUES),
            encoding=FileConstants.DEFAULT_ENCODING,
            engine='python'  # Explicitly specify engine for regex separator
        )
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"No data found in text file: {str(e)}") from e


def _extract_data_columns(df: pd.DataFrame, strain_col: Union[str, int], stress_col: Union[str, int],
                          file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Extract strain and stress columns from DataFrame."""
    if df.empty:
        raise ValueError(f"No data found in file: {file_path}")
    strain_series = _extract_column(df, strain_col, "strain", file_path)
    stress_series = _extract_column(df, stress_col, "stress", file_path)
    return _convert_to_numeric_arrays(strain_series, stress_series, file_path)


def _extract_column(df: pd.DataFrame, col_identifier: Union[str, int],
                    col_type: str, file_path: str) -> pd.Series:
    """Extract a single column from DataFrame with proper error handling."""
    if isinstance(col_identifier, str):
        if col_identifier not in df.columns:
            available_cols = ', '.join(df.columns.astype(str))
            raise ValueError(f"{col_type.capitalize()} column '{col_identifier}' not found in file {file_path}. "
                             f"Available columns: {available_cols}")
        return df[col_identifier]
    else:
        if col_identifier < 0 or col_identifier >= len(df.columns):
            raise ValueError(f"{col_type.capitalize()} column index {col_identifier} out of bounds "
                             f"(file has {len(df.columns)} columns)")
        return df.iloc[:, col_identifier]


def _convert_to_numeric_arrays(strain_series: pd.Series, stress_series: pd.Series,
                               file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Convert pandas Series to float64 numpy arrays; unparseable cells become NaN."""
    strain_array = np.asarray(pd.to_numeric(strain_series, errors='coerce'), dtype=np.float64)
    stress_array = np.asarray(pd.to_numeric(stress_series, errors='coerce'), dtype=np.float64)
    strain_nan_count = int(np.sum(~np.isfinite(strain_array)))
    stress_nan_count = int(np.sum(~np.isfinite(stress_array)))
    if strain_nan_count > 0:
        logger.warning("Strain column has %d non-numeric values in %s", strain_nan_count, file_path)
    if stress_nan_count > 0:
        logger.warning("Stress column has %d non-numeric values in %s", stress_nan_count, file_path)
    return strain_array, stress_array


def _clean_and_validate_data(strain_array: np.ndarray, stress_array: np.ndarray,
                             file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Drop rows with missing values and order by strain."""
    if len(strain_array) == 0 or len(stress_array) == 0:
        raise ValueError(f"No valid data found in file: {file_path}")
    invalid_mask = ~(np.isfinite(strain_array) & np.isfinite(stress_array))
    if np.any(invalid_mask):
        invalid_count = int(np.sum(invalid_mask))
        invalid_percentage = (invalid_count / len(strain_array)) * 100
        logger.warning("Found %d rows (%.1f%%) with missing values in %s",
                       invalid_count, invalid_percentage, file_path)
        if invalid_percentage > ProcessingConstants.MAX_MISSING_VALUE_PERCENTAGE:
            raise ValueError(f"Too many missing values ({invalid_percentage:.1f}%) in file: {file_path}. "
                             "Please clean the data or check file format.")
        strain_array = strain_array[~invalid_mask]
        stress_array = stress_array[~invalid_mask]
        logger.info("Removed %d rows with missing values. Remaining data points: %d",
                    invalid_count, len(strain_array))
    if len(strain_array) < ProcessingConstants.MIN_DATA_POINTS:
        raise ValueError(f"Insufficient valid data points ({len(strain_array)}) after cleaning missing values. "
                         f"Minimum required: {ProcessingConstants.MIN_DATA_POINTS}")
    if not is_monotonic(strain_array, name="Strain column", raise_error=False):
        logger.info("Strain column is not ascending; samples will be stably sorted by strain")
    return strain_array, stress_array
