import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ruamel.yaml import YAML, constructor, scanner

from pytensile.core.exceptions import SampleError
from pytensile.core.samples import Dataset, Sample
from pytensile.parsing.config.yaml_keys import (
    NAME_KEY, TITLE_KEY, DATA_KEY, PLOT_KEY, POINTS_KEY, FILE_PATH_KEY, STRAIN_COLUMN_KEY, STRESS_COLUMN_KEY,
    ENABLED_KEY, OUTPUT_KEY, SHOW_OFFSET_LINE_KEY, DEFAULT_STRAIN_COLUMN, DEFAULT_STRESS_COLUMN
)
from pytensile.parsing.io.data_handler import load_curve_data
from pytensile.parsing.validation.errors import ConfigurationError, UnknownFieldError

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ConfigurationError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ConfigurationError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ConfigurationError(f"Error parsing {self.config_path}: {str(e)}") from e


class SpecimenYAMLParser(YAMLFileParser):
    """Parser for tensile specimen descriptions in YAML format."""

    REQUIRED_FIELDS = {NAME_KEY, DATA_KEY}
    OPTIONAL_FIELDS = {TITLE_KEY, PLOT_KEY}
    FILE_DATA_FIELDS = {FILE_PATH_KEY, STRAIN_COLUMN_KEY, STRESS_COLUMN_KEY}
    PLOT_FIELDS = {ENABLED_KEY, OUTPUT_KEY, SHOW_OFFSET_LINE_KEY}
    PLOT_DIRECTORY = "pytensile_plots"

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing SpecimenYAMLParser for: %s", yaml_path)
        self._validate_config()
        logger.info("SpecimenYAMLParser initialized for specimen '%s'", self.name)

    # --- Public API ---
    @property
    def name(self) -> str:
        return str(self.config[NAME_KEY])

    @property
    def title(self) -> Optional[str]:
        title = self.config.get(TITLE_KEY)
        return None if title is None else str(title)

    @property
    def plotting_enabled(self) -> bool:
        return bool(self._plot_config().get(ENABLED_KEY, True))

    @property
    def show_offset_line(self) -> bool:
        return bool(self._plot_config().get(SHOW_OFFSET_LINE_KEY, True))

    @property
    def plot_output_path(self) -> Path:
        """SVG target; relative paths resolve against the YAML file's directory."""
        output = self._plot_config().get(OUTPUT_KEY)
        if output is None:
            filename = f"{self.name.replace(' ', '_')}.svg"
            return self.base_dir / self.PLOT_DIRECTORY / filename
        output_path = Path(output)
        return output_path if output_path.is_absolute() else self.base_dir / output_path

    def create_dataset(self) -> Dataset:
        """Build the Dataset described by the 'data' section."""
        data_config = self.config[DATA_KEY]
        if POINTS_KEY in data_config:
            dataset = self._dataset_from_points(data_config[POINTS_KEY])
            logger.info("Created dataset with %d inline points for '%s'", len(dataset), self.name)
            return dataset
        file_config = {
            FILE_PATH_KEY: self._resolve_path(data_config[FILE_PATH_KEY]),
            STRAIN_COLUMN_KEY: data_config.get(STRAIN_COLUMN_KEY, DEFAULT_STRAIN_COLUMN),
            STRESS_COLUMN_KEY: data_config.get(STRESS_COLUMN_KEY, DEFAULT_STRESS_COLUMN),
        }
        return load_curve_data(file_config)

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the configuration structure and content."""
        logger.debug("Starting configuration validation")
        if not isinstance(self.config, dict):
            logger.error("Invalid YAML structure - expected dictionary at root level")
            raise ConfigurationError("The YAML file must start with a dictionary/object structure with key-value "
                                     "pairs, not a list or scalar value")
        missing_fields = self.REQUIRED_FIELDS - set(self.config.keys())
        if missing_fields:
            logger.error("Missing required fields: %s", missing_fields)
            raise ConfigurationError(f"Missing required fields: {', '.join(sorted(missing_fields))}")
        self._check_unknown_fields("specimen", set(self.config.keys()),
                                   self.REQUIRED_FIELDS | self.OPTIONAL_FIELDS)
        if not str(self.config[NAME_KEY]).strip():
            raise ConfigurationError("Specimen name cannot be empty")
        self._validate_data_section(self.config[DATA_KEY])
        if PLOT_KEY in self.config:
            self._validate_plot_section(self.config[PLOT_KEY])
        logger.info("Configuration validation completed successfully")

    def _validate_data_section(self, data_config: Any) -> None:
        logger.debug("Validating data section")
        if not isinstance(data_config, dict):
            raise ConfigurationError(f"The '{DATA_KEY}' section must be a dictionary, "
                                     f"got {type(data_config).__name__}")
        has_points = POINTS_KEY in data_config
        has_file = FILE_PATH_KEY in data_config
        if has_points == has_file:
            logger.error("Data section must define exactly one of '%s' or '%s'", POINTS_KEY, FILE_PATH_KEY)
            raise ConfigurationError(f"The '{DATA_KEY}' section must define exactly one of "
                                     f"'{POINTS_KEY}' or '{FILE_PATH_KEY}'")
        allowed = {POINTS_KEY} if has_points else self.FILE_DATA_FIELDS
        self._check_unknown_fields(DATA_KEY, set(data_config.keys()), allowed)
        if has_points and not isinstance(data_config[POINTS_KEY], list):
            raise ConfigurationError(f"'{POINTS_KEY}' must be a list of [strain, stress] pairs")

    def _validate_plot_section(self, plot_config: Any) -> None:
        logger.debug("Validating plot section")
        if not isinstance(plot_config, dict):
            raise ConfigurationError(f"The '{PLOT_KEY}' section must be a dictionary, "
                                     f"got {type(plot_config).__name__}")
        self._check_unknown_fields(PLOT_KEY, set(plot_config.keys()), self.PLOT_FIELDS)
        for flag in (ENABLED_KEY, SHOW_OFFSET_LINE_KEY):
            if flag in plot_config and not isinstance(plot_config[flag], bool):
                raise ConfigurationError(f"'{PLOT_KEY}.{flag}' must be true or false, got {plot_config[flag]!r}")

    @staticmethod
    def _check_unknown_fields(section: str, present: set, allowed: set) -> None:
        extra_fields = present - allowed
        if extra_fields:
            logger.warning("Unknown fields in '%s': %s", section, extra_fields)
            suggestions = {
                field: get_close_matches(str(field), [str(a) for a in allowed], n=1, cutoff=0.6)
                for field in extra_fields
            }
            raise UnknownFieldError(section, sorted(str(f) for f in extra_fields), suggestions)

    # --- Helpers ---
    def _plot_config(self) -> Dict[str, Any]:
        return self.config.get(PLOT_KEY) or {}

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        file_path = Path(path)
        return file_path if file_path.is_absolute() else self.base_dir / file_path

    @staticmethod
    def _dataset_from_points(points: List[Any]) -> Dataset:
        samples = []
        for index, point in enumerate(points):
            if isinstance(point, dict):
                unknown = set(point.keys()) - {'strain', 'stress'}
                if unknown or len(point) != 2:
                    raise ConfigurationError(f"Point {index} must have exactly 'strain' and 'stress', got {point}")
                strain, stress = point['strain'], point['stress']
            elif isinstance(point, (list, tuple)) and len(point) == 2:
                strain, stress = point
            else:
                raise ConfigurationError(f"Point {index} must be a [strain, stress] pair, got {point!r}")
            try:
                samples.append(Sample(strain=strain, stress=stress))
            except SampleError as e:
                raise ConfigurationError(f"Invalid point {index}: {str(e)}") from e
        return Dataset(tuple(samples))
