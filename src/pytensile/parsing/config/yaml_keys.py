"""Constants used for YAML specimen configuration parsing."""

# Top-level keys
NAME_KEY = "name"
TITLE_KEY = "title"
DATA_KEY = "data"
PLOT_KEY = "plot"

# Data section keys
POINTS_KEY = "points"
FILE_PATH_KEY = "file_path"
STRAIN_COLUMN_KEY = "strain_column"
STRESS_COLUMN_KEY = "stress_column"

# Plot section keys
ENABLED_KEY = "enabled"
OUTPUT_KEY = "output"
SHOW_OFFSET_LINE_KEY = "show_offset_line"

# Default column names for file data
DEFAULT_STRAIN_COLUMN = "strain"
DEFAULT_STRESS_COLUMN = "stress"
