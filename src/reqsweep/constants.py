"""Constants for reqsweep."""

import os

# Schema version for suite files and CLI --version
SCHEMA_VERSION = "1.0.0"

# Expansion limits
# Precedence: explicit max_axis_values argument > REQSWEEP_MAX_AXIS_VALUES env var > 100000
DEFAULT_MAX_AXIS_VALUES = int(os.environ.get("REQSWEEP_MAX_AXIS_VALUES", "100000"))

# Suite file formats, in directory scan order
SUPPORTED_SUITE_SUFFIXES = (".yaml", ".yml", ".json", ".toml")
