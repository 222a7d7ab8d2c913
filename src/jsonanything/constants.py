# topmark:header:start
#
#   project      : JSON Anything
#   file         : constants.py
#   file_relpath : src/jsonanything/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON Anything Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    JSONANYTHING_VERSION: str = get_version("jsonanything")
except PackageNotFoundError:
    JSONANYTHING_VERSION = "unknown"

# Placeholder identifiers used when the caller does not supply a name/table:
DEFAULT_CLASS_NAME: str = "Root"
DEFAULT_INTERFACE_NAME: str = "RootObject"
DEFAULT_TABLE_NAME: str = "mytable"

# Configuration discovery:
CONFIG_FILE_NAME: str = "jsonanything.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.jsonanything"

LOG_LEVEL_ENV_VAR: str = "JSONANYTHING_LOG_LEVEL"

# Read JSON input from STDIN when the input path is a dash:
STDIN_PATH: str = "-"
