from __future__ import annotations

"""
Configuration Domain Defaults.

Provides the dict-based runtime configuration consumed by the listing
engine. The CLI merges its overrides on top of these values.
"""

import os
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    The starting directory defaults to the current working directory when
    no path is supplied.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_file": "",

        # Output Format
        "json_output": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": "",
    }
