from __future__ import annotations

"""
Logging Settings.

Holds what the CLI decides about diagnostics for one run: the severity
threshold and where records go besides stderr.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one CLI run.

    Attributes:
        level: Severity name ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        log_file: Optional path of a rotating log file kept next to stderr.
        max_bytes: Size at which the log file rolls over.
        backup_count: Number of rolled-over files to keep.
    """
    level: str = "INFO"
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3
