from __future__ import annotations

"""
Listing Domain Data Models.

Defines the result object returned by the listing engine to the interface
layer, the record used to report recoverable filesystem failures, and the
factory functions that assemble results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dirlevels.domain.tree_models import LevelEntry

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class WalkError:
    """
    Encapsulates a recoverable failure met while walking the filesystem.

    Attributes:
        path: Absolute path of the entry that could not be processed.
        operation: Failed collaborator call ("list" or "classify").
        error: Descriptive exception message.
    """
    path: str
    operation: str
    error: str

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingResult:
    """
    Unified result of a complete listing run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Normalized root directory that was walked.
        output_file: Path where the listing was persisted, if any.
        entries: Level-ordered entries in output order.
        walk_errors: Recoverable failures collected during the walk.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    base_path: str
    output_file: str = ""
    entries: List[LevelEntry] = field(default_factory=list)
    walk_errors: List[WalkError] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> List[str]:
        return [entry.format() for entry in self.entries]

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        base_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ListingResult:
    """
    Create a failed listing result instance.

    Args:
        error: Detailed error description.
        base_path: The target input directory.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ListingResult: An immutable error result object.
    """
    return ListingResult(
        ok=False,
        error=error,
        base_path=base_path,
        summary=summary_extra or {},
    )


def create_success_result(
        base_path: str,
        entries: List[LevelEntry],
        walk_errors: Optional[List[WalkError]] = None,
        output_file: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ListingResult:
    """
    Create a successful listing result instance.

    A run with recoverable walk errors is still successful: the listing
    covers the readable portion of the tree.
    """
    return ListingResult(
        ok=True,
        error="",
        base_path=base_path,
        output_file=output_file,
        entries=list(entries),
        walk_errors=list(walk_errors or []),
        summary=summary_extra or {},
    )
