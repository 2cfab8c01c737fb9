from __future__ import annotations

"""
Core listing pipeline.

This module coordinates a complete run:
1. Validates configuration and normalizes the starting path.
2. Builds the directory tree depth-first.
3. Linearizes it level by level, streaming lines to the output sink.
4. Persists the listing when an output file is configured.
5. Releases the tree.
"""

import logging
import os
from typing import Any, Dict, List, Optional, TextIO

from dirlevels.core.analysis.level_linearizer import linearize
from dirlevels.core.analysis.tree_builder import DirectoryLister, PathClassifier
from dirlevels.core.analysis.tree_lifecycle import owned_tree
from dirlevels.core.pipeline.validator import validate_config
from dirlevels.domain.listing_models import (
    ListingResult,
    WalkError,
    create_error_result,
    create_success_result,
)
from dirlevels.domain.tree_models import LevelEntry
from dirlevels.infra.fs import normalize_path, save_lines

logger = logging.getLogger(__name__)


def run_listing(
        config: Optional[Dict[str, Any]],
        *,
        sink: Optional[TextIO] = None,
        lister: Optional[DirectoryLister] = None,
        classifier: Optional[PathClassifier] = None,
) -> ListingResult:
    """
    Execute the full listing pipeline.

    Recoverable filesystem failures are collected in the result; a
    MemoryError raised while building or linearizing the tree propagates.

    Args:
        config: The configuration dictionary (raw or partial).
        sink: Optional text stream receiving each formatted line as it is produced.
        lister: Directory lister override (defaults to the OS lister).
        classifier: Path classifier override (defaults to os.stat).

    Returns:
        ListingResult: Object containing status, entries and summary.
    """
    logger.debug("Listing pipeline started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg.get("input_path", ""), os.getcwd())

    # Injected listers may describe a virtual tree
    if lister is None and not os.path.exists(base_path):
        msg = f"Input path does not exist: {base_path}"
        logger.error(msg)
        return create_error_result(msg, base_path, summary_extra={"reason": "missing_input"})

    # -------------------------------------------------------------------------
    # 2) Build, Linearize, Release
    # -------------------------------------------------------------------------
    logger.info(f"Listing directory tree: {base_path}")
    walk_errors: List[WalkError] = []
    entries: List[LevelEntry] = []

    with owned_tree(base_path, lister=lister, classifier=classifier, errors=walk_errors) as root:
        for entry in linearize(root):
            entries.append(entry)
            if sink is not None:
                sink.write(entry.format() + "\n")

    if sink is not None:
        sink.flush()

    # -------------------------------------------------------------------------
    # 3) Persistence
    # -------------------------------------------------------------------------
    output_file = cfg.get("output_file", "")
    if output_file:
        output_file = normalize_path(output_file, output_file)
        ok, err = save_lines(output_file, (entry.format() for entry in entries))
        if not ok:
            msg = f"Failed to save listing to '{output_file}': {err}"
            logger.error(msg)
            return create_error_result(msg, base_path, summary_extra={"reason": "save_failed"})
        logger.info(f"Listing saved to file: {output_file}")

    summary = {
        "total_entries": len(entries),
        "max_depth": max((entry.depth for entry in entries), default=0),
        "walk_errors": len(walk_errors),
    }
    logger.debug(f"Listing pipeline finished: {summary}")

    return create_success_result(
        base_path=base_path,
        entries=entries,
        walk_errors=walk_errors,
        output_file=output_file,
        summary_extra=summary,
    )
