from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging, pipeline execution and result rendering. Standard
output carries only the listing; diagnostics go to stderr.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dirlevels.core.pipeline.engine import run_listing
from dirlevels.core.pipeline.validator import validate_config
from dirlevels.domain.config import get_default_config
from dirlevels.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirlevels.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merge and validation
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        log_file=clean_conf["log_file"] or None,
    ))

    # Undecodable file names are printed back as their original bytes
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        return _execute(clean_conf)
    finally:
        shutdown_logging()


def _execute(conf: Dict[str, Any]) -> int:
    """Run the pipeline and render its result according to the output mode."""
    json_output = bool(conf.get("json_output"))
    sink = None if json_output else sys.stdout

    try:
        result = run_listing(conf, sink=sink)
        if result.ok and json_output:
            payload = [asdict(entry) for entry in result.entries]
            print(json.dumps(payload, ensure_ascii=False, indent=2))
            sys.stdout.flush()
    except KeyboardInterrupt:
        logger.warning("Listing interrupted by user.")
        return EXIT_INTERRUPTED
    except MemoryError:
        logger.critical("Out of memory while building the directory tree. Aborting.")
        return EXIT_FAILURE
    except BrokenPipeError:
        # Reader closed the pipe early, e.g. '| head'
        _discard_stdout()
        logger.debug("Standard output closed by the reader. Listing stopped.")
        return EXIT_BROKEN_PIPE

    if not result.ok:
        if result.summary.get("reason") == "missing_input":
            return EXIT_MISSING_INPUT
        return EXIT_FAILURE

    if result.walk_errors:
        logger.warning(
            f"Listing completed with {len(result.walk_errors)} unreadable entries."
        )

    return EXIT_OK


def _discard_stdout() -> None:
    """Point the stdout descriptor at the null device so the final flush at exit cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with non-None values are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = ["input_path", "output_file", "json_output", "log_level", "log_file"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
