from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirlevels CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirlevels",
        description=(
            "Walk a directory tree and print every non-hidden entry level by "
            "level as <depth>:<position>:<absolute path>."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help="Starting directory (defaults to the current working directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Also write the listing to this file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the listing as a JSON array of {depth, position, path}.",
    )

    # --- Diagnostics ---
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Persist diagnostics to a rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_file"] = args.output_file
    overrides["log_file"] = args.log_file

    if args.json_output:
        overrides["json_output"] = True

    if args.debug:
        overrides["log_level"] = "DEBUG"
    elif args.quiet:
        overrides["log_level"] = "ERROR"

    return overrides
