from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the qmlbundle CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="qmlbundle",
        description=(
            "Copy the Qt QML modules a project imports, directly or transitively, "
            "into a distribution directory."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-p", "--project",
        dest="project_dir",
        default=None,
        help="Project root containing the 'res' directory (default: current directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help="Distribution directory receiving the QML modules.",
    )
    p.add_argument(
        "-q", "--qml-dir",
        dest="qml_dir",
        default=None,
        help="Qt QML module root. Queried from qmake when omitted.",
    )
    p.add_argument(
        "--qmake",
        dest="qmake_path",
        default=None,
        help="qmake executable used to locate the QML module root.",
    )
    p.add_argument(
        "--res-dir",
        dest="resource_dir_name",
        default=None,
        help="Name of the project's QML resource directory (default: res).",
    )

    # --- Target ---
    p.add_argument(
        "--os",
        dest="target_os",
        default=None,
        help="Target platform: windows, linux or darwin (default: host).",
    )
    p.add_argument(
        "-j", "--jobs",
        dest="copy_workers",
        type=int,
        default=None,
        help="Number of module trees copied concurrently.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve dependencies and report them without copying anything.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved session and start from built-in defaults.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the last session.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the deployment result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset; None means "not given".
    """
    overrides: Dict[str, Any] = {}

    overrides["project_dir"] = args.project_dir
    overrides["output_dir"] = args.output_dir
    overrides["qml_dir"] = args.qml_dir
    overrides["qmake_path"] = args.qmake_path
    overrides["resource_dir_name"] = args.resource_dir_name
    overrides["target_os"] = args.target_os
    overrides["copy_workers"] = args.copy_workers

    if args.dry_run:
        overrides["dry_run"] = True

    return overrides
