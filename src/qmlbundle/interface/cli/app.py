from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration layering
(defaults, persisted session, command-line overrides), pipeline execution
and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from qmlbundle.core.pipeline.engine import run_deployment
from qmlbundle.core.pipeline.validator import validate_config
from qmlbundle.domain.config import get_default_config, load_config, save_config
from qmlbundle.domain.deploy_models import DeploymentResult
from qmlbundle.infra.logging import LoggingConfig, configure_logging, get_logger
from qmlbundle.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 deployment failure,
             2 invalid project directory, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    # 2. Configuration layering
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        save_config(clean_conf)

    # 3. Pre-flight input verification
    project_dir = clean_conf.get("project_dir", "")
    if not os.path.isdir(project_dir):
        msg = f"Project directory does not exist: {project_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 4. Pipeline execution
    try:
        result = run_deployment(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k in get_default_config():
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: DeploymentResult) -> None:
    """
    Print the deployment result to standard output.

    Args:
        result: The deployment result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print("SIMULATION COMPLETE")
        print(f"Target path: {result.staging_root}")
    else:
        print("QML modules staged.")
        print(f"Output directory: {result.staging_root}")

    print(f"QML root: {result.qml_dir}")
    print(f"Modules required: {result.summary.get('modules_found', len(result.closure))}")
    print(f"Directories scanned: {result.summary.get('directories_scanned', 0)}")

    if result.reduced:
        header = "Would stage:" if result.dry_run else "Staged:"
        print("\n" + header)
        for module_dir in result.reduced:
            print(f"  - {os.path.relpath(module_dir, result.qml_dir)}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
