from __future__ import annotations

"""
Core deployment pipeline.

This module coordinates the whole QML deployment workflow:
1. Validates configuration and paths.
2. Locates the toolkit's QML module root.
3. Computes the dependency closure of the project's resource directory.
4. Reduces the closure to disjoint top-level module trees.
5. Stages those trees into the distribution directory.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from qmlbundle.core.pipeline.stager import stage_modules
from qmlbundle.core.pipeline.validator import validate_config
from qmlbundle.core.services.closure import build_closure
from qmlbundle.core.services.reducer import reduce_closure
from qmlbundle.domain.deploy_models import (
    DeploymentResult,
    create_error_result,
    create_success_result,
)
from qmlbundle.domain.errors import QmlBundleError
from qmlbundle.infra.fs import dir_exists, get_staging_root, normalize_path, safe_mkdir
from qmlbundle.infra.qt import resolve_qml_dir

logger = logging.getLogger(__name__)


def run_deployment(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> DeploymentResult:
    """
    Execute the full QML deployment pipeline.

    Failures never raise: they are logged and returned as an error result.
    Anything already copied before a failure stays in the output directory.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, resolve everything but copy nothing.

    Returns:
        DeploymentResult: Object containing status, module lists and summary.
    """
    logger.info("Deployment started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cfg["dry_run"] = bool(dry_run or cfg["dry_run"])
    cfg["project_dir"] = normalize_path(cfg["project_dir"], os.getcwd())
    cfg["output_dir"] = normalize_path(cfg["output_dir"], cfg["project_dir"])
    project_dir = cfg["project_dir"]

    if not dir_exists(project_dir):
        msg = f"Invalid project directory: {project_dir}"
        logger.error(msg)
        return create_error_result(msg, cfg, project_dir)

    # -------------------------------------------------------------------------
    # 2) Toolkit Location
    # -------------------------------------------------------------------------
    try:
        qml_dir = resolve_qml_dir(cfg)
    except QmlBundleError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg, project_dir)
    logger.info(f"Using QML modules from {qml_dir}")

    staging_root = get_staging_root(cfg["output_dir"], cfg["target_os"])

    # -------------------------------------------------------------------------
    # 3) Closure Discovery & Reduction
    # -------------------------------------------------------------------------
    seeds: List[str] = []
    resource_dir = os.path.join(project_dir, cfg["resource_dir_name"])
    if dir_exists(resource_dir):
        seeds.append(resource_dir)
    else:
        logger.warning(f"No resource directory at {resource_dir}; nothing to scan.")

    try:
        closure = build_closure(qml_dir, seeds)
    except (QmlBundleError, OSError) as e:
        msg = f"Dependency discovery failed: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, project_dir, qml_dir, staging_root)

    closure_list = sorted(closure.modules)
    reduced = reduce_closure(closure_list)
    summary: Dict[str, Any] = {
        "modules_found": len(closure_list),
        "modules_staged": 0,
        "directories_scanned": len(closure.visited),
        "dry_run": cfg["dry_run"],
    }

    # -------------------------------------------------------------------------
    # 4) Staging
    # -------------------------------------------------------------------------
    staged: List[str] = []
    if cfg["dry_run"]:
        logger.info(f"Dry run: {len(reduced)} module trees would be staged into {staging_root}")
    else:
        ok, err = safe_mkdir(staging_root)
        if not ok:
            msg = f"Failed to create output directory {staging_root}: {err}"
            logger.critical(msg)
            return create_error_result(msg, cfg, project_dir, qml_dir, staging_root, summary)

        try:
            staged = stage_modules(
                reduced, qml_dir, staging_root, cfg["target_os"], workers=cfg["copy_workers"]
            )
        except QmlBundleError as e:
            logger.error(str(e))
            return create_error_result(str(e), cfg, project_dir, qml_dir, staging_root, summary)
        summary["modules_staged"] = len(staged)

    logger.info("Deployment finished.")
    return create_success_result(
        cfg,
        project_dir=project_dir,
        qml_dir=qml_dir,
        staging_root=staging_root,
        closure=closure_list,
        reduced=reduced,
        staged=staged,
        summary_extra=summary,
    )
