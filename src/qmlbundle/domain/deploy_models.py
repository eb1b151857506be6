from __future__ import annotations

"""
Deployment Domain Data Models.

Defines the result object and factory functions used to communicate the
outcome of a deployment run between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DeploymentResult:
    """
    Unified result object of a complete deployment run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        project_dir: Normalized project root.
        qml_dir: Module-library root the closure was resolved against.
        output_dir: Root of the distribution tree.
        target_os: Platform identity the layout was computed for.
        staging_root: Directory receiving the module trees.
        dry_run: Whether copying was skipped.
        closure: Every module directory transitively required.
        reduced: Closure entries left after ancestor reduction.
        staged: Destination directories actually written.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    project_dir: str
    qml_dir: str
    output_dir: str
    target_os: str

    staging_root: str = ""
    dry_run: bool = False

    closure: List[str] = field(default_factory=list)
    reduced: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        project_dir: str = "",
        qml_dir: str = "",
        staging_root: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> DeploymentResult:
    """
    Create a failed deployment result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        project_dir: Normalized project root, when already known.
        qml_dir: Resolved module-library root, when already known.
        staging_root: Computed staging directory, when already known.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        DeploymentResult: An immutable error result object.
    """
    return DeploymentResult(
        ok=False,
        error=error,
        project_dir=project_dir or cfg.get("project_dir", ""),
        qml_dir=qml_dir or cfg.get("qml_dir", ""),
        output_dir=cfg.get("output_dir", ""),
        target_os=cfg.get("target_os", ""),
        staging_root=staging_root,
        dry_run=bool(cfg.get("dry_run", False)),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        project_dir: str,
        qml_dir: str,
        staging_root: str,
        closure: List[str],
        reduced: List[str],
        staged: List[str],
        summary_extra: Optional[Dict[str, Any]] = None
) -> DeploymentResult:
    """
    Create a successful deployment result instance.

    Args:
        cfg: Final configuration used during execution.
        project_dir: Normalized project root.
        qml_dir: Resolved module-library root.
        staging_root: Directory receiving the module trees.
        closure: Sorted dependency closure.
        reduced: Sorted reduced closure.
        staged: Destination directories written.
        summary_extra: Final execution metrics.

    Returns:
        DeploymentResult: An immutable success result object.
    """
    return DeploymentResult(
        ok=True,
        error="",
        project_dir=project_dir,
        qml_dir=qml_dir,
        output_dir=cfg.get("output_dir", ""),
        target_os=cfg.get("target_os", ""),
        staging_root=staging_root,
        dry_run=bool(cfg.get("dry_run", False)),
        closure=closure,
        reduced=reduced,
        staged=staged,
        summary=summary_extra or {},
    )
