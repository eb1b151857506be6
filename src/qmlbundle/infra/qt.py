from __future__ import annotations

"""
Qt Installation Discovery.

Locates the toolkit's QML module root through qmake when it is not
configured explicitly.
"""

import logging
import os
import subprocess
from typing import Any, Dict

from qmlbundle.domain.errors import QtEnvironmentError
from qmlbundle.infra.fs import dir_exists, normalize_path

logger = logging.getLogger(__name__)

QML_INSTALL_PROPERTY = "QT_INSTALL_QML"
QMAKE_TIMEOUT_SECONDS = 30

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def query_qml_dir(qmake_path: str) -> str:
    """
    Ask qmake where the QML modules of its Qt installation live.

    Args:
        qmake_path: qmake executable (name on PATH or absolute path).

    Returns:
        str: Absolute QML module root.

    Raises:
        QtEnvironmentError: If qmake cannot be run or reports no usable directory.
    """
    cmd = [qmake_path, "-query", QML_INSTALL_PROPERTY]
    logger.debug(f"Querying Qt installation: {' '.join(cmd)}")
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=QMAKE_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise QtEnvironmentError(f"failed to run {qmake_path}: {e}") from e

    if proc.returncode != 0:
        detail = (proc.stderr or "").strip() or f"exit code {proc.returncode}"
        raise QtEnvironmentError(f"{qmake_path} -query {QML_INSTALL_PROPERTY} failed: {detail}")

    qml_dir = (proc.stdout or "").strip()
    if not qml_dir or not dir_exists(qml_dir):
        raise QtEnvironmentError(f"qmake reported an invalid QML directory: '{qml_dir}'")

    return os.path.abspath(qml_dir)


def resolve_qml_dir(cfg: Dict[str, Any]) -> str:
    """
    Determine the QML module root for a validated configuration.

    An explicit 'qml_dir' wins; otherwise qmake is queried.

    Raises:
        QtEnvironmentError: If no existing QML root can be determined.
    """
    explicit = (cfg.get("qml_dir") or "").strip()
    if explicit:
        qml_dir = normalize_path(explicit, os.getcwd())
        if not dir_exists(qml_dir):
            raise QtEnvironmentError(f"QML directory {qml_dir} does not exist")
        return qml_dir

    return query_qml_dir(cfg.get("qmake_path") or "qmake")
