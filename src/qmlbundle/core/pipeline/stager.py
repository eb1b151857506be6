from __future__ import annotations

"""
Selective Module Stager.

Copies reduced closure entries into the distribution tree, keeping each
module's path relative to the QML root and filtering files through the
staging predicate. Entries of a reduced closure are disjoint subtrees, so
they may be copied concurrently.
"""

import logging
import os
import shutil
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, Set

from qmlbundle.core.pipeline.components.filters import should_skip_file
from qmlbundle.core.services.reducer import is_ancestor
from qmlbundle.domain.errors import StagingError
from qmlbundle.infra.fs import absolute_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def staging_destination(module_dir: str, qml_dir: str, staging_root: str) -> str:
    """
    Destination of a module directory inside the staging root.

    The relative path is taken from the path as probed under the QML root,
    so a module that is a symbolic link keeps its place in the layout.

    Raises:
        StagingError: If the module does not live under the QML root.
    """
    root = absolute_dir(qml_dir)
    source = absolute_dir(module_dir)
    if not is_ancestor(root, source):
        raise StagingError(module_dir, staging_root, f"not inside QML root {qml_dir}")
    return os.path.join(staging_root, os.path.relpath(source, root))


def stage_module(module_dir: str, qml_dir: str, staging_root: str, target_os: str) -> str:
    """
    Copy one module directory into the staging root.

    Args:
        module_dir: Module directory inside the QML root.
        qml_dir: Toolkit QML module root.
        staging_root: Directory receiving module trees.
        target_os: Target platform identity.

    Returns:
        str: Destination directory.

    Raises:
        StagingError: On any copy failure; files already written stay in place.
    """
    destination = staging_destination(module_dir, qml_dir, staging_root)
    logger.debug(f"Staging {module_dir} -> {destination}")
    try:
        shutil.copytree(
            module_dir,
            destination,
            ignore=_build_ignore(target_os),
            dirs_exist_ok=True,
        )
    except (shutil.Error, OSError) as e:
        raise StagingError(module_dir, destination, str(e)) from e
    return destination


def stage_modules(
        reduced: Sequence[str],
        qml_dir: str,
        staging_root: str,
        target_os: str,
        *,
        workers: int = 1,
) -> List[str]:
    """
    Copy every reduced closure entry into the staging root.

    Args:
        reduced: Reduced closure.
        qml_dir: Toolkit QML module root.
        staging_root: Directory receiving module trees.
        target_os: Target platform identity.
        workers: Number of concurrent copies.

    Returns:
        List[str]: Destination directories, in the order of 'reduced'.

    Raises:
        StagingError: On the first copy failure.
    """
    if workers <= 1 or len(reduced) <= 1:
        return [stage_module(m, qml_dir, staging_root, target_os) for m in reduced]

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="Stager") as executor:
        futures = [
            executor.submit(stage_module, m, qml_dir, staging_root, target_os)
            for m in reduced
        ]
        return [f.result() for f in futures]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _build_ignore(target_os: str) -> Callable[[str, List[str]], Set[str]]:
    """Adapt the staging predicate to shutil.copytree's ignore protocol."""
    def ignore(directory: str, names: List[str]) -> Set[str]:
        skipped: Set[str] = set()
        for name in names:
            path = os.path.join(directory, name)
            if not os.path.isdir(path) and should_skip_file(path, target_os):
                logger.debug(f"Skipping {path}")
                skipped.add(name)
        return skipped

    return ignore
