from __future__ import annotations

"""
Dependency Closure Builder.

Breadth-first discovery over the implicit module graph: every directory
pulled from the queue is scanned for QML imports, every import is probed
under the QML root, and every newly found module directory joins the tail
of the queue. A directory is scanned at most once per run, so cyclic
imports terminate.
"""

import logging
from collections import deque
from enum import Enum
from typing import Callable, Deque, Dict, Iterable, List, Set

from qmlbundle.core.services.reducer import is_ancestor
from qmlbundle.core.services.scanner import resolve_directory_dependencies
from qmlbundle.domain.module_models import DependencyClosure
from qmlbundle.infra.fs import absolute_dir, canonical_dir, dir_exists

logger = logging.getLogger(__name__)

# (qml_dir, directory) -> module directories imported from it
DependencyResolver = Callable[[str, str], List[str]]


class DirectoryState(Enum):
    """Traversal state of a directory; directories never seen have no entry."""
    QUEUED = "queued"
    VISITED = "visited"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_closure(
        qml_dir: str,
        seeds: Iterable[str],
        resolve: DependencyResolver = resolve_directory_dependencies,
) -> DependencyClosure:
    """
    Compute every module directory transitively required by the seeds.

    Args:
        qml_dir: Toolkit QML module root.
        seeds: Starting directories, usually the project's resource dir.
        resolve: Directory-to-dependencies resolver.

    Returns:
        DependencyClosure: Required module directories and the scan order.
        A seed is part of the module set only when it lies inside qml_dir.

    Raises:
        MissingSourceRootError: If a seed or discovered directory vanished.
        OSError: If a QML file under a scanned directory cannot be read.
    """
    root = absolute_dir(qml_dir)
    # Keyed by canonical path so symlinked spellings of one directory share a state
    states: Dict[str, DirectoryState] = {}
    queue: Deque[str] = deque()
    modules: Set[str] = set()
    visited: List[str] = []

    seed_dirs = [absolute_dir(s) for s in seeds]
    for seed in seed_dirs:
        key = canonical_dir(seed)
        if key not in states:
            states[key] = DirectoryState.QUEUED
            queue.append(seed)

    while queue:
        current = queue.popleft()
        logger.debug(f"Scanning {current}")
        dependencies = resolve(root, current)
        states[canonical_dir(current)] = DirectoryState.VISITED
        visited.append(current)

        for module_dir in dependencies:
            key = canonical_dir(module_dir)
            if key not in states:
                states[key] = DirectoryState.QUEUED
                queue.append(module_dir)
                modules.add(module_dir)

    for seed in seed_dirs:
        if dir_exists(seed) and is_ancestor(root, seed):
            modules.add(seed)

    logger.info(f"Resolved {len(modules)} QML module directories after scanning {len(visited)}")
    return DependencyClosure(modules=frozenset(modules), visited=tuple(visited))
