from __future__ import annotations

"""
Dependency Closure Reduction.

Drops every closure entry nested inside another entry, since copying the
ancestor already carries the descendant. Paths are compared segment by
segment so 'QtQuick' never swallows its sibling 'QtQuick.2'.
"""

import os
from pathlib import PurePath
from typing import Dict, Iterable, List, Tuple


def path_segments(path: str) -> Tuple[str, ...]:
    """Normalized path components ('/a/b/' -> ('/', 'a', 'b'))."""
    return PurePath(os.path.normcase(os.path.normpath(path))).parts


def is_ancestor(ancestor: str, path: str) -> bool:
    """
    Check whether a directory strictly contains another.

    Args:
        ancestor: Candidate containing directory.
        path: Candidate nested path.

    Returns:
        bool: True if ancestor's segments are a strict prefix of path's.
    """
    outer = path_segments(ancestor)
    inner = path_segments(path)
    return len(outer) < len(inner) and inner[:len(outer)] == outer


def reduce_closure(paths: Iterable[str]) -> List[str]:
    """
    Remove entries whose ancestor is also present.

    Args:
        paths: Dependency closure (absolute directories).

    Returns:
        List[str]: Reduced closure, sorted; equivalent spellings of one
        directory collapse into a single entry.
    """
    by_segments: Dict[Tuple[str, ...], str] = {}
    for path in sorted(paths):
        by_segments.setdefault(path_segments(path), path)

    reduced: List[str] = []
    for segments, path in by_segments.items():
        nested = any(segments[:i] in by_segments for i in range(1, len(segments)))
        if not nested:
            reduced.append(path)
    return sorted(reduced)
