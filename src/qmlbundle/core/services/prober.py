from __future__ import annotations

"""
QML Module Directory Prober.

Maps a module reference onto the directory that hosts it under the
toolkit's QML root. Qt distributions version at most one path segment
('QtQuick/Controls.2', 'QtQuick.2', 'QtQml/Models.2') and sometimes none
at all ('QtQuick/Layouts'), so each reference is tested against an ordered
list of layout hypotheses and the first existing directory wins.
"""

import logging
import os
from typing import Callable, Iterator, Optional, Sequence, Tuple

from qmlbundle.domain.module_models import ModuleReference
from qmlbundle.infra.fs import absolute_dir, dir_exists

logger = logging.getLogger(__name__)

# A hypothesis yields candidate relative layouts, as path segments, in preference order
LayoutHypothesis = Callable[[ModuleReference], Iterator[Tuple[str, ...]]]

# -----------------------------------------------------------------------------
# LAYOUT HYPOTHESES
# -----------------------------------------------------------------------------

def versioned_segment_layouts(ref: ModuleReference) -> Iterator[Tuple[str, ...]]:
    """
    Layouts with the '.<major>' suffix on exactly one segment, last segment first.

    'QtQuick.Controls' 2 yields ('QtQuick', 'Controls.2') then ('QtQuick.2', 'Controls').
    """
    segments = ref.segments
    suffix = f".{ref.major_version}"
    for i in range(len(segments) - 1, -1, -1):
        parts = list(segments)
        parts[i] += suffix
        yield tuple(parts)


def unversioned_layout(ref: ModuleReference) -> Iterator[Tuple[str, ...]]:
    """The bare layout, no version suffix anywhere."""
    yield ref.segments


DEFAULT_LAYOUT_HYPOTHESES: Tuple[LayoutHypothesis, ...] = (
    versioned_segment_layouts,
    unversioned_layout,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def candidate_layouts(
        ref: ModuleReference,
        hypotheses: Sequence[LayoutHypothesis] = DEFAULT_LAYOUT_HYPOTHESES,
) -> Iterator[Tuple[str, ...]]:
    """
    Enumerate every candidate relative layout for a reference, in probe order.

    Args:
        ref: Module reference to place.
        hypotheses: Ordered layout hypotheses.

    Yields:
        Tuple[str, ...]: Path segments relative to the QML root.
    """
    for hypothesis in hypotheses:
        yield from hypothesis(ref)


def probe_module_dir(
        qml_dir: str,
        ref: ModuleReference,
        hypotheses: Sequence[LayoutHypothesis] = DEFAULT_LAYOUT_HYPOTHESES,
) -> Optional[str]:
    """
    Locate the directory hosting a module under the QML root.

    Args:
        qml_dir: Toolkit QML module root.
        ref: Module reference to locate.
        hypotheses: Ordered layout hypotheses.

    Returns:
        Optional[str]: Directory path under qml_dir, symbolic links left
        unresolved, or None if the module is not available under the root
        (project-local or third-party modules).
    """
    root = absolute_dir(qml_dir)
    if not all(ref.segments):
        logger.debug(f"Skipping malformed module name '{ref.name}'")
        return None

    for parts in candidate_layouts(ref, hypotheses):
        candidate = os.path.join(root, *parts)
        if dir_exists(candidate):
            logger.debug(f"Resolved {ref.name} {ref.major_version} -> {candidate}")
            return candidate

    logger.debug(f"Module {ref.name} {ref.major_version} not found under {qml_dir}")
    return None
