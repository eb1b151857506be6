from __future__ import annotations

"""
Module Resolution Domain Models.

Defines the value objects that flow through dependency discovery: the
module reference parsed from an import line and the closure record
produced by the breadth-first traversal.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

# -----------------------------------------------------------------------------
# REFERENCE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ModuleReference:
    """
    A module named by an import declaration.

    Attributes:
        name: Dotted structural name, e.g. 'QtQuick.Controls'.
        major_version: Major version token of the import ('2' in '2.11').
    """
    name: str
    major_version: int

    @property
    def segments(self) -> Tuple[str, ...]:
        """Dot-separated path segments of the structural name."""
        return tuple(self.name.split("."))

# -----------------------------------------------------------------------------
# CLOSURE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DependencyClosure:
    """
    Outcome of a closure computation.

    Attributes:
        modules: Normalized absolute module directories transitively required.
        visited: Directories scanned, in traversal order (seeds included).
    """
    modules: FrozenSet[str] = field(default_factory=frozenset)
    visited: Tuple[str, ...] = ()

    def __contains__(self, path: object) -> bool:
        return path in self.modules

    def __len__(self) -> int:
        return len(self.modules)
