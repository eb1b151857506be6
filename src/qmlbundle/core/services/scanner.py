from __future__ import annotations

"""
QML Source Discovery Service.

Walks a directory tree, extracts toolkit imports from every QML file and
resolves them against the QML root. Used both for the project's own
sources and for every module directory discovered afterwards.
"""

import logging
import os
from typing import Callable, Dict, Iterator, List, Optional

from qmlbundle.core.analysis.import_extractor import extract_imports_from_file
from qmlbundle.core.services.prober import probe_module_dir
from qmlbundle.domain.constants import QML_EXTENSION
from qmlbundle.domain.errors import MissingSourceRootError
from qmlbundle.domain.module_models import ModuleReference
from qmlbundle.infra.fs import dir_exists

logger = logging.getLogger(__name__)

Prober = Callable[[str, ModuleReference], Optional[str]]

# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_qml_files(source_dir: str) -> Iterator[str]:
    """
    Traverse a directory tree and yield every QML source file.

    Args:
        source_dir: Directory to walk.

    Yields:
        str: Absolute file paths, in a stable (sorted) order.

    Raises:
        OSError: If a directory in the tree cannot be listed.
    """
    for root, dirs, files in os.walk(os.path.abspath(source_dir), onerror=_raise_walk_error):
        dirs.sort()
        files.sort()
        for file_name in files:
            if os.path.splitext(file_name)[1] == QML_EXTENSION:
                yield os.path.join(root, file_name)


def scan_directory(source_dir: str) -> List[ModuleReference]:
    """
    Collect the toolkit imports declared by every QML file under a directory.

    References are coalesced by structural name: the first occurrence wins
    and later ones with another major version are dropped.

    Args:
        source_dir: Directory to scan.

    Returns:
        List[ModuleReference]: Unique references, in discovery order.

    Raises:
        MissingSourceRootError: If the directory does not exist.
        OSError: If any QML file cannot be read.
    """
    if not dir_exists(source_dir):
        raise MissingSourceRootError(source_dir)

    found: Dict[str, ModuleReference] = {}
    for qml_file in yield_qml_files(source_dir):
        for ref in extract_imports_from_file(qml_file):
            if ref.name in found:
                if found[ref.name].major_version != ref.major_version:
                    logger.debug(
                        f"Ignoring {ref.name} {ref.major_version} in {qml_file}; "
                        f"version {found[ref.name].major_version} seen first"
                    )
                continue
            found[ref.name] = ref

    return list(found.values())


def resolve_directory_dependencies(
        qml_dir: str,
        source_dir: str,
        probe: Prober = probe_module_dir,
) -> List[str]:
    """
    Resolve the module directories a directory's QML files depend on.

    Args:
        qml_dir: Toolkit QML module root.
        source_dir: Directory to scan.
        probe: Reference-to-directory resolver.

    Returns:
        List[str]: Distinct module directories; unresolvable references are
        left out.
    """
    resolved: List[str] = []
    for ref in scan_directory(source_dir):
        module_dir = probe(qml_dir, ref)
        if module_dir is not None and module_dir not in resolved:
            resolved.append(module_dir)
    return resolved

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _raise_walk_error(error: OSError) -> None:
    raise error
