from __future__ import annotations

"""
Staging File Filters.

Decides which files of a QML module are left out of a distribution:
compiled caches that the runtime regenerates, and debug builds of shared
libraries whose release build ships alongside them.
"""

import os
from typing import Iterator

from qmlbundle.domain.constants import (
    CACHE_ARTIFACT_EXTENSIONS,
    DEBUG_LIBRARY_SUFFIXES,
    DEFAULT_SHARED_LIBRARY_EXTENSION,
    SHARED_LIBRARY_EXTENSIONS,
)
from qmlbundle.infra.fs import file_exists

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def shared_library_extension(target_os: str) -> str:
    """Shared library extension used on a platform ('.dll', '.dylib', '.so')."""
    return SHARED_LIBRARY_EXTENSIONS.get(target_os, DEFAULT_SHARED_LIBRARY_EXTENSION)


def is_cache_artifact(file_name: str) -> bool:
    """
    Classify a file as a compiled QML/JavaScript cache.

    Args:
        file_name: Target filename.

    Returns:
        bool: True for '.qmlc' and '.jsc' files.
    """
    _, ext = os.path.splitext(file_name)
    return ext.lower() in CACHE_ARTIFACT_EXTENSIONS


def release_counterparts(file_name: str, library_ext: str) -> Iterator[str]:
    """
    Names the release build of a debug library could have.

    'bar_d.dll' yields 'bar.dll' then 'bar_.dll'; a name without the
    library extension yields nothing.
    """
    if not file_name.lower().endswith(library_ext):
        return
    stem = file_name[:-len(library_ext)]
    for suffix in DEBUG_LIBRARY_SUFFIXES:
        if len(stem) > len(suffix) and stem.endswith(suffix):
            yield stem[:-len(suffix)] + file_name[len(stem):]


def is_redundant_debug_library(file_path: str, target_os: str) -> bool:
    """
    Check whether a debug library has a release build next to it.

    A debug library without a release counterpart is the only copy
    available and must be kept.

    Args:
        file_path: Absolute path of the candidate file.
        target_os: Platform identity selecting the library extension.

    Returns:
        bool: True if a release counterpart exists in the same directory.
    """
    directory, file_name = os.path.split(file_path)
    library_ext = shared_library_extension(target_os)
    return any(
        file_exists(os.path.join(directory, name))
        for name in release_counterparts(file_name, library_ext)
    )

# -----------------------------------------------------------------------------
# STAGING PREDICATE
# -----------------------------------------------------------------------------

def should_skip_file(file_path: str, target_os: str) -> bool:
    """
    Decide whether a file is left out of the staged module tree.

    Args:
        file_path: Absolute path of the file inside a module directory.
        target_os: Target platform identity.

    Returns:
        bool: True if the file must not be copied.
    """
    file_name = os.path.basename(file_path)
    if is_cache_artifact(file_name):
        return True
    return is_redundant_debug_library(file_path, target_os)
