from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the fixed tokens of the QML module conventions: markup and
cache extensions, the project resource directory, the staging layout
and the per-platform shared library naming rules.
"""

from typing import Dict, FrozenSet, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# MARKUP SOURCES
# -----------------------------------------------------------------------------

QML_EXTENSION = ".qml"

# Only modules under this prefix belong to the toolkit's standard library
QT_MODULE_PREFIX = "Qt"

DEFAULT_RESOURCE_DIR = "res"

# -----------------------------------------------------------------------------
# STAGING LAYOUT
# -----------------------------------------------------------------------------

QML_STAGING_SUBDIR = "qml"

# Platforms whose bundles keep QML modules next to the executable
FLAT_LAYOUT_PLATFORMS: FrozenSet[str] = frozenset({"windows"})

SUPPORTED_PLATFORMS: Tuple[str, ...] = ("windows", "linux", "darwin")

PLATFORM_ALIASES: Dict[str, str] = {
    "windows": "windows",
    "win": "windows",
    "win32": "windows",
    "win64": "windows",
    "cygwin": "windows",
    "linux": "linux",
    "linux2": "linux",
    "darwin": "darwin",
    "macos": "darwin",
    "osx": "darwin",
    "mac": "darwin",
}

# -----------------------------------------------------------------------------
# STAGING FILTERS
# -----------------------------------------------------------------------------

# Compiled caches of .qml and .js sources, regenerated at runtime
CACHE_ARTIFACT_EXTENSIONS: FrozenSet[str] = frozenset({".qmlc", ".jsc"})

SHARED_LIBRARY_EXTENSIONS: Dict[str, str] = {
    "windows": ".dll",
    "darwin": ".dylib",
    "linux": ".so",
}
DEFAULT_SHARED_LIBRARY_EXTENSION = ".so"

# Longest first so "_d" is tried before "d"
DEBUG_LIBRARY_SUFFIXES: Tuple[str, ...] = ("_debug", "_d", "d")
