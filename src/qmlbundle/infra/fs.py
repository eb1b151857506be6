from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, existence checks and the
staging layout used when copying QML modules. Acts as an abstraction over
the 'os' module to ensure uniform behavior across Windows and Unix-like
systems.
"""

import os
from typing import Optional, Tuple

from qmlbundle.domain.constants import FLAT_LAYOUT_PLATFORMS, QML_STAGING_SUBDIR

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_OUTPUT_SUBDIR = "dist"
APP_DIR_NAME = "QmlBundle"
UNIX_APP_DIR_NAME = ".qmlbundle"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/QmlBundle
    - Linux/Mac: ~/.qmlbundle

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def absolute_dir(path: str) -> str:
    """Absolute, normalized spelling of a directory. Symbolic links are kept."""
    return os.path.normpath(os.path.abspath(path))


def canonical_dir(path: str) -> str:
    """
    Canonical identity of a directory.

    Resolves symbolic links and strips trailing separators so the same
    directory reached through different spellings compares equal.
    """
    return os.path.realpath(os.path.abspath(path))


def get_staging_root(output_dir: str, target_os: str) -> str:
    """
    Directory that receives QML module trees inside a distribution.

    Args:
        output_dir: Root of the distribution tree.
        target_os: Normalized platform identity.

    Returns:
        str: '<output_dir>' on flat-layout platforms, '<output_dir>/qml' elsewhere.
    """
    if target_os in FLAT_LAYOUT_PLATFORMS:
        return output_dir
    return os.path.join(output_dir, QML_STAGING_SUBDIR)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def dir_exists(path: str) -> bool:
    """Check that a path exists and is a directory."""
    return os.path.isdir(path)


def file_exists(path: str) -> bool:
    """Check that a path exists and is not a directory."""
    return os.path.exists(path) and not os.path.isdir(path)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
