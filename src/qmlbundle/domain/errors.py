from __future__ import annotations

"""
Domain Error Taxonomy.

Hard failures of the deployment process. Unresolvable module references
are not errors and never reach this hierarchy.
"""

from typing import Optional


class QmlBundleError(Exception):
    """Base class for every deployment failure raised by this package."""


class MissingSourceRootError(QmlBundleError):
    """A directory handed to the scanner does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"directory {path} does not exist")
        self.path = path


class StagingError(QmlBundleError):
    """Copying a module directory into the output tree failed."""

    def __init__(self, source: str, destination: str, reason: Optional[str] = None) -> None:
        msg = f"failed to stage {source} into {destination}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.source = source
        self.destination = destination


class QtEnvironmentError(QmlBundleError):
    """The toolkit's QML module directory could not be located."""
