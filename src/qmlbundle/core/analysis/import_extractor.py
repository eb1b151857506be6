from __future__ import annotations

"""
QML Import Extractor.

Recognizes toolkit import declarations in QML sources and turns them into
module references. Only the leading line shape is interpreted; everything
after the major version (minor version, qualifier, trailing comment) is
ignored.
"""

import re
from typing import Iterable, Iterator, Optional

from qmlbundle.core.pipeline.components.reader import stream_file_content
from qmlbundle.domain.constants import QT_MODULE_PREFIX
from qmlbundle.domain.module_models import ModuleReference

# 'import QtQuick.Controls 2.11 as QQC2' -> ('QtQuick.Controls', '2')
IMPORT_PATTERN: re.Pattern = re.compile(
    r"^import\s+(" + re.escape(QT_MODULE_PREFIX) + r"[\w.]+)\s+(\d+).*$"
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_import_line(line: str) -> Optional[ModuleReference]:
    """
    Parse a single source line.

    Args:
        line: Raw line, surrounding whitespace allowed.

    Returns:
        Optional[ModuleReference]: The reference, or None when the line is
        not a versioned toolkit import.
    """
    match = IMPORT_PATTERN.match(line.strip())
    if match is None:
        return None
    return ModuleReference(name=match.group(1), major_version=int(match.group(2)))


def extract_imports(lines: Iterable[str]) -> Iterator[ModuleReference]:
    """
    Lazily extract module references from a stream of lines.

    Args:
        lines: Lines of one QML file.

    Yields:
        ModuleReference: One per matching import declaration, in file order.
    """
    for line in lines:
        ref = parse_import_line(line)
        if ref is not None:
            yield ref


def extract_imports_from_text(text: str) -> Iterator[ModuleReference]:
    """Extract module references from the full content of a QML file."""
    return extract_imports(text.splitlines())


def extract_imports_from_file(file_path: str) -> Iterator[ModuleReference]:
    """
    Extract module references from a QML file on disk.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return extract_imports(stream_file_content(file_path))
