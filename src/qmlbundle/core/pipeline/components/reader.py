from __future__ import annotations

"""
Markup Source Reading Component.

Streams QML sources line by line. Undecodable byte sequences are replaced
rather than raised so a stray Latin-1 comment does not abort discovery;
failures to open or read the file still propagate to the caller.
"""

from typing import Iterator

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_content(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Args:
        file_path: Absolute path to the target file.

    Yields:
        str: Lines from the file, line terminators included.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line
