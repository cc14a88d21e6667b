"""Directory scanning for ADR records."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import RESERVED_NAMES

logger = logging.getLogger(__name__)


def _display_name(name: str) -> str:
    """Decode a file name as UTF-8, replacing bytes that are not valid text."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def list_adr_files(directory: Path) -> list[str]:
    """
    List the ADR record file names in a directory.

    ``README.md`` and ``assets`` are excluded by exact name. Every other
    entry counts, whatever its type.

    Args:
        directory: The ADR directory to scan

    Returns:
        File names sorted in ascending code point order. Zero padded
        sequence prefixes make this the creation order.

    Raises:
        OSError: If the directory is missing or cannot be read.
    """
    file_list = []
    for entry in Path(directory).iterdir():
        if entry.name in RESERVED_NAMES:
            continue
        file_list.append(_display_name(entry.name))

    file_list.sort()
    logger.debug("Found %d ADR(s) in %s", len(file_list), directory)
    return file_list
