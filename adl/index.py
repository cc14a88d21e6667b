"""
Index rebuilder for Adl.

Regenerates ``adr/README.md`` from a timestamp and the list of ADR
records. The index is never updated in place; it is rewritten in full
every time.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import Iterable

from .config import AdlConfig
from .render import INDEX_TEMPLATE, render_template
from .scanner import list_adr_files

logger = logging.getLogger(__name__)


def format_http_date(now: datetime | None = None) -> str:
    """Format a time as an HTTP date, e.g. ``Tue, 15 Nov 1994 08:12:31 GMT``."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return format_datetime(now.astimezone(timezone.utc), usegmt=True)


def format_links(filenames: Iterable[str]) -> str:
    """One markdown list item per file, linking to the file itself."""
    return "\n".join(f" - [{name}]({name})" for name in filenames)


def rebuild_index(
    filenames: Iterable[str],
    config: AdlConfig | None = None,
    now: datetime | None = None,
) -> Path:
    """
    Overwrite the index with links to the given ADR records.

    The file names are listed in the order given; callers pass the
    already sorted output of :func:`adl.scanner.list_adr_files`.

    Args:
        filenames: ADR record file names
        config: Directory layout (defaults to the current directory)
        now: Timestamp to record (defaults to the current time)

    Returns:
        Path of the written index

    Raises:
        OSError: If the index cannot be written.
    """
    if config is None:
        config = AdlConfig.from_cwd()

    contents = render_template(
        INDEX_TEMPLATE,
        timestamp=format_http_date(now),
        contents=format_links(filenames),
    )

    config.index_path.write_text(contents, encoding="utf-8")
    logger.debug("Wrote index %s", config.index_path)
    return config.index_path


def regenerate_index(config: AdlConfig | None = None) -> Path:
    """Scan the ADR directory and rebuild the index from what is there."""
    if config is None:
        config = AdlConfig.from_cwd()
    return rebuild_index(list_adr_files(config.adr_dir), config)
