"""
ADR generator for Adl.

Renders a new ADR record from the embedded template and writes it to
``adr/{sequence:05d}-{slug}.md``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import AdlConfig
from .render import ADR_TEMPLATE, render_template

logger = logging.getLogger(__name__)

# Replaced with "-" when deriving a file name from a title
SLUG_SEPARATORS = (" ", "/", "\\")


def slugify(title: str) -> str:
    """Replace spaces and path separators in a title with hyphens.

    Nothing else is touched: case, repeated separators and other
    punctuation are kept as typed.
    """
    slug = title
    for ch in SLUG_SEPARATORS:
        slug = slug.replace(ch, "-")
    return slug


def adr_filename(sequence_number: int, title: str) -> str:
    """File name of the ADR, e.g. ``00003-Use-PostgreSQL.md``."""
    return f"{sequence_number:05d}-{slugify(title)}.md"


def adr_heading(sequence_number: int, title: str) -> str:
    """Heading of the ADR, e.g. ``00003 - Use PostgreSQL``."""
    return f"{sequence_number:05d} - {title}"


def create_adr(
    sequence_number: int,
    title: str,
    config: AdlConfig | None = None,
) -> Path:
    """
    Write a new ADR record.

    An existing file with the same name is overwritten.

    Args:
        sequence_number: Number of ADR records present before this one
        title: Human readable title, used verbatim in the heading
        config: Directory layout (defaults to the current directory)

    Returns:
        Path of the written file

    Raises:
        ValueError: If the sequence number is negative or the title is empty.
        OSError: If the file cannot be written.
    """
    if sequence_number < 0:
        raise ValueError(f"Sequence number must be non-negative: {sequence_number}")
    if not title:
        raise ValueError("ADR title must not be empty")

    if config is None:
        config = AdlConfig.from_cwd()

    path = config.adr_dir / adr_filename(sequence_number, title)
    contents = render_template(ADR_TEMPLATE, name=adr_heading(sequence_number, title))

    if path.exists():
        logger.info("Overwriting existing ADR: %s", path)
    path.write_text(contents, encoding="utf-8")
    logger.debug("Wrote ADR %s", path)
    return path
