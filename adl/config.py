"""
Directory layout for Adl.

Adl reads no configuration files or environment variables. Every path it
touches is derived from the working root:

- adr/            ADR records and the generated index
- adr/README.md   generated index
- adr/assets/     reserved, excluded from scans
- assets/         created on every create/regen
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ADR_DIR_NAME = "adr"
INDEX_NAME = "README.md"
ASSETS_DIR_NAME = "assets"

# Entries of adr/ that are never ADR records
RESERVED_NAMES = frozenset({INDEX_NAME, ASSETS_DIR_NAME})


@dataclass(frozen=True)
class AdlConfig:
    """Paths used by a single Adl invocation."""
    root: Path

    @property
    def adr_dir(self) -> Path:
        return self.root / ADR_DIR_NAME

    @property
    def index_path(self) -> Path:
        return self.adr_dir / INDEX_NAME

    @property
    def assets_dir(self) -> Path:
        return self.root / ASSETS_DIR_NAME

    @property
    def adr_assets_dir(self) -> Path:
        return self.adr_dir / ASSETS_DIR_NAME

    @classmethod
    def from_cwd(cls) -> "AdlConfig":
        """Build the layout rooted at the current working directory."""
        return cls(root=Path.cwd())


def ensure_dirs_exist(config: AdlConfig) -> None:
    """
    Create the asset directories.

    ``assets/`` is always created (recursively). ``adr/assets/`` is only
    created when ``adr/`` already exists; ``adr/`` itself is never created,
    so a missing ADR directory still surfaces when it is scanned.

    Raises:
        OSError: If a directory cannot be created.
    """
    config.assets_dir.mkdir(parents=True, exist_ok=True)
    logger.debug("Ensured %s", config.assets_dir)

    if config.adr_dir.is_dir():
        config.adr_assets_dir.mkdir(exist_ok=True)
        logger.debug("Ensured %s", config.adr_assets_dir)
