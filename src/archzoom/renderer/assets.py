"""Copy the static report front-end next to the generated document."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from archzoom.errors import ExportError

logger = logging.getLogger(__name__)

_ASSETS_DIR = Path(__file__).with_name("report")


def asset_files() -> list[Path]:
    """Return the files of the bundled report, sorted by name."""
    if not _ASSETS_DIR.is_dir():
        raise ExportError("Report assets not found", _ASSETS_DIR)
    return sorted(p for p in _ASSETS_DIR.iterdir() if p.is_file())


def copy_assets(target_dir: Path) -> list[Path]:
    """Copy every report asset into *target_dir* and return the copies."""
    copied: list[Path] = []
    for asset in asset_files():
        destination = target_dir / asset.name
        try:
            shutil.copyfile(asset, destination)
        except OSError as e:
            raise ExportError(f"Could not copy report asset ({e})", destination) from e
        copied.append(destination)
    logger.debug("copied %d report assets to %s", len(copied), target_dir)
    return copied
