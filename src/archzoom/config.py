"""Read a visualization context from .archzoom.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from archzoom.context import VisualizationContext

logger = logging.getLogger(__name__)


def read_context(project_dir: Path) -> VisualizationContext:
    """Return the context configured for *project_dir*, or the default one.

    ``.archzoom.toml`` (``[archzoom]`` table) wins over ``[tool.archzoom]``
    in ``pyproject.toml``.  Recognized keys are ``include-only`` and
    ``ignore-access-to-super-constructor``.
    """
    table = _read_table(project_dir)
    if table is None:
        return VisualizationContext()

    include_only = table.get("include-only", [])
    if not isinstance(include_only, list) or not all(
        isinstance(p, str) for p in include_only
    ):
        logger.warning("Ignoring include-only: expected a list of strings")
        include_only = []

    ignore = table.get("ignore-access-to-super-constructor", False)
    if not isinstance(ignore, bool):
        logger.warning("Ignoring ignore-access-to-super-constructor: expected a boolean")
        ignore = False

    return VisualizationContext(
        include_only=frozenset(include_only),
        ignore_access_to_super_constructor=ignore,
    )


def _read_table(project_dir: Path) -> dict | None:
    archzoom_toml = project_dir / ".archzoom.toml"
    if archzoom_toml.exists():
        try:
            with open(archzoom_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("archzoom", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Could not read %s: %s", archzoom_toml, e)

    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("archzoom")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Could not read %s: %s", pyproject, e)

    return None
