"""Orchestrator: classify → build tree → serialize → write report."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from archzoom.assemble import assemble
from archzoom.config import read_context
from archzoom.context import VisualizationContext
from archzoom.errors import ExportError
from archzoom.importer import load_classes
from archzoom.model import CodeUnit
from archzoom.renderer.assets import copy_assets
from archzoom.renderer.document import tree_to_json

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "classes.json"


def export(
    imported: Iterable[CodeUnit],
    output_dir: Path,
    context: VisualizationContext | None = None,
) -> None:
    """Write the report for *imported* into *output_dir*.

    The document is written last, and atomically, so its presence means the
    assets next to it are complete.
    """
    root = assemble(imported, context)
    document = tree_to_json(root)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Could not create output directory ({e})", output_dir) from e

    # A document from an earlier run must not vouch for half-copied assets.
    document_path = output_dir / DOCUMENT_NAME
    try:
        document_path.unlink(missing_ok=True)
    except OSError as e:
        raise ExportError(f"Could not remove stale document ({e})", document_path) from e

    copy_assets(output_dir)

    partial_path = document_path.with_name(DOCUMENT_NAME + ".part")
    try:
        partial_path.write_text(document, encoding="utf-8")
        partial_path.replace(document_path)
    except OSError as e:
        with contextlib.suppress(OSError):
            partial_path.unlink(missing_ok=True)
        raise ExportError(f"Could not write document ({e})", document_path) from e

    logger.info("Generated %s", document_path)


def run(
    classes_path: Path,
    *,
    output_dir: Path | None = None,
    include_only: list[str] | None = None,
    ignore_super_constructor: bool | None = None,
    config_dir: Path | None = None,
    open_browser: bool = False,
) -> Path:
    """Run the full archzoom pipeline and return the document path."""
    context = read_context(config_dir) if config_dir else VisualizationContext()
    if include_only:
        context = replace(context, include_only=frozenset(include_only))
    if ignore_super_constructor is not None:
        context = context.with_ignore_access_to_super_constructor(
            ignore_super_constructor
        )
    logger.debug("Context: %s", context)

    imported = load_classes(classes_path)
    out_dir = output_dir or Path("archzoom-report")
    export(imported, out_dir, context)

    if open_browser:
        import webbrowser

        webbrowser.open((out_dir / "index.html").resolve().as_uri())

    return out_dir / DOCUMENT_NAME
