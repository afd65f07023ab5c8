"""Exceptions raised by archzoom."""

from __future__ import annotations

from pathlib import Path


class ArchzoomError(Exception):
    """Base class for all archzoom failures."""


class MissingEnclosingClassError(ArchzoomError):
    """An inner class refers to an enclosing class that was never imported."""

    def __init__(self, class_name: str, enclosing_name: str):
        super().__init__(
            f"Enclosing class {enclosing_name!r} of {class_name!r} "
            "is not part of the imported classes"
        )
        self.class_name = class_name
        self.enclosing_name = enclosing_name


class ExportError(ArchzoomError):
    """The report could not be written to disk."""

    def __init__(self, message: str, path: Path):
        super().__init__(f"{message}: {path}")
        self.path = path


class ImportFormatError(ArchzoomError):
    """A class descriptor dump could not be understood."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(f"{message} ({path})" if path is not None else message)
        self.path = path
