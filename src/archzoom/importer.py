"""Read class descriptors dumped by an external bytecode importer.

The dump is a JSON list (or an object with a ``classes`` list) of::

    {
      "name": "com.acme.Foo$Bar",
      "simpleName": "Bar",              # optional
      "package": "com.acme",            # optional
      "enclosingClass": "com.acme.Foo", # only for inner classes
      "type": "class",                  # optional
      "dependencies": [
        {
          "target": "com.acme.Baz",
          "inheritance": "extends",     # optional
          "calls": [
            {"startCodeUnit": "run()", "targetElement": "Baz()",
             "kind": "constructorCall", "superConstructor": true}
          ]
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from archzoom.errors import ImportFormatError
from archzoom.model import CallSite, CodeUnit, Dependency, split_class_name

logger = logging.getLogger(__name__)


def load_classes(path: Path) -> list[CodeUnit]:
    """Parse the descriptor dump at *path*."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ImportFormatError(f"Could not read class descriptors: {e}", path) from e
    except json.JSONDecodeError as e:
        raise ImportFormatError(f"Invalid JSON: {e}", path) from e

    if isinstance(data, dict):
        data = data.get("classes")
    if not isinstance(data, list):
        raise ImportFormatError("Expected a list of class descriptors", path)

    units = [parse_unit(entry, path) for entry in data]
    logger.debug("loaded %d class descriptors from %s", len(units), path)
    return units


def parse_unit(entry: object, path: Path | None = None) -> CodeUnit:
    """Build a :class:`CodeUnit` from one descriptor object."""
    if not isinstance(entry, dict):
        raise ImportFormatError(f"Class descriptor is not an object: {entry!r}", path)
    name = _string(entry, "name", path)
    enclosing = _optional_string(entry, "enclosingClass", path)
    package, simple_name = split_class_name(name)
    declared_package = _optional_string(entry, "package", path, empty_ok=True)
    if declared_package is not None:
        package = declared_package
    if enclosing is not None:
        simple_name = name.rsplit("$", 1)[-1]

    dependencies = tuple(
        _parse_dependency(name, dep, path) for dep in _list(entry, "dependencies", path)
    )
    return CodeUnit(
        name=name,
        simple_name=_optional_string(entry, "simpleName", path) or simple_name,
        package=package,
        enclosing=enclosing,
        dependencies=dependencies,
        kind=_optional_string(entry, "type", path) or "class",
    )


def _parse_dependency(origin: str, entry: object, path: Path | None) -> Dependency:
    if not isinstance(entry, dict):
        raise ImportFormatError(f"Dependency of {origin} is not an object", path)
    calls = tuple(
        CallSite(
            origin=_string(call, "startCodeUnit", path),
            target=_string(call, "targetElement", path),
            kind=_optional_string(call, "kind", path) or "methodCall",
            super_constructor=bool(call.get("superConstructor", False)),
        )
        for call in _list(entry, "calls", path)
    )
    return Dependency(
        origin=origin,
        target=_string(entry, "target", path),
        call_sites=calls,
        inheritance=_optional_string(entry, "inheritance", path),
    )


def _string(entry: object, key: str, path: Path | None) -> str:
    value = entry.get(key) if isinstance(entry, dict) else None
    if not isinstance(value, str) or not value:
        raise ImportFormatError(f"Missing or invalid {key!r} in {entry!r}", path)
    return value


def _optional_string(
    entry: dict, key: str, path: Path | None, *, empty_ok: bool = False
) -> str | None:
    if key not in entry:
        return None
    value = entry[key]
    if not isinstance(value, str) or (not value and not empty_ok):
        raise ImportFormatError(f"Invalid {key!r} in {entry!r}", path)
    return value


def _list(entry: dict, key: str, path: Path | None) -> list:
    value = entry.get(key, [])
    if not isinstance(value, list):
        raise ImportFormatError(f"{key!r} must be a list in {entry!r}", path)
    return value
