"""Serialize a package tree into the JSON document read by the report."""

from __future__ import annotations

import json

from archzoom.model import ClassNode, DependencyEntry, PackageNode


def _dependency_to_dict(dep: DependencyEntry) -> dict:
    d: dict = {
        "to": dep.to,
        "callSites": [
            {
                "startCodeUnit": call.origin,
                "targetElement": call.target,
                "kind": call.kind,
            }
            for call in dep.call_sites
        ],
    }
    if dep.inheritance is not None:
        d["inheritance"] = dep.inheritance
    return d


def _class_to_dict(cls: ClassNode) -> dict:
    return {
        "name": cls.name,
        "fullname": cls.fullname,
        "type": cls.kind,
        "innerClasses": [_class_to_dict(c) for c in cls.inner_classes],
        "dependencies": [_dependency_to_dict(d) for d in cls.dependencies],
    }


def tree_to_dict(root: PackageNode) -> dict:
    """Convert *root* and everything below it into plain JSON data."""
    return {
        "name": root.name,
        "fullname": root.fullname,
        "type": "package",
        "subpackages": [tree_to_dict(p) for p in root.subpackages],
        "classes": [_class_to_dict(c) for c in root.classes],
    }


def tree_to_json(root: PackageNode) -> str:
    return json.dumps(tree_to_dict(root), indent=2)
