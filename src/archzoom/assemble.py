"""Attach classified classes to the package tree."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from archzoom.classify import (
    admitted_dependencies,
    classify,
    index_classes,
    placed_inner_classes,
)
from archzoom.context import VisualizationContext
from archzoom.model import CallSite, ClassNode, CodeUnit, DependencyEntry, PackageNode
from archzoom.package_tree import build_tree, normalize_package_name

logger = logging.getLogger(__name__)


def assemble(
    imported: Iterable[CodeUnit], context: VisualizationContext | None = None
) -> PackageNode:
    """Return the finished package tree for *imported* under *context*."""
    context = context or VisualizationContext()
    by_name = index_classes(imported)
    visualized = classify(by_name, context)

    inner_by_enclosing: dict[str, list[CodeUnit]] = defaultdict(list)
    for unit in visualized.inner_classes:
        inner_by_enclosing[unit.enclosing].append(unit)

    # Names that end up somewhere in the document; edges to anything else
    # would dangle.
    placed = {u.name for u in visualized.classes}
    placed.update(u.name for u in visualized.dependencies)
    placed.update(
        u.name
        for u in placed_inner_classes(visualized.classes, visualized.inner_classes)
    )

    for unit in visualized.inner_classes:
        if unit.name not in placed:
            logger.debug(
                "inner class %s not placed: enclosing class %s is filtered out",
                unit.name,
                unit.enclosing,
            )

    def class_node(unit: CodeUnit) -> ClassNode:
        inner = sorted(
            (class_node(i) for i in inner_by_enclosing.get(unit.name, ())),
            key=lambda c: c.name,
        )
        return ClassNode(
            name=unit.simple_name,
            fullname=unit.name,
            kind=unit.kind,
            inner_classes=tuple(inner),
            dependencies=_dependency_entries(unit, context, placed),
        )

    classes_by_package: dict[str, list[ClassNode]] = defaultdict(list)
    for unit in visualized.classes + visualized.dependencies:
        package = normalize_package_name(unit.package)
        classes_by_package[package].append(class_node(unit))

    # Every package here is declared by an admitted unit and must stay.
    return build_tree(visualized.package_names, classes=classes_by_package)


def _dependency_entries(
    unit: CodeUnit, context: VisualizationContext, placed: set[str]
) -> tuple[DependencyEntry, ...]:
    """Merge the surviving edges of *unit* into one entry per target."""
    call_sites: dict[str, dict[tuple[str, str], CallSite]] = {}
    inheritance: dict[str, str | None] = {}

    for dependency in admitted_dependencies(unit, context):
        target = dependency.target
        if target not in placed:
            continue
        sites = call_sites.setdefault(target, {})
        for call in dependency.call_sites:
            sites.setdefault((call.origin, call.target), call)
        if inheritance.get(target) is None:
            inheritance[target] = dependency.inheritance

    return tuple(
        DependencyEntry(
            to=target,
            call_sites=tuple(sites[key] for key in sorted(sites)),
            inheritance=inheritance[target],
        )
        for target, sites in sorted(call_sites.items())
    )
