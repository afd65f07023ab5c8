"""Partition imported code units into classes, inner classes and dependencies."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import chain

from archzoom.context import VisualizationContext
from archzoom.errors import MissingEnclosingClassError
from archzoom.model import CodeUnit, Dependency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualizedClasses:
    """Result of :func:`classify`; every group is sorted by fullname."""

    classes: tuple[CodeUnit, ...]
    inner_classes: tuple[CodeUnit, ...]
    dependencies: tuple[CodeUnit, ...]
    package_names: frozenset[str]

    @property
    def all(self) -> tuple[CodeUnit, ...]:
        return self.classes + self.inner_classes + self.dependencies


def index_classes(imported: Iterable[CodeUnit]) -> dict[str, CodeUnit]:
    """Map fullname -> code unit; later duplicates replace earlier ones."""
    by_name: dict[str, CodeUnit] = {}
    for unit in imported:
        if unit.name in by_name:
            logger.warning("Duplicate descriptor for %s, keeping the last one", unit.name)
        by_name[unit.name] = unit
    return by_name


def admitted_dependencies(
    unit: CodeUnit, context: VisualizationContext
) -> Iterator[Dependency]:
    """Yield the edges of *unit* that survive *context*, minus self edges."""
    for dependency in unit.dependencies:
        if dependency.target == unit.name:
            continue
        filtered = context.filter_dependency(dependency)
        if filtered is not None:
            yield filtered


def placed_inner_classes(
    classes: Iterable[CodeUnit], inner_classes: Iterable[CodeUnit]
) -> list[CodeUnit]:
    """Inner classes whose chain of enclosing classes reaches one of *classes*."""
    inner_by_enclosing: dict[str, list[CodeUnit]] = defaultdict(list)
    for unit in inner_classes:
        inner_by_enclosing[unit.enclosing].append(unit)

    placed: list[CodeUnit] = []
    stack = [u.name for u in classes]
    while stack:
        name = stack.pop()
        for inner in inner_by_enclosing.get(name, ()):
            placed.append(inner)
            stack.append(inner.name)
    return placed


def classify(
    imported: Iterable[CodeUnit] | Mapping[str, CodeUnit],
    context: VisualizationContext | None = None,
) -> VisualizedClasses:
    """Classify *imported* under *context*.

    Filtering is decided per unit: an inner class is kept if its own name is
    admitted, whatever happens to its enclosing class.  Targets of surviving
    edges that were not imported become external dependencies, one per
    fullname; only edges of units that get placed in the tree count.

    Raises :class:`MissingEnclosingClassError` if an inner class points to an
    enclosing class that is not among *imported*.
    """
    context = context or VisualizationContext()
    if isinstance(imported, Mapping):
        by_name = dict(imported)
    else:
        by_name = index_classes(imported)

    classes: list[CodeUnit] = []
    inner_classes: list[CodeUnit] = []
    for unit in by_name.values():
        if unit.enclosing is not None and unit.enclosing not in by_name:
            raise MissingEnclosingClassError(unit.name, unit.enclosing)
        if not context.admits(unit.name):
            continue
        if unit.is_inner:
            inner_classes.append(unit)
        else:
            classes.append(unit)

    dependencies: dict[str, CodeUnit] = {}
    for unit in chain(classes, placed_inner_classes(classes, inner_classes)):
        for dependency in admitted_dependencies(unit, context):
            target = dependency.target
            if target in by_name or target in dependencies:
                continue
            dependencies[target] = CodeUnit.external(target)

    package_names = frozenset(
        unit.package for unit in chain(classes, dependencies.values())
    )

    logger.debug(
        "classified: %d classes, %d inner classes, %d dependencies, %d packages",
        len(classes),
        len(inner_classes),
        len(dependencies),
        len(package_names),
    )

    return VisualizedClasses(
        classes=tuple(sorted(classes, key=lambda u: u.name)),
        inner_classes=tuple(sorted(inner_classes, key=lambda u: u.name)),
        dependencies=tuple(sorted(dependencies.values(), key=lambda u: u.name)),
        package_names=package_names,
    )
