"""Build the nested package tree from a flat set of package names."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping

from archzoom.context import VisualizationContext
from archzoom.model import DEFAULT_PACKAGE, ClassNode, PackageNode

logger = logging.getLogger(__name__)


def normalize_package_name(name: str) -> str:
    """Canonical dotted form of *name*; the default package becomes ``""``."""
    segments = (segment.strip() for segment in name.split("."))
    normalized = ".".join(segment for segment in segments if segment)
    if normalized == DEFAULT_PACKAGE:
        return ""
    return normalized


def build_tree(
    package_names: Iterable[str],
    context: VisualizationContext | None = None,
    classes: Mapping[str, Iterable[ClassNode]] | None = None,
) -> PackageNode:
    """Return the root of the package tree spanning *package_names*.

    Every name is inserted as a chain of nodes below the default package,
    one node per dotted prefix, so ``com.acme.x`` and ``com.acme.y`` share a
    single ``com.acme`` node.  Names rejected by *context* are skipped.

    *classes* maps a package fullname to the class nodes placed directly in
    that package; each key must name a package present in the tree.
    """
    simple_names: dict[str, str] = {"": DEFAULT_PACKAGE}
    children: dict[str, set[str]] = defaultdict(set)

    for raw_name in package_names:
        fullname = normalize_package_name(raw_name)
        if not fullname:
            continue
        if context is not None and not context.admits_package(fullname):
            logger.debug("package %s filtered out", fullname)
            continue
        parent = ""
        segments = fullname.split(".")
        for i, segment in enumerate(segments):
            child = ".".join(segments[: i + 1])
            children[parent].add(child)
            simple_names[child] = segment
            parent = child

    placed: dict[str, list[ClassNode]] = {}
    for package, nodes in (classes or {}).items():
        fullname = normalize_package_name(package)
        if fullname not in simple_names:
            raise ValueError(f"package {package!r} is not part of the tree")
        placed.setdefault(fullname, []).extend(nodes)

    # Post-order so that every child is frozen before its parent.
    order: list[str] = []
    stack = [""]
    visited: set[str] = set()
    while stack:
        node_id = stack[-1]
        unvisited = [c for c in children.get(node_id, ()) if c not in visited]
        if unvisited:
            stack.extend(unvisited)
        else:
            stack.pop()
            if node_id not in visited:
                visited.add(node_id)
                order.append(node_id)

    built: dict[str, PackageNode] = {}
    for node_id in order:
        subpackages = sorted(
            (built[c] for c in children.get(node_id, ())), key=lambda p: p.name
        )
        built[node_id] = PackageNode(
            name=simple_names[node_id],
            fullname=node_id,
            subpackages=tuple(subpackages),
            classes=tuple(
                sorted(placed.get(node_id, ()), key=lambda c: (c.name, c.fullname))
            ),
        )

    logger.debug("package tree: %d nodes", len(built))
    return built[""]
