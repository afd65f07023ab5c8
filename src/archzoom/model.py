"""Data model: imported code units in, package tree out."""

from __future__ import annotations

from dataclasses import dataclass

# Simple name of the synthetic root that stands for the unnamed package.
DEFAULT_PACKAGE = "default"


@dataclass(frozen=True)
class CallSite:
    """One concrete access underlying a dependency edge."""

    origin: str  # member signature in the origin class, e.g. "foo(int)"
    target: str  # member signature in the target class, e.g. "bar()"
    kind: str = "methodCall"  # "methodCall", "fieldAccess", "constructorCall"
    super_constructor: bool = False


@dataclass(frozen=True)
class Dependency:
    """A directed edge from one code unit to another."""

    origin: str
    target: str
    call_sites: tuple[CallSite, ...] = ()
    inheritance: str | None = None  # "extends", "implements"

    @property
    def is_type_dependency(self) -> bool:
        """True if the edge exists independently of its call sites."""
        return self.inheritance is not None or not self.call_sites


@dataclass(frozen=True)
class CodeUnit:
    """A class or interface as delivered by the importer."""

    name: str
    simple_name: str
    package: str
    enclosing: str | None = None
    dependencies: tuple[Dependency, ...] = ()
    kind: str = "class"  # "class", "interface", "abstractclass", "enum"

    @property
    def is_inner(self) -> bool:
        return self.enclosing is not None

    @classmethod
    def external(cls, name: str) -> CodeUnit:
        """Placeholder for a referenced class that was not imported."""
        package, simple_name = split_class_name(name)
        return cls(name=name, simple_name=simple_name, package=package)


def split_class_name(name: str) -> tuple[str, str]:
    """Split ``a.b.Outer$Inner`` into ``("a.b", "Outer$Inner")``."""
    top_level = name.split("$", 1)[0]
    if "." not in top_level:
        return "", name
    package = top_level.rsplit(".", 1)[0]
    return package, name[len(package) + 1 :]


@dataclass(frozen=True)
class DependencyEntry:
    """All surviving relationships from one class to one target."""

    to: str
    call_sites: tuple[CallSite, ...] = ()
    inheritance: str | None = None


@dataclass(frozen=True)
class ClassNode:
    """A class placed in the package tree."""

    name: str
    fullname: str
    kind: str = "class"
    inner_classes: tuple[ClassNode, ...] = ()
    dependencies: tuple[DependencyEntry, ...] = ()


@dataclass(frozen=True)
class PackageNode:
    """A package in the output tree; the root has an empty fullname."""

    name: str
    fullname: str
    subpackages: tuple[PackageNode, ...] = ()
    classes: tuple[ClassNode, ...] = ()

    @property
    def is_default(self) -> bool:
        return self.fullname == ""

    def find(self, fullname: str) -> PackageNode | None:
        """Return the descendant (or self) with the given fullname."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.fullname == fullname:
                return node
            stack.extend(node.subpackages)
        return None

    def iter_packages(self):
        """Yield this node and every descendant package, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.subpackages))
