"""Visualization context: which classes, packages and call sites to show."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from archzoom.model import CallSite, Dependency

@dataclass(frozen=True)
class VisualizationContext:
    """Immutable filter policy applied while building the report.

    With an empty *include_only* set everything is admitted. Otherwise a
    name passes iff it equals one of the prefixes or continues one of them
    at a dotted segment boundary: ``com.acme.Foo`` passes for ``com.acme``
    but not for ``com.ac``, and ``com.acme.Foo$Inner`` does not pass for
    ``com.acme.Foo``.
    """

    include_only: frozenset[str] = field(default_factory=frozenset)
    ignore_access_to_super_constructor: bool = False

    def __post_init__(self):
        # Accept any iterable of prefixes but keep the instance hashable.
        prefixes = frozenset(p.strip() for p in self.include_only if p.strip())
        object.__setattr__(self, "include_only", prefixes)

    def with_include_only(self, *prefixes: str) -> VisualizationContext:
        return replace(self, include_only=self.include_only | frozenset(prefixes))

    def with_ignore_access_to_super_constructor(
        self, ignore: bool = True
    ) -> VisualizationContext:
        return replace(self, ignore_access_to_super_constructor=ignore)

    def admits(self, fullname: str) -> bool:
        if not self.include_only:
            return True
        return any(_continues(fullname, prefix) for prefix in self.include_only)

    def admits_package(self, fullname: str) -> bool:
        """Admit a package if it is included or lies on the path to an include."""
        if self.admits(fullname):
            return True
        if fullname == "":
            return True
        return any(_continues(prefix, fullname) for prefix in self.include_only)

    def admits_call(self, call_site: CallSite) -> bool:
        return not (
            self.ignore_access_to_super_constructor and call_site.super_constructor
        )

    def filter_dependency(self, dependency: Dependency) -> Dependency | None:
        """Drop ignored call sites; return None if nothing of the edge is left."""
        if not self.admits(dependency.origin) or not self.admits(dependency.target):
            return None
        call_sites = tuple(c for c in dependency.call_sites if self.admits_call(c))
        if len(call_sites) == len(dependency.call_sites):
            return dependency
        if not call_sites and not dependency.is_type_dependency:
            return None
        return replace(dependency, call_sites=call_sites)


def _continues(name: str, prefix: str) -> bool:
    if name == prefix:
        return True
    return name.startswith(prefix + ".")
