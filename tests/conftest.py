"""Shared fixtures: a small imported class set modelled on a Java project."""

from __future__ import annotations

import pytest

from archzoom.model import CallSite, CodeUnit, Dependency, split_class_name

PKG = "com.acme.visual.testclasses"
SUBPKG = PKG + ".subpkg"


def _make_unit(name, *, enclosing=None, deps=(), kind="class"):
    package, simple_name = split_class_name(name)
    if enclosing is not None:
        simple_name = name.rsplit("$", 1)[-1]
    return CodeUnit(
        name=name,
        simple_name=simple_name,
        package=package,
        enclosing=enclosing,
        dependencies=tuple(deps),
        kind=kind,
    )


def _object_super_call(origin):
    return Dependency(
        origin,
        "java.lang.Object",
        (CallSite("<init>()", "Object()", "constructorCall", super_constructor=True),),
        inheritance="extends",
    )


@pytest.fixture
def make_unit():
    return _make_unit


@pytest.fixture
def sample_classes():
    """Six top-level classes, two inner classes, three external targets."""
    some = f"{PKG}.SomeClass"
    other = f"{PKG}.OtherClass"
    third = f"{PKG}.ThirdClass"
    sub = f"{SUBPKG}.SubPkgClass"
    return [
        _make_unit(
            some,
            deps=[
                _object_super_call(some),
                Dependency(some, other, (CallSite("run()", "call()"),)),
                Dependency(
                    some, "java.lang.String", (CallSite("run()", "length()"),)
                ),
            ],
        ),
        _make_unit(
            f"{some}$InnerClass",
            enclosing=some,
            deps=[Dependency(f"{some}$InnerClass", third, (CallSite("go()", "x", "fieldAccess"),))],
        ),
        _make_unit(other, kind="interface"),
        _make_unit(third, kind="abstractclass", deps=[_object_super_call(third)]),
        _make_unit(
            sub,
            deps=[
                _object_super_call(sub),
                Dependency(
                    sub,
                    "java.io.File",
                    (CallSite("open()", "File(String)", "constructorCall"),),
                ),
                Dependency(sub, some, (CallSite("open()", "run()"),)),
            ],
        ),
        _make_unit(f"{sub}$InnerSubPkgClass", enclosing=sub),
        _make_unit(f"{SUBPKG}.SecondSubPkgClass"),
        _make_unit(f"{SUBPKG}.ThirdSubPkgClass", kind="enum"),
    ]
