from __future__ import annotations

import itertools

import pytest

from archzoom.context import VisualizationContext
from archzoom.model import DEFAULT_PACKAGE, ClassNode, PackageNode
from archzoom.package_tree import build_tree, normalize_package_name

PACKAGES = ["com.acme.pkg1", "com.acme.pkg1.sub", "com.acme.pkg2", "java.lang"]


def _names(node: PackageNode) -> list[str]:
    return [p.name for p in node.subpackages]


def test_builds_shared_prefixes_once():
    root = build_tree(set(PACKAGES))

    assert root.name == DEFAULT_PACKAGE
    assert root.fullname == ""
    assert _names(root) == ["com", "java"]

    com, java = root.subpackages
    assert _names(com) == ["acme"]
    acme = com.subpackages[0]
    assert acme.fullname == "com.acme"
    assert _names(acme) == ["pkg1", "pkg2"]
    pkg1 = acme.subpackages[0]
    assert [(p.name, p.fullname) for p in pkg1.subpackages] == [
        ("sub", "com.acme.pkg1.sub")
    ]
    assert [(p.name, p.fullname) for p in java.subpackages] == [("lang", "java.lang")]


def test_child_fullname_extends_parent_fullname():
    root = build_tree(PACKAGES)
    for node in root.iter_packages():
        for child in node.subpackages:
            expected = f"{node.fullname}.{child.name}" if node.fullname else child.name
            assert child.fullname == expected


def test_insertion_order_does_not_matter():
    trees = {build_tree(order) for order in itertools.permutations(PACKAGES)}
    assert len(trees) == 1


def test_no_duplicate_siblings():
    root = build_tree(PACKAGES + ["com.acme", "com", "com.acme.pkg1"])
    fullnames = [node.fullname for node in root.iter_packages()]
    assert len(fullnames) == len(set(fullnames))
    for node in root.iter_packages():
        assert len(_names(node)) == len(set(_names(node)))


def test_single_segment_is_child_of_root():
    root = build_tree({"com"})
    assert root.subpackages == (PackageNode("com", "com"),)


@pytest.mark.parametrize("name", ["", DEFAULT_PACKAGE, " "])
def test_default_package_maps_to_root(name):
    assert build_tree({name}) == PackageNode(DEFAULT_PACKAGE, "")


def test_empty_input_gives_bare_root():
    root = build_tree(set())
    assert root.is_default
    assert root.subpackages == ()
    assert root.classes == ()


@pytest.mark.parametrize(
    ("raw", "normalized"),
    [
        ("com.acme", "com.acme"),
        ("com..acme.", "com.acme"),
        (" com . acme ", "com.acme"),
        ("default", ""),
        ("Com.Acme", "Com.Acme"),
    ],
)
def test_normalize_package_name(raw, normalized):
    assert normalize_package_name(raw) == normalized


def test_differently_segmented_names_share_a_node():
    assert build_tree({"com.acme", "com..acme"}) == build_tree({"com.acme"})


def test_context_filters_packages():
    context = VisualizationContext().with_include_only("com.acme.pkg1")
    root = build_tree(PACKAGES, context)
    fullnames = {node.fullname for node in root.iter_packages()}
    assert fullnames == {"", "com", "com.acme", "com.acme.pkg1", "com.acme.pkg1.sub"}


def test_classes_are_attached_and_sorted():
    classes = {
        "com.acme.pkg2": [
            ClassNode("Zeta", "com.acme.pkg2.Zeta"),
            ClassNode("Alpha", "com.acme.pkg2.Alpha"),
        ],
        "": [ClassNode("Main", "Main")],
    }
    root = build_tree(PACKAGES, classes=classes)
    assert [c.name for c in root.classes] == ["Main"]
    pkg2 = root.find("com.acme.pkg2")
    assert [c.name for c in pkg2.classes] == ["Alpha", "Zeta"]
    assert root.find("com.acme").classes == ()


def test_classes_for_unknown_package_are_rejected():
    with pytest.raises(ValueError, match="org.acme"):
        build_tree(PACKAGES, classes={"org.acme": [ClassNode("X", "org.acme.X")]})
