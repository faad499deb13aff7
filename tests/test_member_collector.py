"""Tests for constructor and method collection over the superclass chain."""

from hypothesis import given, strategies as st

from jdocminer.doctree import ClassDoc
from jdocminer.extractor import MemberCollector

from conftest import add_constructor, add_method, make_class


def test_root_type_methods_excluded(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    add_method(graph, "vertexSet", return_type="java.util.Set")

    names = [m.name for m in MemberCollector().collect_methods(graph)]

    assert names == ["vertexSet"]


def test_override_hides_overridden_method(object_class):
    base = make_class("com.example.AbstractGraph", superclass=object_class)
    inherited = add_method(base, "containsEdge", [("java.lang.Object", "e")], return_type="boolean")
    base_size = add_method(base, "size", return_type="int")
    sub = make_class("com.example.SimpleGraph", superclass=base)
    override = add_method(sub, "size", return_type="int")

    methods = MemberCollector().collect_methods(sub)

    assert methods == [override, inherited]
    assert base_size not in methods


def test_overloads_are_distinct(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    one = add_method(graph, "addVertex", [("java.lang.Object", "v")], return_type="boolean")
    two = add_method(graph, "addVertex", [("java.lang.Object", "v"), ("int", "weight")],
                     return_type="boolean")

    assert MemberCollector().collect_methods(graph) == [one, two]


def test_override_of_root_method_is_kept(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    to_string = add_method(graph, "toString", return_type="java.lang.String")

    assert MemberCollector().collect_methods(graph) == [to_string]


def test_synthetic_methods_skipped(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    add_method(graph, "access$000", is_synthetic=True)

    assert MemberCollector().collect_methods(graph) == []


def test_default_constructor_excluded(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    add_constructor(graph, at=graph.position)

    assert MemberCollector().collect_constructors(graph) == []


def test_declared_constructors_kept_in_order(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    first = add_constructor(graph)
    second = add_constructor(graph, [("org.jgrapht.Graph", "g")])

    assert MemberCollector().collect_constructors(graph) == [first, second]


def test_constructor_without_position_is_not_default(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    graph.position = None
    constructor = add_constructor(graph)
    constructor.position = None

    assert MemberCollector().collect_constructors(graph) == [constructor]


def test_constructors_precede_methods(object_class):
    graph = make_class("com.example.Graph", superclass=object_class)
    method = add_method(graph, "clear")
    constructor = add_constructor(graph)

    assert MemberCollector().collect(graph) == [constructor, method]


def test_superclass_constructors_not_collected(object_class):
    base = make_class("com.example.Base", superclass=object_class)
    add_constructor(base, [("int", "n")])
    sub = make_class("com.example.Sub", superclass=base)

    assert MemberCollector().collect_constructors(sub) == []


def test_walk_stops_at_missing_superclass():
    orphan = make_class("com.example.Orphan")
    method = add_method(orphan, "run")

    assert MemberCollector().collect_methods(orphan) == [method]


def test_custom_root_type():
    base = make_class("com.example.Base")
    add_method(base, "hidden")
    sub = make_class("com.example.Sub", superclass=base)
    shown = add_method(sub, "shown")

    assert MemberCollector(root_type="com.example.Base").collect_methods(sub) == [shown]


def test_cyclic_superclass_chain_terminates():
    a = make_class("com.example.A")
    b = make_class("com.example.B", superclass=a)
    a.superclass = b
    add_method(a, "fromA")
    add_method(b, "fromB")

    names = [m.name for m in MemberCollector().collect_methods(b)]

    assert names == ["fromB", "fromA"]


method_specs = st.lists(
    st.tuples(st.sampled_from(["get", "put", "remove", "size"]),
              st.lists(st.sampled_from(["int", "java.lang.Object"]), max_size=2)),
    max_size=6,
)


@given(st.lists(method_specs, min_size=1, max_size=4))
def test_method_keys_unique_and_most_specific(hierarchy):
    root = ClassDoc("java.lang.Object", is_external=True)
    add_method(root, "size", return_type="int")

    current = root
    for depth, specs in enumerate(reversed(hierarchy)):
        current = make_class(f"com.example.Level{depth}", superclass=current)
        for name, types in specs:
            add_method(current, name, [(t, f"p{i}") for i, t in enumerate(types)])
    target = current

    methods = MemberCollector().collect_methods(target)
    keys = [m.name + m.signature for m in methods]

    assert len(keys) == len(set(keys))
    assert all(m.containing_class is not root for m in methods)
    for method in methods:
        key = method.name + method.signature
        owner = target
        while not any(m.name + m.signature == key for m in owner.methods):
            owner = owner.superclass
        assert method.containing_class is owner
        first = next(m for m in owner.methods if m.name + m.signature == key)
        assert method is first
