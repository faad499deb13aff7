"""Tests for building declaration trees from Java source with javalang."""

import pytest

from jdocminer.doctree import JavaSourceProvider, ThrowsTagDoc, ParamTagDoc
from jdocminer.utils.error_handler import SourceParseError


GRAPH_SOURCE = """
package org.jgrapht.graph;

import java.util.Set;
import org.jgrapht.Graph;
import org.jgrapht.GraphException;

/**
 * A skeletal graph implementation.
 */
public abstract class AbstractGraph<V, E> implements Graph<V, E> {

    /**
     * Creates a graph view.
     *
     * @param g the backing graph
     * @throws IllegalArgumentException g==null
     */
    public AbstractGraph(Graph<V, E> g) {
    }

    /**
     * Adds an edge.
     *
     * @param sourceVertex source vertex of the edge
     * @throws GraphException if the graph is immutable
     * @exception NullPointerException if a vertex is null
     */
    public boolean addEdge(V sourceVertex, V targetVertex, E e) {
        return false;
    }

    public <T extends Comparable<T>> T max(Set<? extends T> items, T[] fallback) {
        return null;
    }

    public static String join(String separator, Object... parts) {
        return null;
    }

    public static class Entry {
        public void touch(@Nullable Entry other) {
        }
    }
}
"""


@pytest.fixture
def graph_provider():
    provider = JavaSourceProvider()
    provider.load_source(GRAPH_SOURCE, "AbstractGraph.java")
    return provider


class TestDeclarations:

    def test_classes_registered(self, graph_provider):
        names = [c.qualified_name for c in graph_provider.all_classes()]

        assert names == ["org.jgrapht.graph.AbstractGraph", "org.jgrapht.graph.AbstractGraph.Entry"]
        assert [c.qualified_name for c in graph_provider.top_level_classes()] == \
            ["org.jgrapht.graph.AbstractGraph"]

    def test_supertypes_linked(self, graph_provider):
        graph = graph_provider.find_class("org.jgrapht.graph.AbstractGraph")

        assert graph.superclass.qualified_name == "java.lang.Object"
        assert graph.superclass.is_external
        assert [i.qualified_name for i in graph.interfaces] == ["org.jgrapht.Graph"]

    def test_imports_recorded(self, graph_provider):
        graph = graph_provider.find_class("org.jgrapht.graph.AbstractGraph")

        assert [i.qualified_name for i in graph.imported_classes] == [
            "java.util.Set", "org.jgrapht.Graph", "org.jgrapht.GraphException"]

    def test_constructor_and_tags(self, graph_provider):
        graph = graph_provider.find_class("org.jgrapht.graph.AbstractGraph")
        (constructor,) = graph.constructors

        assert constructor.name == "AbstractGraph"
        assert constructor.signature == "(org.jgrapht.Graph)"
        assert constructor.comment_text == "Creates a graph view."
        assert constructor.position != graph.position

        param_tag, throws_tag = constructor.tags
        assert isinstance(param_tag, ParamTagDoc)
        assert param_tag.parameter_name == "g"
        assert isinstance(throws_tag, ThrowsTagDoc)
        assert throws_tag.exception_name == "IllegalArgumentException"
        assert throws_tag.exception_comment == "g==null"
        assert throws_tag.exception_type.qualified_name == "java.lang.IllegalArgumentException"
        assert throws_tag.holder is constructor

    def test_type_variables_erased(self, graph_provider):
        graph = graph_provider.find_class("org.jgrapht.graph.AbstractGraph")
        add_edge = graph.find_method("addEdge",
                                     "(java.lang.Object,java.lang.Object,java.lang.Object)")
        max_method = graph.methods[1]

        assert add_edge is not None
        assert str(add_edge.return_type) == "boolean"
        assert max_method.signature == "(java.util.Set,java.lang.Comparable[])"
        assert str(max_method.return_type) == "java.lang.Comparable"

    def test_unloaded_exception_left_unresolved(self, graph_provider):
        add_edge = graph_provider.find_class("org.jgrapht.graph.AbstractGraph").methods[0]
        graph_exception, npe = add_edge.throws_tags()

        assert graph_exception.exception_type is None
        assert graph_exception.exception_name == "GraphException"
        assert npe.name == "@exception"
        assert npe.exception_type.qualified_name == "java.lang.NullPointerException"

    def test_varargs_and_static(self, graph_provider):
        join = graph_provider.find_class("org.jgrapht.graph.AbstractGraph").methods[2]

        assert join.is_varargs
        assert join.is_static
        assert join.signature == "(java.lang.String,java.lang.Object[])"

    def test_nested_class_default_constructor(self, graph_provider):
        entry = graph_provider.find_class("org.jgrapht.graph.AbstractGraph.Entry")
        (constructor,) = entry.constructors
        (touch,) = entry.methods

        assert constructor.position == entry.position
        assert touch.signature == "(org.jgrapht.graph.AbstractGraph.Entry)"
        assert [a.simple_name for a in touch.parameters[0].annotations] == ["Nullable"]


class TestResolutionAcrossFiles:

    def test_same_package_superclass_and_exception(self, tmp_path):
        package_dir = tmp_path / "com" / "example"
        package_dir.mkdir(parents=True)
        (package_dir / "StoreException.java").write_text(
            "package com.example;\npublic class StoreException extends RuntimeException {}\n")
        (package_dir / "Base.java").write_text(
            "package com.example;\n"
            "public class Base {\n"
            "    /**\n"
            "     * Stores.\n"
            "     * @throws StoreException if full\n"
            "     */\n"
            "    public void store(int x) {}\n"
            "}\n")
        (package_dir / "Sub.java").write_text(
            "package com.example;\npublic class Sub extends Base {}\n")

        provider = JavaSourceProvider()
        loaded = provider.load([str(tmp_path)])

        assert sorted(c.qualified_name for c in loaded) == [
            "com.example.Base", "com.example.StoreException", "com.example.Sub"]
        sub = provider.find_class("com.example.Sub")
        base = provider.find_class("com.example.Base")
        assert sub.superclass is base
        assert provider.find_class("com.example.StoreException").superclass.qualified_name == \
            "java.lang.RuntimeException"
        (tag,) = base.methods[0].throws_tags()
        assert tag.exception_type is provider.find_class("com.example.StoreException")

    def test_interface_extends(self):
        provider = JavaSourceProvider()
        provider.load_source(
            "package p;\n"
            "interface Shape { double area(); }\n"
            "interface Polygon extends Shape { int sides(); }\n")

        polygon = provider.find_class("p.Polygon")
        assert polygon.is_interface
        assert polygon.superclass is None
        assert polygon.interfaces == [provider.find_class("p.Shape")]
        assert polygon.constructors == []

    def test_enum_members(self):
        provider = JavaSourceProvider()
        provider.load_source(
            "package p;\n"
            "public enum Color {\n"
            "    RED, GREEN;\n"
            "    /** Mixes. @throws IllegalStateException never */\n"
            "    public Color mix(Color other) { return this; }\n"
            "}\n")

        color = provider.find_class("p.Color")
        assert color.superclass.qualified_name == "java.lang.Enum"
        assert color.methods[0].signature == "(p.Color)"


class TestParseFailures:

    def test_bad_source_skipped(self, tmp_path):
        (tmp_path / "Broken.java").write_text("public class Broken { void x( }")
        (tmp_path / "Fine.java").write_text("public class Fine {}")

        provider = JavaSourceProvider()
        loaded = provider.load([str(tmp_path)])

        assert [c.qualified_name for c in loaded] == ["Fine"]

    def test_bad_source_raises_when_strict(self, tmp_path):
        (tmp_path / "Broken.java").write_text("public class Broken { void x( }")

        with pytest.raises(SourceParseError) as info:
            JavaSourceProvider(fail_on_parse_error=True).load([str(tmp_path)])

        assert info.value.error_code == "E_SOURCE_PARSE"
        assert "Broken.java" in info.value.file_path

    def test_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JavaSourceProvider().load([str(tmp_path / "nowhere")])


def test_member_type_through_import():
    provider = JavaSourceProvider()
    provider.load_source(
        "package p;\n"
        "import java.util.Map;\n"
        "public class Cache {\n"
        "    public void put(Map.Entry<String, Integer> entry, java.io.File file) {}\n"
        "}\n")

    (put,) = provider.find_class("p.Cache").methods
    assert put.signature == "(java.util.Map.Entry,java.io.File)"
