"""Tests for parameter models: positions, nullability and varargs shaping."""

import pytest
from hypothesis import given, strategies as st

from jdocminer.doctree import AnnotationDesc, ParameterDoc, TypeDoc
from jdocminer.extractor import NullabilityMarker, ParameterModelBuilder, infer_nullability

from conftest import add_method, make_class, params


@pytest.mark.parametrize("annotation,expected", [
    ("Nullable", True),
    ("javax.annotation.Nullable", True),
    ("NULLABLE", True),
    ("NotNull", False),
    ("org.jetbrains.annotations.NotNull", False),
    ("Nonnull", False),
    ("NonNull", False),
    ("Deprecated", None),
])
def test_nullability_markers(annotation, expected):
    assert infer_nullability([AnnotationDesc(annotation)]) is expected


def test_first_recognized_marker_wins():
    annotations = [AnnotationDesc("Deprecated"), AnnotationDesc("NotNull"),
                   AnnotationDesc("Nullable")]

    assert infer_nullability(annotations) is False


def test_no_annotations_means_unknown():
    assert infer_nullability([]) is None


def test_marker_lookup():
    assert NullabilityMarker.match(AnnotationDesc("lombok.NonNull")) is NullabilityMarker.NONNULL
    assert NullabilityMarker.match(AnnotationDesc("Override")) is None


def test_add_edge_parameters_in_order():
    owner = make_class("org.jgrapht.graph.AbstractGraph")
    method = add_method(owner, "addEdge", [("java.lang.Object", "sourceVertex"),
                                           ("java.lang.Object", "targetVertex"),
                                           ("java.lang.Object", "e")],
                        return_type="boolean")

    models = ParameterModelBuilder().build(method)

    assert [(m.name, m.position) for m in models] == [
        ("sourceVertex", 0), ("targetVertex", 1), ("e", 2)]
    assert all(m.type.qualified_name == "java.lang.Object" for m in models)
    assert all(m.nullable is None for m in models)


def test_varargs_parameter_becomes_array():
    owner = make_class("com.example.Paths")
    method = add_method(owner, "of", [("java.lang.String", "first"), ("java.lang.String", "more")],
                        is_varargs=True)

    first, more = ParameterModelBuilder().build(method)

    assert not first.type.is_array
    assert more.type.qualified_name == "java.lang.String[]"
    assert more.type.is_array


def test_array_parameter_keeps_dimensions():
    models = ParameterModelBuilder().build_parameters(params(("int[][]", "grid")), is_varargs=False)

    assert models[0].type.qualified_name == "int[][]"


def test_annotated_parameter():
    models = ParameterModelBuilder().build_parameters(
        params(("org.jgrapht.Graph", "g", ["Nullable"])), is_varargs=False)

    assert models[0].nullable is True


@given(st.lists(st.sampled_from(["int", "long", "java.lang.Object", "java.util.List"]),
                max_size=8),
       st.booleans())
def test_positions_contiguous_and_varargs_last(type_names, is_varargs):
    declarations = [ParameterDoc(f"p{i}", TypeDoc(name)) for i, name in enumerate(type_names)]

    models = ParameterModelBuilder().build_parameters(declarations, is_varargs)

    assert [m.position for m in models] == list(range(len(type_names)))
    assert [m.name for m in models] == [d.name for d in declarations]
    for index, model in enumerate(models):
        shaped = is_varargs and index == len(models) - 1
        assert model.type.is_array == shaped
