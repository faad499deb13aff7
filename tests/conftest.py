"""Shared fixtures and in-memory declaration tree builders."""

import sys
import os
import logging
from itertools import count

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from jdocminer.doctree import (  # noqa: E402
    AnnotationDesc,
    ClassDoc,
    ConstructorDoc,
    ImportedClass,
    InMemoryDocTreeProvider,
    MethodDoc,
    ParameterDoc,
    ParamTagDoc,
    SourcePosition,
    Tag,
    ThrowsTagDoc,
    TypeDoc,
)
from jdocminer.utils.logger import Logger  # noqa: E402

_lines = count(10)


def position(file: str = "Test.java") -> SourcePosition:
    """Return a fresh source position, distinct from every other one handed out."""
    return SourcePosition(file, next(_lines), 4)


def make_class(qualified_name, superclass=None, interfaces=None, imports=(),
               is_interface=False):
    """Build a class declared in its own file, linked to the given supertypes."""
    return ClassDoc(
        qualified_name,
        position=SourcePosition(qualified_name.replace('.', '/') + ".java", 1, 0),
        superclass=superclass,
        interfaces=interfaces,
        imported_classes=[ImportedClass(name) for name in imports],
        is_interface=is_interface,
    )


def params(*declarations):
    """Turn ``("java.lang.Object", "x", ["Nullable"])`` tuples into ParameterDocs."""
    result = []
    for declaration in declarations:
        type_name, name = declaration[0], declaration[1]
        annotations = declaration[2] if len(declaration) > 2 else []
        element, _, rest = type_name.partition('[')
        dimension = "[" + rest if rest else ""
        result.append(ParameterDoc(name, TypeDoc(element, dimension),
                                   [AnnotationDesc(a) for a in annotations]))
    return result


def add_method(class_doc, name, parameters=(), comment="", tags=(), return_type="void",
               **kwargs):
    method = MethodDoc(name, class_doc, return_type=TypeDoc(return_type),
                       parameters=params(*parameters), comment_text=comment,
                       tags=list(tags), position=position(), **kwargs)
    return class_doc.add_method(method)


def add_constructor(class_doc, parameters=(), comment="", tags=(), at=None, **kwargs):
    constructor = ConstructorDoc(class_doc.name, class_doc, parameters=params(*parameters),
                                 comment_text=comment, tags=list(tags),
                                 position=at or position(), **kwargs)
    return class_doc.add_constructor(constructor)


def throws(exception_name, comment="", exception_type=None, name="@throws"):
    return ThrowsTagDoc(name, exception_name, comment, exception_type)


def param(parameter_name, comment=""):
    return ParamTagDoc("@param", parameter_name, comment)


def returns(comment):
    return Tag("@return", comment)


@pytest.fixture
def object_class():
    """The universal root type with the methods every class inherits."""
    root = ClassDoc("java.lang.Object", is_external=True)
    add_method(root, "toString", return_type="java.lang.String",
               comment="Returns a string representation of the object.")
    add_method(root, "hashCode", return_type="int")
    add_method(root, "equals", [("java.lang.Object", "obj")], return_type="boolean")
    return root


@pytest.fixture
def provider():
    return InMemoryDocTreeProvider()


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop the cached application logger so handlers never outlive a test's streams."""
    yield
    Logger.reset()
    logging.getLogger("jdocminer").handlers.clear()
