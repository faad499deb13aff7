"""Declaration trees with attached Javadoc, and the providers that build them.

A provider hands the extractor ``ClassDoc`` objects linked to their
superclasses and interfaces, each with constructors and methods carrying
their raw Javadoc tags. ``JavaSourceProvider`` builds them from Java source
with javalang; ``InMemoryDocTreeProvider`` holds trees built in code.
"""

from .model import (
    SourcePosition,
    TypeDoc,
    AnnotationDesc,
    ImportedClass,
    Tag,
    ThrowsTagDoc,
    ParamTagDoc,
    ParameterDoc,
    ExecutableMemberDoc,
    ConstructorDoc,
    MethodDoc,
    ClassDoc,
)
from .base_provider import DocTreeProvider, InMemoryDocTreeProvider
from .javadoc_parser import ParsedComment, parse_comment
from .java_provider import JavaSourceProvider

__all__ = [
    'SourcePosition',
    'TypeDoc',
    'AnnotationDesc',
    'ImportedClass',
    'Tag',
    'ThrowsTagDoc',
    'ParamTagDoc',
    'ParameterDoc',
    'ExecutableMemberDoc',
    'ConstructorDoc',
    'MethodDoc',
    'ClassDoc',
    'DocTreeProvider',
    'InMemoryDocTreeProvider',
    'ParsedComment',
    'parse_comment',
    'JavaSourceProvider',
]
