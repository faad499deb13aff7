"""Extraction of documented constructors and methods from Javadoc.

``JavadocExtractor`` composes the member collector, the tag resolver, the
exception name resolver, the comment normalizer and the parameter model
builder to turn one class into a ``DocumentedType``.
"""

from .member_collector import MemberCollector
from .tag_resolver import TagResolver
from .exception_resolver import ExceptionNameResolver
from .comment_normalizer import CommentNormalizer
from .parameter_builder import ParameterModelBuilder, NullabilityMarker, infer_nullability
from .javadoc_extractor import JavadocExtractor

__all__ = [
    'MemberCollector',
    'TagResolver',
    'ExceptionNameResolver',
    'CommentNormalizer',
    'ParameterModelBuilder',
    'NullabilityMarker',
    'infer_nullability',
    'JavadocExtractor',
]
