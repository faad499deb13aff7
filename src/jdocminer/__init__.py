"""jdocminer: Javadoc extraction engine.

Reads Java source code, collects every constructor and method of a class
(inherited methods included), and records the documented exception
conditions, parameters and return values as ``DocumentedType`` objects.
"""

__version__ = "1.0.0"

from .data_models import (
    TypeReference,
    ParameterModel,
    ThrowsTag,
    ParamTag,
    ReturnTag,
    DocumentedExecutable,
    DocumentedType,
)
from .doctree import JavaSourceProvider, InMemoryDocTreeProvider
from .extractor import JavadocExtractor
from .output import JsonOutputPrinter

__all__ = [
    'TypeReference',
    'ParameterModel',
    'ThrowsTag',
    'ParamTag',
    'ReturnTag',
    'DocumentedExecutable',
    'DocumentedType',
    'JavaSourceProvider',
    'InMemoryDocTreeProvider',
    'JavadocExtractor',
    'JsonOutputPrinter',
]
