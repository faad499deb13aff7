"""Data models for documented types and their constructors and methods."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any

from jdocminer.utils.error_handler import MissingInputError


ARRAY_SUFFIX = "[]"


@dataclass(frozen=True)
class TypeReference:
    """Name-based reference to a declared type.

    Two references are equal when their qualified names and array-ness
    match; the display name is informational only.

    Attributes:
        qualified_name: Fully qualified name including array brackets
            (e.g. ``java.lang.String[]``)
        display_name: Simple name including array brackets (e.g. ``String[]``)
        is_array: Whether the referenced type has at least one dimension
    """
    qualified_name: str
    display_name: str = field(default="", compare=False)
    is_array: bool = False

    @classmethod
    def of(cls, name: str) -> 'TypeReference':
        """Create a reference from a written type name.

        Args:
            name: Qualified or simple type name, optionally with ``[]`` suffixes

        Returns:
            TypeReference with display name and array-ness derived from ``name``
        """
        element = name
        dimension = ""
        while element.endswith(ARRAY_SUFFIX):
            element = element[:-len(ARRAY_SUFFIX)]
            dimension += ARRAY_SUFFIX
        simple = element.rsplit('.', 1)[-1]
        return cls(qualified_name=name,
                   display_name=simple + dimension,
                   is_array=bool(dimension))

    def as_array(self) -> 'TypeReference':
        """Return a reference to the array of this type."""
        return TypeReference.of(self.qualified_name + ARRAY_SUFFIX)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'qualified_name': self.qualified_name,
            'display_name': self.display_name,
            'is_array': self.is_array,
        }

    def __str__(self) -> str:
        return self.qualified_name


@dataclass(frozen=True)
class ParameterModel:
    """One formal parameter of a constructor or method.

    Attributes:
        type: Declared type (array-shaped for a trailing varargs parameter)
        name: Parameter name as declared
        position: Zero-based index in the formal parameter list
        nullable: True/False from an explicit nullability annotation,
            None when no such annotation was found
    """
    type: TypeReference
    name: str
    position: int
    nullable: Optional[bool] = None

    def __post_init__(self):
        if self.position < 0:
            raise ValueError(f"Parameter position must be non-negative, got {self.position}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.to_dict(),
            'name': self.name,
            'position': self.position,
            'nullable': self.nullable,
        }

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


@dataclass(frozen=True)
class ThrowsTag:
    """A documented exception and the plain-text condition under which it is thrown."""
    exception_type: TypeReference
    comment: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': 'throws',
            'exception': self.exception_type.qualified_name,
            'comment': self.comment,
        }

    def __str__(self) -> str:
        return f"@throws {self.exception_type} {self.comment}".rstrip()


@dataclass(frozen=True)
class ParamTag:
    """A documented parameter description."""
    parameter: ParameterModel
    comment: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': 'param',
            'parameter': self.parameter.name,
            'position': self.parameter.position,
            'comment': self.comment,
        }

    def __str__(self) -> str:
        return f"@param {self.parameter.name} {self.comment}".rstrip()


@dataclass(frozen=True)
class ReturnTag:
    """A documented return value description."""
    comment: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': 'return', 'comment': self.comment}

    def __str__(self) -> str:
        return f"@return {self.comment}".rstrip()


@dataclass(frozen=True)
class DocumentedExecutable:
    """Canonical record of one constructor or method and its resolved documentation.

    Attributes:
        containing_type: Type that declares the executable
        name: Simple name (the class simple name for constructors)
        signature: ``name(type,...)`` over erased qualified parameter types
        return_type: Return type, None exactly for constructors
        parameters: Formal parameters in declaration order
        is_varargs: Whether the last parameter is variadic
        throws_tags: Resolved ``@throws``/``@exception`` tags, duplicates kept
        param_tags: Resolved ``@param`` tags
        return_tag: Resolved ``@return`` tag, if any
    """
    containing_type: TypeReference
    name: str
    signature: str
    return_type: Optional[TypeReference] = None
    parameters: Tuple[ParameterModel, ...] = ()
    is_varargs: bool = False
    throws_tags: Tuple[ThrowsTag, ...] = ()
    param_tags: Tuple[ParamTag, ...] = ()
    return_tag: Optional[ReturnTag] = None

    def __post_init__(self):
        # Accept lists from callers but store tuples so instances stay hashable.
        object.__setattr__(self, 'parameters', tuple(self.parameters))
        object.__setattr__(self, 'throws_tags', tuple(self.throws_tags))
        object.__setattr__(self, 'param_tags', tuple(self.param_tags))

    @property
    def is_constructor(self) -> bool:
        return self.return_type is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'containing_type': self.containing_type.qualified_name,
            'name': self.name,
            'signature': self.signature,
            'kind': 'constructor' if self.is_constructor else 'method',
            'return_type': self.return_type.to_dict() if self.return_type else None,
            'parameters': [p.to_dict() for p in self.parameters],
            'is_varargs': self.is_varargs,
            'throws_tags': [t.to_dict() for t in self.throws_tags],
            'param_tags': [t.to_dict() for t in self.param_tags],
            'return_tag': self.return_tag.to_dict() if self.return_tag else None,
        }

    def __str__(self) -> str:
        if self.is_constructor:
            return self.signature
        return f"{self.return_type} {self.signature}"


@dataclass(frozen=True)
class DocumentedType:
    """A documented class or interface with its constructors and methods.

    Raises:
        MissingInputError: If either field is None
    """
    declared_type: TypeReference
    executables: Tuple[DocumentedExecutable, ...] = ()

    def __post_init__(self):
        if self.declared_type is None:
            raise MissingInputError("DocumentedType requires a declared type")
        if self.executables is None:
            raise MissingInputError(
                f"DocumentedType {self.declared_type} requires an executables list")
        object.__setattr__(self, 'executables', tuple(self.executables))

    @property
    def constructors(self) -> Tuple[DocumentedExecutable, ...]:
        return tuple(e for e in self.executables if e.is_constructor)

    @property
    def methods(self) -> Tuple[DocumentedExecutable, ...]:
        return tuple(e for e in self.executables if not e.is_constructor)

    def find(self, signature: str) -> Optional[DocumentedExecutable]:
        """Look up an executable by its signature."""
        for executable in self.executables:
            if executable.signature == signature:
                return executable
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.declared_type.qualified_name,
            'executables': [e.to_dict() for e in self.executables],
        }

    def __str__(self) -> str:
        return f"DocumentedType({self.declared_type}, executables={len(self.executables)})"
