"""Declaration tree records: classes, members, parameters and Javadoc tags.

These records are what a DocTree provider hands to the extractor. They are
plain mutable objects linked into a graph (members point to their class,
classes to their superclass and interfaces, tags to the member holding them),
so they compare by identity.
"""

from dataclasses import dataclass
from typing import List, Optional

from jdocminer.config.constants import JAVA


@dataclass(frozen=True)
class SourcePosition:
    """Location of a declaration in a source file."""
    file: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True)
class TypeDoc:
    """A type as used in a signature, already erased and qualified.

    Attributes:
        qualified_type_name: Qualified element type name (``java.util.List``)
        dimension: One ``[]`` per array dimension
    """
    qualified_type_name: str
    dimension: str = ""

    @property
    def simple_type_name(self) -> str:
        return self.qualified_type_name.rsplit('.', 1)[-1]

    @property
    def is_primitive(self) -> bool:
        return self.qualified_type_name in JAVA.primitive_types

    def __str__(self) -> str:
        return self.qualified_type_name + self.dimension


@dataclass(frozen=True)
class AnnotationDesc:
    """An annotation attached to a declaration, by its written type name."""
    type_name: str

    @property
    def simple_name(self) -> str:
        return self.type_name.rsplit('.', 1)[-1]


@dataclass(frozen=True)
class ImportedClass:
    """A single-type import of a compilation unit."""
    qualified_name: str

    @property
    def name(self) -> str:
        return self.qualified_name.rsplit('.', 1)[-1]


class Tag:
    """A Javadoc block tag as written, e.g. ``@see Foo``.

    Attributes:
        name: Tag name including the ``@``
        text: Raw tag text after the name, inline tags unexpanded
        holder: Member whose comment contains this tag
    """

    def __init__(self, name: str, text: str = "", holder: Optional['ExecutableMemberDoc'] = None):
        self.name = name
        self.text = text
        self.holder = holder

    @property
    def kind(self) -> str:
        """Tag kind; ``@exception`` is a synonym of ``@throws``."""
        if self.name in JAVA.throws_tag_names:
            return JAVA.THROWS_TAG
        return self.name

    @property
    def comment_text(self) -> str:
        """Text that documents the tagged element."""
        return self.text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name} {self.text!r})"


class ThrowsTagDoc(Tag):
    """A ``@throws`` or ``@exception`` tag.

    Attributes:
        exception_name: Exception name as written in the comment
        exception_type: Declared or loadable class the name resolves to, if any
        exception_comment: Condition text after the exception name
    """

    def __init__(self, name: str, exception_name: str, exception_comment: str = "",
                 exception_type: Optional['ClassDoc'] = None,
                 holder: Optional['ExecutableMemberDoc'] = None):
        text = f"{exception_name} {exception_comment}".strip()
        super().__init__(name, text, holder)
        self.exception_name = exception_name
        self.exception_comment = exception_comment
        self.exception_type = exception_type

    @property
    def comment_text(self) -> str:
        return self.exception_comment


class ParamTagDoc(Tag):
    """A ``@param`` tag."""

    def __init__(self, name: str, parameter_name: str, parameter_comment: str = "",
                 holder: Optional['ExecutableMemberDoc'] = None):
        text = f"{parameter_name} {parameter_comment}".strip()
        super().__init__(name, text, holder)
        self.parameter_name = parameter_name
        self.parameter_comment = parameter_comment

    @property
    def is_type_parameter(self) -> bool:
        return self.parameter_name.startswith('<')

    @property
    def comment_text(self) -> str:
        return self.parameter_comment


class ParameterDoc:
    """A formal parameter declaration."""

    def __init__(self, name: str, type: TypeDoc,
                 annotations: Optional[List[AnnotationDesc]] = None):
        self.name = name
        self.type = type
        self.annotations = list(annotations or [])

    def __repr__(self) -> str:
        return f"ParameterDoc({self.type} {self.name})"


class ExecutableMemberDoc:
    """A constructor or method declaration with its Javadoc comment.

    Attributes:
        name: Simple name (class simple name for constructors)
        containing_class: Declaring class
        parameters: Formal parameters in declaration order
        comment_text: Main description, inline tags unexpanded
        tags: Block tags in comment order
        position: Declared source position, None if unknown
        is_varargs: Whether the last parameter is variadic
        is_synthetic: Whether the compiler synthesized this member
    """

    def __init__(self, name: str, containing_class: 'ClassDoc',
                 parameters: Optional[List[ParameterDoc]] = None,
                 comment_text: str = "",
                 tags: Optional[List[Tag]] = None,
                 position: Optional[SourcePosition] = None,
                 is_varargs: bool = False,
                 is_synthetic: bool = False,
                 modifiers: Optional[List[str]] = None):
        self.name = name
        self.containing_class = containing_class
        self.parameters = list(parameters or [])
        self.comment_text = comment_text
        self.tags = []
        self.position = position
        self.is_varargs = is_varargs
        self.is_synthetic = is_synthetic
        self.modifiers = set(modifiers or [])
        for tag in tags or []:
            self.add_tag(tag)

    def add_tag(self, tag: Tag) -> None:
        tag.holder = self
        self.tags.append(tag)

    def tags_named(self, name: str) -> List[Tag]:
        """Return the block tags with exactly this name, in comment order."""
        return [tag for tag in self.tags if tag.name == name]

    def throws_tags(self) -> List[Tag]:
        """Return ``@throws`` tags followed by ``@exception`` tags."""
        tags = []
        for name in JAVA.throws_tag_names:
            tags.extend(self.tags_named(name))
        return tags

    def param_tags(self) -> List[Tag]:
        return self.tags_named(JAVA.PARAM_TAG)

    def return_tags(self) -> List[Tag]:
        return self.tags_named(JAVA.RETURN_TAG)

    @property
    def is_constructor(self) -> bool:
        return False

    @property
    def is_static(self) -> bool:
        return 'static' in self.modifiers

    @property
    def parameter_types(self) -> List[str]:
        """Erased qualified parameter types, the varargs parameter in array form."""
        types = [str(p.type) for p in self.parameters]
        if self.is_varargs and types:
            types[-1] += '[]'
        return types

    @property
    def signature(self) -> str:
        """Erased parameter list, e.g. ``(java.lang.Object,int[])``."""
        return "(" + ",".join(self.parameter_types) + ")"

    @property
    def qualified_name(self) -> str:
        return f"{self.containing_class.qualified_name}.{self.name}"

    def has_main_description(self) -> bool:
        """Whether the comment has its own text rather than only ``{@inheritDoc}``."""
        text = self.comment_text.strip()
        return bool(text) and text != "{@inheritDoc}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qualified_name}{self.signature})"


class ConstructorDoc(ExecutableMemberDoc):
    """A constructor declaration."""

    @property
    def is_constructor(self) -> bool:
        return True


class MethodDoc(ExecutableMemberDoc):
    """A method declaration."""

    def __init__(self, name: str, containing_class: 'ClassDoc',
                 return_type: Optional[TypeDoc] = None, **kwargs):
        super().__init__(name, containing_class, **kwargs)
        self.return_type = return_type or TypeDoc(JAVA.VOID)


class ClassDoc:
    """A class or interface declaration and its inheritance links.

    Attributes:
        qualified_name: Fully qualified name (nested types use ``Outer.Inner``)
        position: Declared source position, None for external classes
        superclass: Direct superclass, None for interfaces and the root type
        interfaces: Directly implemented (or, for interfaces, extended) interfaces
        constructors: Declared constructors, including a synthesized default one
        methods: Declared methods
        imported_classes: Single-type imports of the declaring compilation unit
        is_interface: Whether this is an interface
        is_external: Whether the class is only known by name (no source loaded)
    """

    def __init__(self, qualified_name: str,
                 position: Optional[SourcePosition] = None,
                 superclass: Optional['ClassDoc'] = None,
                 interfaces: Optional[List['ClassDoc']] = None,
                 imported_classes: Optional[List[ImportedClass]] = None,
                 is_interface: bool = False,
                 is_external: bool = False,
                 comment_text: str = ""):
        self.qualified_name = qualified_name
        self.position = position
        self.superclass = superclass
        self.interfaces = list(interfaces or [])
        self.imported_classes = list(imported_classes or [])
        self.is_interface = is_interface
        self.is_external = is_external
        self.comment_text = comment_text
        self.constructors: List[ConstructorDoc] = []
        self.methods: List[MethodDoc] = []

    @property
    def name(self) -> str:
        return self.qualified_name.rsplit('.', 1)[-1]

    def add_constructor(self, constructor: ConstructorDoc) -> ConstructorDoc:
        constructor.containing_class = self
        self.constructors.append(constructor)
        return constructor

    def add_method(self, method: MethodDoc) -> MethodDoc:
        method.containing_class = self
        self.methods.append(method)
        return method

    def find_method(self, name: str, signature: str) -> Optional[MethodDoc]:
        """Return the declared method with this name and erased signature."""
        for method in self.methods:
            if method.name == name and method.signature == signature:
                return method
        return None

    def __repr__(self) -> str:
        kind = "interface" if self.is_interface else "class"
        return f"ClassDoc({kind} {self.qualified_name})"
