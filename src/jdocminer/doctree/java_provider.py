"""DocTree provider that parses Java source with the javalang AST parser."""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Iterable
import logging

import javalang

from jdocminer.config.constants import JAVA, DEFAULTS
from jdocminer.doctree.base_provider import InMemoryDocTreeProvider
from jdocminer.doctree.javadoc_parser import parse_comment, split_first_word
from jdocminer.doctree.model import (
    AnnotationDesc,
    ClassDoc,
    ConstructorDoc,
    ImportedClass,
    MethodDoc,
    ParameterDoc,
    ParamTagDoc,
    SourcePosition,
    Tag,
    ThrowsTagDoc,
    TypeDoc,
)
from jdocminer.doctree.type_names import JAVA_LANG_TYPES
from jdocminer.utils import read_file, find_java_sources, SourceParseError

logger = logging.getLogger(__name__)


@dataclass
class CompilationUnitContext:
    """Name-resolution context of one source file."""
    file: str
    package: str = ""
    single_imports: Dict[str, str] = field(default_factory=dict)
    wildcard_packages: List[str] = field(default_factory=list)

    def qualify(self, simple_name: str) -> str:
        return f"{self.package}.{simple_name}" if self.package else simple_name


@dataclass
class _TypeEntry:
    class_doc: ClassDoc
    node: object
    context: CompilationUnitContext
    outer: Optional['_TypeEntry'] = None

    def scope(self) -> List['_TypeEntry']:
        """This entry and its enclosing entries, innermost first."""
        chain = []
        entry = self
        while entry is not None:
            chain.append(entry)
            entry = entry.outer
        return chain


class JavaSourceProvider(InMemoryDocTreeProvider):
    """Builds the declaration tree from ``.java`` files.

    Loading runs in three phases so that references between files resolve
    regardless of load order: register every type, link supertypes, then
    build constructors and methods with their Javadoc tags. Supertypes are
    linked when their subclass is loaded, so sources that reference each
    other must be passed to the same ``load`` call.
    """

    def __init__(self, encoding: str = DEFAULTS.ENCODING, fail_on_parse_error: bool = False):
        """Initialize the Java source provider.

        Args:
            encoding: Source file encoding
            fail_on_parse_error: Raise SourceParseError instead of skipping bad files
        """
        super().__init__(name="java-source")
        self.encoding = encoding
        self.fail_on_parse_error = fail_on_parse_error
        self._entries: List[_TypeEntry] = []

    def load(self, paths: Iterable[str]) -> List[ClassDoc]:
        """Load Java files and directories.

        Args:
            paths: Java source files or directories searched recursively

        Returns:
            Classes declared in the loaded files, in load order

        Raises:
            FileNotFoundError: If a path does not exist
            SourceParseError: If a file cannot be parsed and fail_on_parse_error is set
        """
        files = find_java_sources(paths)
        logger.info(f"Loading {len(files)} Java source files")
        new_entries: List[_TypeEntry] = []
        for path in files:
            content = read_file(str(path), encoding=self.encoding)
            if content is None:
                self._parse_failed(str(path), "unreadable file")
                continue
            new_entries.extend(self._register_source(content, str(path)))
        self._build(new_entries)
        return [entry.class_doc for entry in new_entries]

    def load_source(self, content: str, source_file: str = "<memory>") -> List[ClassDoc]:
        """Load one compilation unit from a string.

        Args:
            content: Java source code
            source_file: File name recorded in source positions

        Returns:
            Classes declared in the source, in declaration order
        """
        entries = self._register_source(content, source_file)
        self._build(entries)
        return [entry.class_doc for entry in entries]

    def _parse_failed(self, source_file: str, reason: str) -> None:
        if self.fail_on_parse_error:
            raise SourceParseError(source_file, reason)
        logger.error(f"Skipping {source_file}: {reason}")

    def _build(self, entries: List[_TypeEntry]) -> None:
        for entry in entries:
            self._link_supertypes(entry)
        for entry in entries:
            self._build_members(entry)
        logger.debug(f"Built {len(entries)} classes")

    # Phase 1: registration

    def _register_source(self, content: str, source_file: str) -> List[_TypeEntry]:
        try:
            tree = javalang.parse.parse(content)
        except javalang.parser.JavaSyntaxError as e:
            self._parse_failed(source_file, f"Java syntax error: {getattr(e, 'description', e)}")
            return []
        except javalang.tokenizer.LexerError as e:
            self._parse_failed(source_file, f"Java lexer error: {e}")
            return []

        context = CompilationUnitContext(
            file=source_file,
            package=tree.package.name if tree.package else "",
        )
        for imported in tree.imports or []:
            if imported.static:
                continue
            if imported.wildcard:
                context.wildcard_packages.append(imported.path)
            else:
                context.single_imports[imported.path.rsplit('.', 1)[-1]] = imported.path

        entries: List[_TypeEntry] = []
        for node in tree.types or []:
            self._register_type(node, context.qualify(node.name), context, None, entries)
        logger.debug(f"Registered {len(entries)} types from {source_file}")
        return entries

    def _register_type(self, node, qualified_name: str, context: CompilationUnitContext,
                       outer: Optional[_TypeEntry], entries: List[_TypeEntry]) -> None:
        is_interface = isinstance(node, (javalang.tree.InterfaceDeclaration,
                                         javalang.tree.AnnotationDeclaration))
        class_doc = ClassDoc(
            qualified_name=qualified_name,
            position=self._position(node, context.file) or SourcePosition(context.file, 0, 0),
            imported_classes=[ImportedClass(q) for q in context.single_imports.values()],
            is_interface=is_interface,
            comment_text=parse_comment(getattr(node, 'documentation', None)).description,
        )
        self.add_class(class_doc)
        entry = _TypeEntry(class_doc, node, context, outer)
        entries.append(entry)

        for declaration in self._body_declarations(node):
            if isinstance(declaration, javalang.tree.TypeDeclaration):
                self._register_type(declaration, f"{qualified_name}.{declaration.name}",
                                    context, entry, entries)

    # Phase 2: supertypes

    def _link_supertypes(self, entry: _TypeEntry) -> None:
        node = entry.node
        class_doc = entry.class_doc
        type_variables = self._type_variables(entry)

        if isinstance(node, javalang.tree.InterfaceDeclaration):
            extended = node.extends or []
            class_doc.interfaces = [self._class_for(t, entry, type_variables) for t in extended]
            return
        if isinstance(node, javalang.tree.AnnotationDeclaration):
            return

        if isinstance(node, javalang.tree.EnumDeclaration):
            class_doc.superclass = self._external_class("java.lang.Enum")
        elif node.extends is not None:
            class_doc.superclass = self._class_for(node.extends, entry, type_variables)
        elif class_doc.qualified_name != JAVA.ROOT_TYPE:
            class_doc.superclass = self._external_class(JAVA.ROOT_TYPE)
        class_doc.interfaces = [self._class_for(t, entry, type_variables)
                                for t in node.implements or []]

    def _class_for(self, type_node, entry: _TypeEntry, type_variables: Dict[str, str]) -> ClassDoc:
        qualified_name = self._type_doc(type_node, entry, type_variables).qualified_type_name
        return self.find_class(qualified_name) or self._external_class(qualified_name)

    def _external_class(self, qualified_name: str) -> ClassDoc:
        """Return a name-only class for a type whose source is not loaded."""
        existing = self.find_class(qualified_name)
        if existing is not None:
            return existing
        logger.debug(f"Creating external class {qualified_name}")
        return self.add_class(ClassDoc(qualified_name, is_external=True))

    # Phase 3: members

    def _build_members(self, entry: _TypeEntry) -> None:
        node = entry.node
        class_doc = entry.class_doc
        if isinstance(node, javalang.tree.AnnotationDeclaration):
            return

        class_variables = self._type_variables(entry)
        for declaration in self._body_declarations(node):
            if isinstance(declaration, javalang.tree.ConstructorDeclaration):
                variables = self._method_type_variables(declaration, entry, class_variables)
                constructor = ConstructorDoc(
                    name=class_doc.name,
                    containing_class=class_doc,
                    position=self._position(declaration, entry.context.file),
                    modifiers=list(declaration.modifiers or []),
                    **self._executable_parts(declaration, entry, variables),
                )
                class_doc.add_constructor(constructor)
            elif isinstance(declaration, javalang.tree.MethodDeclaration):
                variables = self._method_type_variables(declaration, entry, class_variables)
                method = MethodDoc(
                    name=declaration.name,
                    containing_class=class_doc,
                    return_type=self._type_doc(declaration.return_type, entry, variables),
                    position=self._position(declaration, entry.context.file),
                    modifiers=list(declaration.modifiers or []),
                    **self._executable_parts(declaration, entry, variables),
                )
                class_doc.add_method(method)

        if not class_doc.is_interface and not class_doc.constructors:
            # javac adds a default constructor; it has no position of its own.
            class_doc.add_constructor(ConstructorDoc(
                name=class_doc.name,
                containing_class=class_doc,
                position=class_doc.position,
                modifiers=['public'],
            ))

    def _executable_parts(self, declaration, entry: _TypeEntry, variables: Dict[str, str]) -> dict:
        parameters = []
        for formal in declaration.parameters or []:
            parameters.append(ParameterDoc(
                name=formal.name,
                type=self._type_doc(formal.type, entry, variables),
                annotations=[AnnotationDesc(a.name) for a in formal.annotations or []],
            ))
        is_varargs = bool(declaration.parameters) and bool(declaration.parameters[-1].varargs)

        parsed = parse_comment(getattr(declaration, 'documentation', None))
        tags = [self._make_tag(name, text, entry) for name, text in parsed.block_tags]
        return {
            'parameters': parameters,
            'is_varargs': is_varargs,
            'comment_text': parsed.description,
            'tags': tags,
        }

    def _make_tag(self, name: str, text: str, entry: _TypeEntry) -> Tag:
        if name in JAVA.throws_tag_names:
            exception_name, comment = split_first_word(text)
            return ThrowsTagDoc(
                name=name,
                exception_name=exception_name,
                exception_comment=comment,
                exception_type=self._resolve_exception(exception_name, entry),
            )
        if name == JAVA.PARAM_TAG:
            parameter_name, comment = split_first_word(text)
            return ParamTagDoc(name=name, parameter_name=parameter_name, parameter_comment=comment)
        return Tag(name, text)

    def _resolve_exception(self, written_name: str, entry: _TypeEntry) -> Optional[ClassDoc]:
        """Resolve an exception name to a loaded or ``java.lang`` class, if possible."""
        if not written_name:
            return None
        qualified_name = self._resolve_name(written_name, entry, {}, require_known=True)
        if qualified_name is None:
            return None
        class_doc = self.find_class(qualified_name)
        if class_doc is not None:
            return class_doc
        package, _, simple_name = qualified_name.rpartition('.')
        if package == JAVA.LANG_PACKAGE and simple_name in JAVA_LANG_TYPES:
            return self._external_class(qualified_name)
        return None

    # Type names

    def _type_variables(self, entry: _TypeEntry) -> Dict[str, str]:
        """Erasures of the type variables in scope of a type, inner shadowing outer."""
        variables: Dict[str, str] = {}
        for scope_entry in reversed(entry.scope()):
            for parameter in getattr(scope_entry.node, 'type_parameters', None) or []:
                variables[parameter.name] = self._erasure(parameter, entry, variables)
        return variables

    def _method_type_variables(self, declaration, entry: _TypeEntry,
                               class_variables: Dict[str, str]) -> Dict[str, str]:
        variables = dict(class_variables)
        for parameter in declaration.type_parameters or []:
            variables[parameter.name] = self._erasure(parameter, entry, variables)
        return variables

    def _erasure(self, type_parameter, entry: _TypeEntry, variables: Dict[str, str]) -> str:
        bounds = type_parameter.extends or []
        if not bounds:
            return JAVA.ROOT_TYPE
        # A bound may mention the parameter itself (<T extends Comparable<T>>).
        scope = {k: v for k, v in variables.items() if k != type_parameter.name}
        return self._type_doc(bounds[0], entry, scope).qualified_type_name

    def _type_doc(self, type_node, entry: _TypeEntry, variables: Dict[str, str]) -> TypeDoc:
        """Erase and qualify a javalang type node."""
        if type_node is None:
            return TypeDoc(JAVA.VOID)

        names = []
        dimensions = 0
        node = type_node
        while node is not None:
            names.append(node.name)
            dimensions += len(node.dimensions or [])
            node = getattr(node, 'sub_type', None)

        written = ".".join(names)
        qualified = self._resolve_name(written, entry, variables) or written
        return TypeDoc(qualified, "[]" * dimensions)

    def _resolve_name(self, written: str, entry: _TypeEntry, variables: Dict[str, str],
                      require_known: bool = False) -> Optional[str]:
        """Qualify a written type name in the scope of ``entry``.

        Args:
            written: Simple or dotted name as written in source
            entry: Type whose scope applies
            variables: Type variables in scope, mapped to their erasures
            require_known: Only accept imports that name a loaded class

        Returns:
            Qualified name, or None when the name cannot be resolved
        """
        if written in JAVA.primitive_types:
            return written
        if written in variables:
            return variables[written]
        if '.' in written:
            head, rest = written.split('.', 1)
            head_qualified = self._lookup_simple(head, entry, require_known)
            if head_qualified is not None:
                member_type = f"{head_qualified}.{rest}"
                if not require_known or self.find_class(member_type) is not None:
                    return member_type
            if self.find_class(written) is not None or not require_known:
                return written
            return None
        return self._lookup_simple(written, entry, require_known)

    def _lookup_simple(self, name: str, entry: _TypeEntry, require_known: bool) -> Optional[str]:
        for scope_entry in entry.scope():
            if scope_entry.class_doc.name == name:
                return scope_entry.class_doc.qualified_name
            member_type = f"{scope_entry.class_doc.qualified_name}.{name}"
            if self._is_loaded(member_type):
                return member_type

        context = entry.context
        imported = context.single_imports.get(name)
        if imported is not None and (not require_known or self._is_loaded(imported)):
            return imported

        same_package = context.qualify(name)
        if self._is_loaded(same_package):
            return same_package

        for package in context.wildcard_packages:
            candidate = f"{package}.{name}"
            if self._is_loaded(candidate):
                return candidate

        if name in JAVA_LANG_TYPES:
            return f"{JAVA.LANG_PACKAGE}.{name}"
        return None

    def _is_loaded(self, qualified_name: str) -> bool:
        class_doc = self.find_class(qualified_name)
        return class_doc is not None and not class_doc.is_external

    @staticmethod
    def _body_declarations(node) -> list:
        body = node.body
        if body is None:
            return []
        if isinstance(body, list):
            return list(body)
        # Enum bodies keep constants and member declarations apart.
        return list(getattr(body, 'declarations', None) or [])

    @staticmethod
    def _position(node, source_file: str) -> Optional[SourcePosition]:
        position = getattr(node, 'position', None)
        if position is None:
            return None
        return SourcePosition(source_file, position.line, position.column)
