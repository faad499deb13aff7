"""Base class for DocTree providers."""

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Set
import logging

from jdocminer.doctree.model import ClassDoc, ExecutableMemberDoc, MethodDoc

logger = logging.getLogger(__name__)


class DocTreeProvider(ABC):
    """Abstract source of documented declarations.

    Subclasses decide where classes come from; the inheritance-aware queries
    the extractor relies on are implemented here once over the model.
    """

    def __init__(self, name: str):
        """Initialize the base provider.

        Args:
            name: Provider name used in log messages
        """
        self.name = name
        logger.debug(f"Initialized {name} DocTree provider")

    @abstractmethod
    def find_class(self, qualified_name: str) -> Optional[ClassDoc]:
        """Return the class with this qualified name, or None if unknown."""

    @abstractmethod
    def all_classes(self) -> List[ClassDoc]:
        """Return every class with loaded declarations, in load order."""

    def top_level_classes(self) -> List[ClassDoc]:
        """Return loaded classes that are not nested in another loaded class."""
        known = {c.qualified_name for c in self.all_classes()}
        return [c for c in self.all_classes()
                if c.qualified_name.rpartition('.')[0] not in known]

    def superclasses(self, class_doc: ClassDoc) -> List[ClassDoc]:
        """Return the superclass chain of ``class_doc``, nearest first."""
        chain = []
        seen = {id(class_doc)}
        current = class_doc.superclass
        while current is not None and id(current) not in seen:
            chain.append(current)
            seen.add(id(current))
            current = current.superclass
        return chain

    def all_interfaces(self, class_doc: ClassDoc) -> List[ClassDoc]:
        """Return every interface reachable from ``class_doc``.

        Order: the class's own interfaces and their superinterfaces (depth
        first), then those of each superclass in turn.
        """
        result: List[ClassDoc] = []
        seen: Set[int] = set()

        def visit(interface: ClassDoc) -> None:
            if id(interface) in seen:
                return
            seen.add(id(interface))
            result.append(interface)
            for parent in interface.interfaces:
                visit(parent)

        for owner in [class_doc] + self.superclasses(class_doc):
            for interface in owner.interfaces:
                visit(interface)
        return result

    def overridden_method(self, method: MethodDoc) -> Optional[MethodDoc]:
        """Return the nearest superclass method that ``method`` overrides."""
        if method.is_static:
            return None
        for ancestor in self.superclasses(method.containing_class):
            candidate = ancestor.find_method(method.name, method.signature)
            if candidate is not None and not candidate.is_static:
                return candidate
        return None

    def implemented_methods(self, method: MethodDoc) -> List[MethodDoc]:
        """Return the interface methods that ``method`` implements, directly or transitively."""
        if method.is_static:
            return []
        implemented = []
        for interface in self.all_interfaces(method.containing_class):
            candidate = interface.find_method(method.name, method.signature)
            if candidate is not None and candidate is not method and not candidate.is_static:
                implemented.append(candidate)
        return implemented

    def resolve_holder(self, member: ExecutableMemberDoc) -> ExecutableMemberDoc:
        """Return the declaration whose comment applies to ``member``.

        A member with its own main description holds its documentation. A
        method without one (or with only ``{@inheritDoc}``) inherits from the
        method it overrides, then from the interface methods it implements.
        When nothing up the hierarchy is documented, the member itself is
        returned.
        """
        return self._resolve_holder(member, set())

    def _resolve_holder(self, member: ExecutableMemberDoc, visited: Set[int]) -> ExecutableMemberDoc:
        visited.add(id(member))
        if member.has_main_description() or not isinstance(member, MethodDoc):
            return member

        candidates: List[MethodDoc] = []
        overridden = self.overridden_method(member)
        if overridden is not None:
            candidates.append(overridden)
        candidates.extend(self.implemented_methods(member))

        for candidate in candidates:
            if id(candidate) in visited:
                continue
            holder = self._resolve_holder(candidate, visited)
            if holder.has_main_description():
                logger.debug(f"Documentation of {member!r} inherited from {holder!r}")
                return holder
        return member

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.name}, classes={len(self.all_classes())})"

    def __repr__(self) -> str:
        return self.__str__()


class InMemoryDocTreeProvider(DocTreeProvider):
    """Provider over classes registered programmatically."""

    def __init__(self, classes: Optional[List[ClassDoc]] = None, name: str = "in-memory"):
        super().__init__(name)
        self._classes: Dict[str, ClassDoc] = {}
        for class_doc in classes or []:
            self.add_class(class_doc)

    def add_class(self, class_doc: ClassDoc) -> ClassDoc:
        """Register a class; a later registration replaces an earlier one."""
        self._classes[class_doc.qualified_name] = class_doc
        return class_doc

    def find_class(self, qualified_name: str) -> Optional[ClassDoc]:
        return self._classes.get(qualified_name)

    def all_classes(self) -> List[ClassDoc]:
        return [c for c in self._classes.values() if not c.is_external]
