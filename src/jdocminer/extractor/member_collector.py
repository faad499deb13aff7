"""Collection of the constructors and methods a documented type exposes."""

from typing import Dict, List
import logging

from jdocminer.config.constants import JAVA
from jdocminer.doctree.model import ClassDoc, ConstructorDoc, ExecutableMemberDoc, MethodDoc

logger = logging.getLogger(__name__)


class MemberCollector:
    """Enumerates constructors and (also inherited) methods of a class.

    Methods declared by the root type are never collected. Walking the
    superclass chain from the target upward, a method is kept only the first
    time its ``name + signature`` key is seen, so an override always hides
    the method it overrides.
    """

    def __init__(self, root_type: str = JAVA.ROOT_TYPE):
        """Initialize the collector.

        Args:
            root_type: Qualified name of the universal root type
        """
        self.root_type = root_type

    def collect(self, class_doc: ClassDoc) -> List[ExecutableMemberDoc]:
        """Return constructors (declaration order) followed by methods (first-seen order).

        Args:
            class_doc: Class whose members are collected

        Returns:
            Ordered list of members to document
        """
        constructors = self.collect_constructors(class_doc)
        methods = self.collect_methods(class_doc)
        logger.debug(f"Collected {len(constructors)} constructors and "
                     f"{len(methods)} methods of {class_doc.qualified_name}")
        return constructors + methods

    def collect_constructors(self, class_doc: ClassDoc) -> List[ConstructorDoc]:
        """Return declared constructors without the compiler's default constructor."""
        return [constructor for constructor in class_doc.constructors
                if not self.is_default_constructor(constructor, class_doc)]

    @staticmethod
    def is_default_constructor(constructor: ConstructorDoc, class_doc: ClassDoc) -> bool:
        """A default constructor is positioned exactly where its class is declared."""
        return constructor.position is not None and constructor.position == class_doc.position

    def collect_methods(self, class_doc: ClassDoc) -> List[MethodDoc]:
        """Return non-synthetic methods of the class and its superclasses below the root."""
        methods: Dict[str, MethodDoc] = {}
        visited = set()
        current = class_doc
        while (current is not None
               and current.qualified_name != self.root_type
               and id(current) not in visited):
            visited.add(id(current))
            for method in current.methods:
                if method.is_synthetic:
                    continue
                key = method.name + method.signature
                if key not in methods:
                    methods[key] = method
            current = current.superclass
        return list(methods.values())
