"""Extraction of documented types from a declaration tree."""

from typing import Iterable, List, Optional
import logging

from jdocminer.config.constants import JAVA
from jdocminer.data_models import (
    DocumentedExecutable,
    DocumentedType,
    ParamTag,
    ReturnTag,
    ThrowsTag,
    TypeReference,
)
from jdocminer.doctree.base_provider import DocTreeProvider
from jdocminer.doctree.model import ClassDoc, ExecutableMemberDoc, Tag, ThrowsTagDoc
from jdocminer.extractor.comment_normalizer import CommentNormalizer
from jdocminer.extractor.exception_resolver import ExceptionNameResolver
from jdocminer.extractor.member_collector import MemberCollector
from jdocminer.extractor.parameter_builder import ParameterModelBuilder
from jdocminer.extractor.tag_resolver import TagResolver
from jdocminer.output.printer import OutputPrinter
from jdocminer.rendering.inline_renderer import HtmlInlineTagRenderer, InlineTagRenderer
from jdocminer.utils.error_handler import MissingInputError

logger = logging.getLogger(__name__)


class JavadocExtractor:
    """Builds a DocumentedType for a class from its Javadoc comments.

    For each constructor and method the collector yields, the extractor
    resolves the applicable tags, qualifies exception names, renders and
    strips tag comments, and models the parameters. The resulting type is
    handed to the printer only once every member has been built, so a
    failing member leaves no partial output.
    """

    def __init__(self, provider: DocTreeProvider,
                 renderer: Optional[InlineTagRenderer] = None,
                 normalizer: Optional[CommentNormalizer] = None,
                 printer: Optional[OutputPrinter] = None,
                 root_type: str = JAVA.ROOT_TYPE):
        """Initialize the extractor.

        Args:
            provider: Source of class declarations and inheritance queries
            renderer: Inline tag renderer (default: HtmlInlineTagRenderer)
            normalizer: Comment normalizer (default: CommentNormalizer)
            printer: Receives each extracted type; None to skip emission
            root_type: Universal root type whose methods are excluded

        Raises:
            MissingInputError: If provider is None
        """
        if provider is None:
            raise MissingInputError("JavadocExtractor requires a DocTree provider")
        self.provider = provider
        self.collector = MemberCollector(root_type)
        self.tag_resolver = TagResolver(provider)
        self.exception_resolver = ExceptionNameResolver()
        self.parameter_builder = ParameterModelBuilder()
        self.renderer = renderer or HtmlInlineTagRenderer(provider)
        self.normalizer = normalizer or CommentNormalizer()
        self.printer = printer

    def extract(self, class_doc: ClassDoc) -> DocumentedType:
        """Extract the documented constructors and methods of one class.

        Args:
            class_doc: Target class

        Returns:
            DocumentedType with one executable per collected member

        Raises:
            MissingInputError: If class_doc is None
            InvariantViolationError: If a member's exception tags are malformed
        """
        if class_doc is None:
            raise MissingInputError(
                "No class to extract",
                suggestions=["Check the --class names against the loaded sources"],
            )

        logger.info(f"Extracting {class_doc.qualified_name}")
        members = self.collector.collect(class_doc)
        executables = [self.build_executable(member, class_doc) for member in members]
        documented_type = DocumentedType(TypeReference.of(class_doc.qualified_name), executables)

        if self.printer is not None:
            self.printer.print(documented_type)
        return documented_type

    def extract_all(self, class_docs: Iterable[ClassDoc]) -> List[DocumentedType]:
        """Extract several classes independently, in the given order."""
        return [self.extract(class_doc) for class_doc in class_docs]

    def build_executable(self, member: ExecutableMemberDoc,
                         context: Optional[ClassDoc] = None) -> DocumentedExecutable:
        """Build the documented record of one constructor or method.

        Args:
            member: Constructor or method
            context: Class being documented, used to render comments; defaults
                to the member's declaring class

        Returns:
            DocumentedExecutable for ``member``

        Raises:
            MissingInputError: If member is None
            InvariantViolationError: If a collected exception tag is malformed
        """
        if member is None:
            raise MissingInputError("No member to build")
        context = context or member.containing_class

        throws_tags = [self._throws_tag(tag, member, context)
                       for tag in self.tag_resolver.resolve(member)]

        parameters = self.parameter_builder.build(member)
        param_tags = [ParamTag(parameters[position], self._comment(tag, context))
                      for position, tag in self.tag_resolver.resolve_param_tags(member)]

        return_tag = None
        raw_return = self.tag_resolver.resolve_return_tag(member)
        if raw_return is not None:
            return_tag = ReturnTag(self._comment(raw_return, context))

        return_type = None
        if not member.is_constructor:
            return_type = TypeReference.of(str(member.return_type))

        return DocumentedExecutable(
            containing_type=TypeReference.of(member.containing_class.qualified_name),
            name=member.name,
            signature=member.name + member.signature,
            return_type=return_type,
            parameters=parameters,
            is_varargs=member.is_varargs,
            throws_tags=throws_tags,
            param_tags=param_tags,
            return_tag=return_tag,
        )

    def _throws_tag(self, tag: ThrowsTagDoc, member: ExecutableMemberDoc,
                    context: ClassDoc) -> ThrowsTag:
        exception_name = self.exception_resolver.resolve(tag, member)
        return ThrowsTag(TypeReference.of(exception_name), self._comment(tag, context))

    def _comment(self, tag: Tag, context: ClassDoc) -> str:
        return self.normalizer.normalize(self.renderer.render(tag, context))
