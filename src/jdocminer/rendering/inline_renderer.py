"""Expansion of Javadoc inline tags such as ``{@code}`` and ``{@inheritDoc}``."""

import html
import re
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Set, Tuple
import logging

from jdocminer.config.constants import DEFAULTS, JAVA
from jdocminer.doctree.base_provider import DocTreeProvider
from jdocminer.doctree.model import ClassDoc, MethodDoc, ParamTagDoc, Tag, ThrowsTagDoc

logger = logging.getLogger(__name__)

INLINE_TAG_OPEN = "{@"
INLINE_NAME_PATTERN = re.compile(r"^(\S*)\s*(.*)$", re.DOTALL)


class InlineTagRenderer(ABC):
    """Renders the comment of a block tag to flat text.

    The result may still contain HTML markup, from the source comment or
    produced by the expansion itself.
    """

    @abstractmethod
    def render(self, tag: Tag, context: ClassDoc) -> str:
        """Render the comment of ``tag``.

        Args:
            tag: Block tag whose comment is rendered
            context: Class whose documentation is being generated

        Returns:
            Rendered comment text
        """


class HtmlInlineTagRenderer(InlineTagRenderer):
    """Expands inline tags the way the standard doclet's HTML output does."""

    def __init__(self, provider: DocTreeProvider, max_depth: int = DEFAULTS.MAX_INHERIT_DOC_DEPTH):
        """Initialize the renderer.

        Args:
            provider: Provider used to find documentation for ``{@inheritDoc}``
            max_depth: Maximum nesting of ``{@inheritDoc}`` expansions
        """
        self.provider = provider
        self.max_depth = max_depth

    def render(self, tag: Tag, context: ClassDoc) -> str:
        return self._expand(tag.comment_text, tag, context, 0)

    def _expand(self, text: str, tag: Tag, context: ClassDoc, depth: int) -> str:
        pieces = []
        for literal, inline in split_inline_tags(text):
            pieces.append(literal)
            if inline is not None:
                name, body = inline
                pieces.append(self._render_inline(name, body, tag, context, depth))
        return "".join(pieces)

    def _render_inline(self, name: str, body: str, tag: Tag, context: ClassDoc, depth: int) -> str:
        if name == 'code':
            return f"<code>{html.escape(body)}</code>"
        if name == 'literal':
            return html.escape(body)
        if name in ('link', 'linkplain'):
            reference, label = split_reference(body)
            shown = label or self._display_reference(reference, context)
            return f"<code>{shown}</code>" if name == 'link' else shown
        if name == 'value':
            return self._display_reference(body.strip(), context) if body.strip() else ""
        if name == 'docRoot':
            return ""
        if name == 'inheritDoc':
            return self._inherit(tag, depth)
        logger.debug(f"Unknown inline tag {{@{name}}} rendered as its text")
        return body

    @staticmethod
    def _display_reference(reference: str, context: ClassDoc) -> str:
        """Show ``pkg.Cls#m(int)`` as ``Cls.m(int)``, omitting the class inside itself."""
        class_part, _, member = reference.partition('#')
        simple_class = class_part.rsplit('.', 1)[-1]
        if not member:
            return simple_class
        if not class_part or class_part in (context.name, context.qualified_name):
            return member
        return f"{simple_class}.{member}"

    def _inherit(self, tag: Tag, depth: int) -> str:
        if depth >= self.max_depth:
            logger.warning(f"{{@inheritDoc}} nested deeper than {self.max_depth} in {tag!r}")
            return ""
        holder = tag.holder
        if not isinstance(holder, MethodDoc):
            return ""

        matcher = self._matcher_for(tag)
        if matcher is None:
            return ""
        inherited = self._find_inherited(holder, matcher, set())
        if inherited is None:
            logger.debug(f"No inherited documentation for {tag!r} of {holder!r}")
            return ""
        return self._expand(inherited.comment_text, inherited,
                            inherited.holder.containing_class, depth + 1)

    def _matcher_for(self, tag: Tag) -> Optional[Callable[[MethodDoc], Optional[Tag]]]:
        """Build a function picking the tag of an ancestor method that ``tag`` inherits."""
        holder = tag.holder
        if isinstance(tag, ThrowsTagDoc):
            wanted = tag.exception_name.rsplit('.', 1)[-1]

            def match_throws(method: MethodDoc) -> Optional[Tag]:
                for candidate in method.throws_tags():
                    if (isinstance(candidate, ThrowsTagDoc)
                            and candidate.exception_name.rsplit('.', 1)[-1] == wanted):
                        return candidate
                return None
            return match_throws

        if isinstance(tag, ParamTagDoc):
            names = [p.name for p in holder.parameters]
            if tag.parameter_name not in names:
                return None
            index = names.index(tag.parameter_name)

            def match_param(method: MethodDoc) -> Optional[Tag]:
                if index >= len(method.parameters):
                    return None
                name = method.parameters[index].name
                for candidate in method.param_tags():
                    if isinstance(candidate, ParamTagDoc) and candidate.parameter_name == name:
                        return candidate
                return None
            return match_param

        if tag.name == JAVA.RETURN_TAG:
            def match_return(method: MethodDoc) -> Optional[Tag]:
                tags = method.return_tags()
                return tags[0] if tags else None
            return match_return
        return None

    def _find_inherited(self, method: MethodDoc, matcher: Callable[[MethodDoc], Optional[Tag]],
                        visited: Set[int]) -> Optional[Tag]:
        visited.add(id(method))
        ancestors: List[MethodDoc] = []
        overridden = self.provider.overridden_method(method)
        if overridden is not None:
            ancestors.append(overridden)
        ancestors.extend(self.provider.implemented_methods(method))

        for ancestor in ancestors:
            if id(ancestor) in visited:
                continue
            found = matcher(ancestor)
            if found is not None:
                return found
            found = self._find_inherited(ancestor, matcher, visited)
            if found is not None:
                return found
        return None


def split_inline_tags(text: str) -> List[Tuple[str, Optional[Tuple[str, str]]]]:
    """Split text into literal runs, each followed by the inline tag after it.

    Braces inside an inline tag nest, so ``{@code {a}}`` is one tag. An
    unterminated inline tag is kept as literal text.

    Args:
        text: Comment text

    Returns:
        List of ``(literal, (name, body))`` pairs; the inline part is None
        for the trailing literal run
    """
    result: List[Tuple[str, Optional[Tuple[str, str]]]] = []
    position = 0
    while True:
        start = text.find(INLINE_TAG_OPEN, position)
        if start < 0:
            break
        end = _matching_brace(text, start)
        if end < 0:
            break
        inner = text[start + len(INLINE_TAG_OPEN):end]
        match = INLINE_NAME_PATTERN.match(inner)
        result.append((text[position:start], (match.group(1), match.group(2).rstrip())))
        position = end + 1
    result.append((text[position:], None))
    return result


def _matching_brace(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return index
    return -1


def split_reference(body: str) -> Tuple[str, str]:
    """Split a ``{@link}`` body into its reference and optional label.

    Whitespace inside a member's parameter list belongs to the reference:
    ``Graph#addEdge(Object, Object) add`` yields ``Graph#addEdge(Object, Object)``
    and ``add``.
    """
    body = body.strip()
    depth = 0
    for index, char in enumerate(body):
        if char == '(':
            depth += 1
        elif char == ')':
            depth = max(0, depth - 1)
        elif char.isspace() and depth == 0:
            return body[:index], body[index:].strip()
    return body, ""
