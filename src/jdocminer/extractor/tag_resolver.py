"""Resolution of the Javadoc tags that apply to a member, inherited ones included."""

from typing import List, Optional, Tuple
import logging

from jdocminer.doctree.base_provider import DocTreeProvider
from jdocminer.doctree.model import ExecutableMemberDoc, MethodDoc, ParamTagDoc, Tag, ThrowsTagDoc
from jdocminer.utils.error_handler import InvariantViolationError

logger = logging.getLogger(__name__)


class TagResolver:
    """Gathers the tags documenting a member from the member and its ancestors.

    Exception tags come from three sources, in this order and without
    de-duplication: the member's own ``@throws``/``@exception`` tags; the tags
    of its documentation holder, when the member inherits its comment; and the
    tags of every interface method the member implements, directly or through
    its superclasses, which the holder lookup stops short of once it finds a
    documented ancestor.
    """

    def __init__(self, provider: DocTreeProvider):
        self.provider = provider

    def holder(self, member: ExecutableMemberDoc) -> ExecutableMemberDoc:
        return self.provider.resolve_holder(member)

    def collect_raw_tags(self, member: ExecutableMemberDoc) -> List[Tag]:
        """Collect the raw exception tags of ``member``.

        Args:
            member: Constructor or method

        Returns:
            Own tags, then holder tags, then interface tags
        """
        tags: List[Tag] = list(member.throws_tags())

        holder = self.holder(member)
        if holder is not member:
            tags.extend(holder.throws_tags())

        if isinstance(holder, MethodDoc):
            for implemented in self.provider.implemented_methods(member):
                # An interface holder's tags were added above.
                if implemented is not holder:
                    tags.extend(implemented.throws_tags())

        logger.debug(f"{len(tags)} exception tags for {member!r} (holder {holder!r})")
        return tags

    def resolve(self, member: ExecutableMemberDoc) -> List[ThrowsTagDoc]:
        """Collect the exception tags of ``member`` and check their kind.

        Raises:
            InvariantViolationError: If a collected tag is not a ThrowsTagDoc
        """
        tags = self.collect_raw_tags(member)
        for index, tag in enumerate(tags):
            if not isinstance(tag, ThrowsTagDoc):
                raise InvariantViolationError(member.qualified_name + member.signature, index, tag)
        return tags

    def resolve_param_tags(self, member: ExecutableMemberDoc) -> List[Tuple[int, ParamTagDoc]]:
        """Pick the ``@param`` tag documenting each parameter.

        A parameter's own tag wins; otherwise the holder's tag for the
        parameter at the same position is used, since an override may rename
        its parameters.

        Returns:
            ``(position, tag)`` pairs in parameter order, undocumented parameters omitted
        """
        holder = self.holder(member)
        result = []
        for position, parameter in enumerate(member.parameters):
            tag = self._param_tag(member, parameter.name)
            if tag is None and holder is not member and position < len(holder.parameters):
                tag = self._param_tag(holder, holder.parameters[position].name)
            if tag is not None:
                result.append((position, tag))
        return result

    def resolve_return_tag(self, member: ExecutableMemberDoc) -> Optional[Tag]:
        """Return the member's own ``@return`` tag, else its holder's; None for constructors."""
        if member.is_constructor:
            return None
        own = member.return_tags()
        if own:
            return own[0]
        holder = self.holder(member)
        if holder is not member:
            inherited = holder.return_tags()
            if inherited:
                return inherited[0]
        return None

    @staticmethod
    def _param_tag(member: ExecutableMemberDoc, name: str) -> Optional[ParamTagDoc]:
        for tag in member.param_tags():
            if isinstance(tag, ParamTagDoc) and tag.parameter_name == name:
                return tag
        return None
