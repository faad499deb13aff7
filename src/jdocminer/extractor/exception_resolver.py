"""Best-effort qualification of exception names in ``@throws`` tags."""

import logging

from jdocminer.doctree.model import ExecutableMemberDoc, ThrowsTagDoc

logger = logging.getLogger(__name__)


class ExceptionNameResolver:
    """Returns the qualified exception name of a throws tag when it can be found.

    The tag's resolved exception type is used first. Failing that, the
    written name is looked up by simple name among the single-type imports of
    the member's declaring class. Otherwise the written name is returned as
    is; wildcard imports, same-package and nested types are not searched.
    """

    def resolve(self, throws_tag: ThrowsTagDoc, member: ExecutableMemberDoc) -> str:
        if throws_tag.exception_type is not None:
            return throws_tag.exception_type.qualified_name

        exception_name = throws_tag.exception_name
        for imported in member.containing_class.imported_classes:
            if imported.name == exception_name:
                return imported.qualified_name

        logger.debug(f"Cannot qualify exception {exception_name!r} of {member!r}")
        return exception_name
