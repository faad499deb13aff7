"""Split raw Javadoc comments into a main description and block tags.

``javalang.javadoc`` keeps ``@throws`` tags in a dict keyed by exception
name, so a comment documenting the same exception under two conditions
loses one of them. This splitter keeps every block tag in comment order.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BLOCK_TAG_PATTERN = re.compile(r'^@([A-Za-z][\w.-]*)(?:\s+|$)(.*)$', re.DOTALL)
LEADING_STARS_PATTERN = re.compile(r'^\s*\*+ ?')


@dataclass
class ParsedComment:
    """A Javadoc comment split into its parts.

    Attributes:
        description: Main description, inline tags unexpanded
        block_tags: ``(name, text)`` pairs with ``@``-prefixed names, in comment order
    """
    description: str = ""
    block_tags: List[Tuple[str, str]] = field(default_factory=list)

    def tags_named(self, name: str) -> List[str]:
        return [text for tag_name, text in self.block_tags if tag_name == name]


def strip_comment_delimiters(raw: str) -> List[str]:
    """Remove ``/**``, ``*/`` and leading asterisks, returning the content lines."""
    body = raw.strip()
    if body.startswith('/**'):
        body = body[3:]
    elif body.startswith('/*'):
        body = body[2:]
    if body.endswith('*/'):
        body = body[:-2]

    lines = []
    for line in body.splitlines():
        line = LEADING_STARS_PATTERN.sub('', line, count=1)
        lines.append(line.rstrip())
    return lines


def parse_comment(raw: Optional[str]) -> ParsedComment:
    """Parse a raw Javadoc comment.

    A block tag starts on a line whose first non-blank character is ``@``,
    unless that line continues an inline tag opened on an earlier line.

    Args:
        raw: Comment text including its delimiters, or None

    Returns:
        ParsedComment (empty when ``raw`` is None or blank)
    """
    if not raw or not raw.strip():
        return ParsedComment()

    description_lines: List[str] = []
    blocks: List[Tuple[str, List[str]]] = []
    depth = 0

    for line in strip_comment_delimiters(raw):
        stripped = line.strip()
        match = BLOCK_TAG_PATTERN.match(stripped) if depth == 0 else None
        if match:
            blocks.append(('@' + match.group(1), [match.group(2)]))
        elif blocks:
            blocks[-1][1].append(stripped)
        else:
            description_lines.append(stripped)
        depth = max(0, depth + line.count('{') - line.count('}'))

    return ParsedComment(
        description=_join(description_lines),
        block_tags=[(name, _join(lines)) for name, lines in blocks],
    )


def split_first_word(text: str) -> Tuple[str, str]:
    """Split tag text into its first word and the remaining text."""
    parts = text.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def _join(lines: List[str]) -> str:
    return "\n".join(lines).strip()
