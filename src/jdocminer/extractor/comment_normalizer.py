"""Conversion of rendered comments to plain text."""

import html
import re
from typing import Optional
import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r'\s+')
MARKUP_PATTERN = re.compile(r'<[^>]*>')

# Elements rendered on their own line; their text must not run into its neighbours.
BLOCK_ELEMENTS = [
    'br', 'p', 'div', 'li', 'ul', 'ol', 'dl', 'dt', 'dd', 'pre', 'blockquote',
    'table', 'tr', 'td', 'th', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
]


class CommentNormalizer:
    """Strips HTML from a comment, keeping its text with collapsed whitespace.

    Markup the parser rejects is stripped with a regular expression instead.
    """

    def __init__(self, parser: str = "html.parser"):
        """Initialize the normalizer.

        Args:
            parser: BeautifulSoup tree builder name
        """
        self.parser = parser

    def normalize(self, text: Optional[str]) -> str:
        """Return the plain text content of ``text``."""
        if not text:
            return ""
        if '<' not in text and '&' not in text:
            return self._collapse(text)

        try:
            soup = BeautifulSoup(text, self.parser)
            for element in soup.find_all(BLOCK_ELEMENTS):
                element.insert_before(" ")
                element.insert_after(" ")
            plain = soup.get_text()
        except (ParserRejectedMarkup, AssertionError) as e:
            logger.debug(f"Markup parsing failed ({e}), using regex fallback for {text!r}")
            plain = html.unescape(MARKUP_PATTERN.sub(' ', text))
        return self._collapse(plain)

    @staticmethod
    def _collapse(text: str) -> str:
        return WHITESPACE_PATTERN.sub(' ', text).strip()
