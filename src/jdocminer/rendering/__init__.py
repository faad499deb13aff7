"""Inline tag rendering for Javadoc comments."""

from .inline_renderer import InlineTagRenderer, HtmlInlineTagRenderer, split_inline_tags, split_reference

__all__ = ['InlineTagRenderer', 'HtmlInlineTagRenderer', 'split_inline_tags', 'split_reference']
