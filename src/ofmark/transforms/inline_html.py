#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/inline_html.py
"""Dialect rewriting inside raw HTML.

Raw HTML is not tokenized further, so wikilinks, highlights and tags written
inside it are rewritten by text substitution. Links and tags come out the
same as from the tree stages. Embeds (``![[...]]``) are left as written.
"""

from __future__ import annotations

import logging
import re

from ofmark.ast.nodes import HTMLBlock, HTMLInline, Node
from ofmark.ast.utils import is_generated
from ofmark.grammar import HIGHLIGHT_PATTERN, TAG_PATTERN, WikilinkMatch, is_numeric_tag, sub_wikilinks
from ofmark.transforms.base import ObsidianTransform
from ofmark.transforms.highlights import highlight_markup
from ofmark.transforms.tags import register_tag, tag_link_markup
from ofmark.transforms.wikilinks import resolve_link

logger = logging.getLogger(__name__)


class InlineHtmlTransform(ObsidianTransform):
    """Rewrite dialect syntax inside HTMLBlock and HTMLInline content."""

    def rewrite(self, html: str) -> str:
        """Apply wikilink, highlight and tag substitution to raw HTML text."""
        if self.options.wikilinks:
            html = sub_wikilinks(html, self._replace_wikilink)
        if self.options.highlight:
            html = HIGHLIGHT_PATTERN.sub(lambda m: highlight_markup(m.group(1)), html)
        if self.options.parse_tags:
            html = TAG_PATTERN.sub(self._replace_tag, html)
        return html

    def _replace_wikilink(self, link: WikilinkMatch, source: str) -> str:
        if link.embedded:
            return source
        return resolve_link(link.target, link.anchor, link.alias, self.context, self.options).to_html()

    def _replace_tag(self, match: re.Match[str]) -> str:
        value = match.group(1)
        if is_numeric_tag(value):
            return match.group(0)
        return tag_link_markup(self.context, register_tag(self.context, value))

    def visit_html_block(self, node: HTMLBlock) -> Node:
        """Rewrite an HTMLBlock node."""
        if is_generated(node):
            return HTMLBlock(content=node.content, metadata=node.metadata.copy())
        return HTMLBlock(content=self.rewrite(node.content), metadata=node.metadata.copy())

    def visit_html_inline(self, node: HTMLInline) -> Node:
        """Rewrite an HTMLInline node."""
        if is_generated(node):
            return HTMLInline(content=node.content, metadata=node.metadata.copy())
        return HTMLInline(content=self.rewrite(node.content), metadata=node.metadata.copy())
