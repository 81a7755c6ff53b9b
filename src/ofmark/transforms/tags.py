#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/tags.py
"""Tag resolution.

Tags become links to the tag index page and are recorded in the document
context. Values made only of digits and slashes (``#42/7``) are not tags and
are restored as literal text, as are tags inside a link label, which cannot
hold a nested anchor.
"""

from __future__ import annotations

import logging

from ofmark.ast.nodes import Link, Node, Tag, Text
from ofmark.ast.utils import with_render_attrs
from ofmark.grammar import is_numeric_tag
from ofmark.transforms.base import ObsidianTransform
from ofmark.transforms.context import DocumentContext
from ofmark.utils.html_utils import escape_html
from ofmark.utils.text import slug_tag

logger = logging.getLogger(__name__)

TAG_LINK_CLASS = "tag-link"


def tag_url(context: DocumentContext, slug: str) -> str:
    """Build the tag index URL for a tag slug, relative to the current document."""
    return f"{context.base_url}/tags/{slug}"


def register_tag(context: DocumentContext, value: str) -> str:
    """Slug a tag value, record it on the context and return the slug."""
    slug = slug_tag(value)
    if context.add_tag(slug):
        logger.debug("Registered tag '%s' for %s", slug, context.slug)
    return slug


def tag_link_markup(context: DocumentContext, slug: str) -> str:
    """Render a tag link as an anchor element string."""
    return f'<a href="{escape_html(tag_url(context, slug))}" class="{TAG_LINK_CLASS}">{escape_html(slug)}</a>'


class TagTransform(ObsidianTransform):
    """Replace Tag nodes with tag index links."""

    _link_depth = 0

    def visit_link(self, node: Link) -> Node:
        """Transform a Link node, keeping tags in its label as text."""
        self._link_depth += 1
        try:
            return super().visit_link(node)
        finally:
            self._link_depth -= 1

    def visit_tag(self, node: Tag) -> Node:
        """Resolve a Tag node."""
        if self._link_depth or is_numeric_tag(node.value):
            return Text(content=f"#{node.value}")

        slug = register_tag(self.context, node.value)
        return with_render_attrs(
            Link(url=tag_url(self.context, slug), content=[Text(content=slug)]),
            {"class": [TAG_LINK_CLASS]},
        )
