#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/obsidian_uri.py
"""Obsidian application link styling."""

from __future__ import annotations

from ofmark.ast.nodes import Link, Node
from ofmark.ast.utils import get_render_attrs, with_render_attrs
from ofmark.grammar import is_obsidian_uri
from ofmark.transforms.base import ObsidianTransform

OBSIDIAN_URI_CLASS = "obsidian-uri"


class ObsidianUriTransform(ObsidianTransform):
    """Mark ``obsidian://`` links with the ``obsidian-uri`` class."""

    def visit_link(self, node: Link) -> Node:
        """Classify a Link node."""
        link = super().visit_link(node)
        if not isinstance(link, Link) or not is_obsidian_uri(link.url):
            return link

        classes = list(get_render_attrs(link).get("class", []))
        if OBSIDIAN_URI_CLASS not in classes:
            classes.append(OBSIDIAN_URI_CLASS)
        return with_render_attrs(link, {"class": classes})
