#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/highlights.py
"""Highlight rewriting.

``==text==`` spans become ``<span class="text-highlight">`` markup. Only the
Text children contribute to the span; nested formatting is dropped.
"""

from __future__ import annotations

from ofmark.ast.nodes import Highlight, Node, Text
from ofmark.transforms.base import ObsidianTransform, generated_inline
from ofmark.utils.html_utils import escape_html

HIGHLIGHT_CLASS = "text-highlight"


def highlight_markup(inner_html: str) -> str:
    """Wrap already-escaped markup in a highlight span."""
    return f'<span class="{HIGHLIGHT_CLASS}">{inner_html}</span>'


class HighlightTransform(ObsidianTransform):
    """Replace Highlight nodes with highlight spans."""

    def visit_highlight(self, node: Highlight) -> Node:
        """Flatten a Highlight node to an HTML span."""
        text = "".join(child.content for child in node.content if isinstance(child, Text))
        return generated_inline(highlight_markup(escape_html(text)))
