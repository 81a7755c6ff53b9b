#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/callouts.py
"""Callout restructuring.

A block-quote whose first line is a callout directive::

    > [!warning|meta]- Custom Title
    > body line

is rebuilt into a title block, an optional body paragraph made of the
directive paragraph's remaining lines, and a ``callout-content`` wrapper
holding every later child. The block-quote itself gets the callout classes
and ``data-callout*`` attributes consumed by the fold script and stylesheet.

Children are transformed before their parent, so callouts nested inside a
callout body are restructured as well.

"""

from __future__ import annotations

import logging
from typing import Any

from ofmark.ast.nodes import BlockQuote, Node, Paragraph, Text
from ofmark.ast.utils import with_render_attrs
from ofmark.grammar import CalloutDirective, parse_callout_directive
from ofmark.renderers.html import HtmlRenderer
from ofmark.transforms.base import ObsidianTransform, generated_block
from ofmark.utils.text import capitalize

logger = logging.getLogger(__name__)

CALLOUT_KEY = "callout"
CALLOUT_CONTENT_CLASS = "callout-content"

_FOLD_ICON = '<div class="fold-callout-icon"></div>'


def default_callout_title(kind: str) -> str:
    """Return the title used when a callout declares none, e.g. ``"My kind"`` for ``my-kind``."""
    return capitalize(kind).replace("-", " ")


def callout_title_markup(title_html: str, collapsible: bool) -> str:
    """Wrap rendered title content in the callout title block."""
    return (
        '<div class="callout-title">'
        '<div class="callout-icon"></div>'
        f'<div class="callout-title-inner">{title_html}</div>'
        f"{_FOLD_ICON if collapsible else ''}"
        "</div>"
    )


def callout_attributes(directive: CalloutDirective) -> dict[str, Any]:
    """Build the render attributes of a callout block-quote."""
    classes = ["callout", directive.kind]
    if directive.collapsible:
        classes.append("is-collapsible")
    if directive.collapsed:
        classes.append("is-collapsed")
    return {
        "class": classes,
        "data-callout": directive.kind,
        "data-callout-fold": directive.collapsible,
        "data-callout-metadata": directive.metadata,
    }


class CalloutTransform(ObsidianTransform):
    """Restructure callout block-quotes into title, body and collapsible content.

    Examples
    --------
    >>> quote = BlockQuote(children=[Paragraph(content=[Text(content="[!tldr] Summary")])])
    >>> result = CalloutTransform().transform(Document(children=[quote]))
    >>> result.children[0].metadata["render_attrs"]["class"]
    ['callout', 'abstract']

    """

    def visit_block_quote(self, node: BlockQuote) -> Node:
        """Restructure a BlockQuote node when it opens with a callout directive."""
        quote = super().visit_block_quote(node)
        if CALLOUT_KEY in quote.metadata:
            return quote

        first = quote.children[0] if quote.children else None
        if not isinstance(first, Paragraph) or not first.content:
            return quote
        first_text = first.content[0]
        if not isinstance(first_text, Text):
            return quote

        first_line, _, remaining_text = first_text.content.partition("\n")
        directive = parse_callout_directive(first_line)
        if directive is None:
            return quote

        rest = quote.children[1:]
        title_nodes = self._title_nodes(directive, first.content[1:])
        title_html = f"<p>{HtmlRenderer().render_inline(title_nodes)}</p>"

        children: list[Node] = [generated_block(callout_title_markup(title_html, directive.collapsible))]
        if remaining_text:
            children.append(Paragraph(content=[Text(content=remaining_text)]))
        if rest:
            children.append(
                with_render_attrs(BlockQuote(children=rest), {"class": [CALLOUT_CONTENT_CLASS]}, html_tag="div")
            )

        logger.debug("Callout '%s' (from '%s') in %s", directive.kind, directive.raw_kind, self.context.slug)
        callout = BlockQuote(children=children, metadata=quote.metadata.copy())
        callout.metadata[CALLOUT_KEY] = directive
        return with_render_attrs(callout, callout_attributes(directive))

    @staticmethod
    def _title_nodes(directive: CalloutDirective, siblings: list[Node]) -> list[Node]:
        if not directive.title and not siblings:
            return [Text(content=default_callout_title(directive.kind))]
        if directive.title and siblings:
            return [Text(content=directive.title + " "), *siblings]
        if directive.title:
            return [Text(content=directive.title)]
        return list(siblings)
