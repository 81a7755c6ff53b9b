#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts a finished note
tree into an HTML fragment. Render attributes set by the transform stages
(``metadata["render_attrs"]``) become element attributes and
``metadata["html_tag"]`` overrides the element name, so a callout content
wrapper renders as ``<div class="callout-content">``.

Dialect nodes that were not rewritten (because their stage was disabled)
render back as their source syntax.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ofmark.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Highlight,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Tag,
    Text,
    ThematicBreak,
    WikiLink,
)
from ofmark.ast.utils import HTML_TAG_KEY, get_render_attrs
from ofmark.ast.visitors import NodeVisitor
from ofmark.renderers.base import BaseRenderer, InlineContentMixin
from ofmark.utils.html_utils import escape_html, format_attributes

logger = logging.getLogger(__name__)

CHECKBOX_INTERACTIVE_KEY = "checkbox_interactive"


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Examples
    --------
        >>> from ofmark.ast import Document, Heading, Text
        >>> from ofmark.renderers.html import HtmlRenderer
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>\\n'

    """

    def __init__(self) -> None:
        """Initialize the HTML renderer."""
        self._output: list[str] = []
        self._tight_lists: list[bool] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment

        """
        self._output = []
        self._tight_lists = []
        document.accept(self)
        return "".join(self._output)

    def render_inline(self, nodes: list[Node]) -> str:
        """Render a list of inline nodes to an HTML string."""
        self._output = []
        return self._render_inline_content(nodes)

    def _attrs(self, node: Node, base: Mapping[str, Any] | None = None) -> str:
        attrs = dict(base or {})
        attrs.update(get_render_attrs(node))
        return format_attributes(attrs)

    @staticmethod
    def _tag(node: Node, default: str) -> str:
        return node.metadata.get(HTML_TAG_KEY, default)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{node.level}{self._attrs(node)}>{content}</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Paragraphs directly inside tight list items render without ``<p>``
        unless they carry render attributes.
        """
        content = self._render_inline_content(node.content)
        attrs = self._attrs(node)
        if self._tight_lists and self._tight_lists[-1] and not attrs:
            self._output.append(content)
            return
        self._output.append(f"<p{attrs}>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        Render attributes land on the ``<code>`` element and replace the
        default ``language-*`` class.
        """
        base = {"class": [f"language-{node.language}"]} if node.language else {}
        escaped_content = escape_html(node.content)
        self._output.append(f"<pre><code{self._attrs(node, base)}>{escaped_content}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node (or a callout wrapper div)."""
        tag = self._tag(node, "blockquote")
        self._output.append(f"<{tag}{self._attrs(node)}>\n")

        # Block content inside a quote is never part of a tight list
        self._tight_lists.append(False)
        for child in node.children:
            child.accept(self)
        self._tight_lists.pop()

        self._output.append(f"</{tag}>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        tag = "ol" if node.ordered else "ul"
        base = {"start": node.start} if node.ordered and node.start != 1 else {}

        self._output.append(f"<{tag}{self._attrs(node, base)}>\n")
        self._tight_lists.append(node.tight)
        for item in node.items:
            item.accept(self)
        self._tight_lists.pop()
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node, including its task checkbox."""
        self._output.append(f"<li{self._attrs(node)}>")

        if node.task_status:
            checked = node.task_status == "checked"
            if node.metadata.get(CHECKBOX_INTERACTIVE_KEY):
                checkbox_attrs = {"type": "checkbox", "class": ["checkbox-toggle"], "checked": checked}
            else:
                checkbox_attrs = {"type": "checkbox", "disabled": True, "checked": checked}
            self._output.append(f"<input{format_attributes(checkbox_attrs)}> ")

        for child in node.children:
            child.accept(self)

        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node."""
        self._output.append(f"<table{self._attrs(node)}>\n")

        if node.header:
            self._output.append("<thead>\n")
            self._render_row(node.header, node.alignments, "th")
            self._output.append("</thead>\n")

        if node.rows:
            self._output.append("<tbody>\n")
            for row in node.rows:
                self._render_row(row, node.alignments, "td")
            self._output.append("</tbody>\n")

        self._output.append("</table>\n")

    def _render_row(self, row: TableRow, alignments: list, cell_tag: str) -> None:
        self._output.append("<tr>")
        for i, cell in enumerate(row.cells):
            alignment = cell.alignment or (alignments[i] if i < len(alignments) else None)
            base = {"style": f"text-align: {alignment}"} if alignment else {}
            content = self._render_inline_content(cell.content)
            self._output.append(f"<{cell_tag}{self._attrs(cell, base)}>{content}</{cell_tag}>")
        self._output.append("</tr>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        pass  # Handled by visit_table

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node."""
        pass  # Handled by visit_table

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr>\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node verbatim."""
        if node.content:
            self._output.append(node.content)
            if not node.content.endswith("\n"):
                self._output.append("\n")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"<del>{self._render_inline_content(node.content)}</del>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"<code>{escape_html(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content)
        base: dict[str, Any] = {"href": node.url}
        if node.title:
            base["title"] = node.title
        self._output.append(f"<a{self._attrs(node, base)}>{content}</a>")

    def visit_image(self, node: Image) -> None:
        """Render an Image node; ``alt``, ``width`` and ``height`` render attributes win."""
        base: dict[str, Any] = {"src": node.url, "alt": node.alt_text}
        if node.title:
            base["title"] = node.title
        self._output.append(f"<img{self._attrs(node, base)}>")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("<br>\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node verbatim."""
        self._output.append(node.content)

    def visit_wiki_link(self, node: WikiLink) -> None:
        """Render an unresolved WikiLink as its source syntax."""
        source = node.target
        if node.anchor:
            source += f"#{node.anchor}"
        if node.alias:
            source += f"|{node.alias}"
        prefix = "!" if node.embedded else ""
        self._output.append(escape_html(f"{prefix}[[{source}]]"))

    def visit_highlight(self, node: Highlight) -> None:
        """Render an unresolved Highlight as its source syntax."""
        self._output.append(f"=={self._render_inline_content(node.content)}==")

    def visit_tag(self, node: Tag) -> None:
        """Render an unresolved Tag as its source syntax."""
        self._output.append(escape_html(f"#{node.value}"))
