#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for note documents.

The module consists of several components:

- nodes: AST node classes, including the dialect nodes (WikiLink, Highlight, Tag)
- visitors: Visitor pattern base class for AST traversal
- transforms: NodeTransformer, NodeCollector and node extraction helpers
- utils: text extraction and render-attribute helpers

Examples
--------
    >>> from ofmark.ast import Document, Paragraph, Text, WikiLink
    >>> doc = Document(children=[
    ...     Paragraph(content=[Text(content="See "), WikiLink(target="Other Note")])
    ... ])

"""

from __future__ import annotations

from ofmark.ast.nodes import (
    DIALECT_NODE_TYPES,
    Alignment,
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
    get_node_children,
    replace_node_children,
)
from ofmark.ast.transforms import NodeCollector, NodeTransformer, extract_nodes
from ofmark.ast.utils import extract_text, get_render_attrs, update_render_attrs
from ofmark.ast.visitors import NodeVisitor

__all__ = [
    "DIALECT_NODE_TYPES",
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "Highlight",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Tag",
    "Text",
    "ThematicBreak",
    "WikiLink",
    "get_node_children",
    "replace_node_children",
    "NodeCollector",
    "NodeTransformer",
    "NodeVisitor",
    "extract_nodes",
    "extract_text",
    "get_render_attrs",
    "update_render_attrs",
]
