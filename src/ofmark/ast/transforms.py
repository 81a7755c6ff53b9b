#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/ast/transforms.py
"""AST transformation utilities.

This module provides the transformer and collector visitors that every
dialect stage builds on, plus a helper for extracting nodes.

Examples
--------
Find every wikilink left in a document:

    >>> from ofmark.ast import transforms
    >>> links = transforms.extract_nodes(doc, WikiLink)

"""

from __future__ import annotations

import copy
from typing import Callable, Type

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
    get_node_children,
    replace_node_children,
)
from ofmark.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses implement visit_* methods that return a replacement node, or
    None to remove the node. The transformer builds a new tree; the input
    tree is never mutated. A replacement node returned by a visit method is
    not traversed again by the same transformer.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> new_doc = UppercaseTransformer().transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, dropping removed ones."""
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform nodes generically using traversal helpers.

        Leaf nodes are shallow-copied with their own metadata dict; container
        nodes are rebuilt around their transformed children.

        """
        children = get_node_children(node)
        if not children:
            leaf = copy.copy(node)
            leaf.metadata = node.metadata.copy()
            return leaf

        transformed_children = self._transform_children(children)
        rebuilt = replace_node_children(node, transformed_children)
        rebuilt.metadata = node.metadata.copy()
        return rebuilt

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return CodeBlock(content=node.content, language=node.language, metadata=node.metadata.copy())

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Transform a BlockQuote node."""
        return BlockQuote(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return List(
            ordered=node.ordered,
            items=self._transform_children(node.items),  # type: ignore[arg-type]
            start=node.start,
            tight=node.tight,
            metadata=node.metadata.copy(),
        )

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return ListItem(
            children=self._transform_children(node.children),
            task_status=node.task_status,
            metadata=node.metadata.copy(),
        )

    def visit_table(self, node: Table) -> Table:
        """Transform a Table node."""
        return Table(
            rows=self._transform_children(node.rows),  # type: ignore[arg-type]
            header=self.transform(node.header) if node.header else None,  # type: ignore[arg-type]
            alignments=node.alignments.copy(),
            metadata=node.metadata.copy(),
        )

    def visit_table_row(self, node: TableRow) -> TableRow:
        """Transform a TableRow node."""
        return TableRow(
            cells=self._transform_children(node.cells),  # type: ignore[arg-type]
            is_header=node.is_header,
            metadata=node.metadata.copy(),
        )

    def visit_table_cell(self, node: TableCell) -> TableCell:
        """Transform a TableCell node."""
        return TableCell(
            content=self._transform_children(node.content),
            alignment=node.alignment,
            metadata=node.metadata.copy(),
        )

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak:
        """Transform a ThematicBreak node."""
        return ThematicBreak(metadata=node.metadata.copy())

    def visit_html_block(self, node: HTMLBlock) -> HTMLBlock:
        """Transform an HTMLBlock node."""
        return HTMLBlock(content=node.content, metadata=node.metadata.copy())

    def visit_text(self, node: Text) -> Node:
        """Transform a Text node."""
        return Text(content=node.content, metadata=node.metadata.copy())

    def visit_emphasis(self, node: Emphasis) -> Emphasis:
        """Transform an Emphasis node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong:
        """Transform a Strong node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strikethrough(self, node: Strikethrough) -> Strikethrough:
        """Transform a Strikethrough node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code:
        """Transform a Code node."""
        return Code(content=node.content, metadata=node.metadata.copy())

    def visit_link(self, node: Link) -> Node:
        """Transform a Link node."""
        return Link(
            url=node.url,
            content=self._transform_children(node.content),
            title=node.title,
            metadata=node.metadata.copy(),
        )

    def visit_image(self, node: Image) -> Node:
        """Transform an Image node."""
        return Image(url=node.url, alt_text=node.alt_text, title=node.title, metadata=node.metadata.copy())

    def visit_line_break(self, node: LineBreak) -> LineBreak:
        """Transform a LineBreak node."""
        return LineBreak(metadata=node.metadata.copy())

    def visit_html_inline(self, node: HTMLInline) -> Node:
        """Transform an HTMLInline node."""
        return HTMLInline(content=node.content, metadata=node.metadata.copy())

    def visit_wiki_link(self, node: WikiLink) -> Node | None:
        """Transform a WikiLink node."""
        return WikiLink(
            target=node.target,
            anchor=node.anchor,
            alias=node.alias,
            embedded=node.embedded,
            metadata=node.metadata.copy(),
        )

    def visit_highlight(self, node: Highlight) -> Node | None:
        """Transform a Highlight node."""
        return Highlight(content=self._transform_children(node.content), metadata=node.metadata.copy())

    def visit_tag(self, node: Tag) -> Node | None:
        """Transform a Tag node."""
        return Tag(value=node.value, metadata=node.metadata.copy())


class NodeCollector(NodeVisitor):
    """Visitor that collects nodes matching a predicate.

    Parameters
    ----------
    predicate : callable or None, default = None
        Function that returns True for nodes to collect. None collects all nodes.

    """

    def __init__(self, predicate: Callable[[Node], bool] | None = None):
        """Initialize collector with optional predicate."""
        self.predicate = predicate or (lambda n: True)
        self.collected: list[Node] = []

    def _generic_visit(self, node: Node) -> None:
        if self.predicate(node):
            self.collected.append(node)
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Collect from a Document node."""
        self._generic_visit(node)

    def visit_heading(self, node: Heading) -> None:
        """Collect from a Heading node."""
        self._generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Collect from a Paragraph node."""
        self._generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Collect from a CodeBlock node."""
        self._generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Collect from a BlockQuote node."""
        self._generic_visit(node)

    def visit_list(self, node: List) -> None:
        """Collect from a List node."""
        self._generic_visit(node)

    def visit_list_item(self, node: ListItem) -> None:
        """Collect from a ListItem node."""
        self._generic_visit(node)

    def visit_table(self, node: Table) -> None:
        """Collect from a Table node."""
        self._generic_visit(node)

    def visit_table_row(self, node: TableRow) -> None:
        """Collect from a TableRow node."""
        self._generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Collect from a TableCell node."""
        self._generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Collect from a ThematicBreak node."""
        self._generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Collect from an HTMLBlock node."""
        self._generic_visit(node)

    def visit_text(self, node: Text) -> None:
        """Collect from a Text node."""
        self._generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Collect from an Emphasis node."""
        self._generic_visit(node)

    def visit_strong(self, node: Strong) -> None:
        """Collect from a Strong node."""
        self._generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Collect from a Strikethrough node."""
        self._generic_visit(node)

    def visit_code(self, node: Code) -> None:
        """Collect from a Code node."""
        self._generic_visit(node)

    def visit_link(self, node: Link) -> None:
        """Collect from a Link node."""
        self._generic_visit(node)

    def visit_image(self, node: Image) -> None:
        """Collect from an Image node."""
        self._generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> None:
        """Collect from a LineBreak node."""
        self._generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Collect from an HTMLInline node."""
        self._generic_visit(node)

    def visit_wiki_link(self, node: WikiLink) -> None:
        """Collect from a WikiLink node."""
        self._generic_visit(node)

    def visit_highlight(self, node: Highlight) -> None:
        """Collect from a Highlight node."""
        self._generic_visit(node)

    def visit_tag(self, node: Tag) -> None:
        """Collect from a Tag node."""
        self._generic_visit(node)


def extract_nodes(doc: Node, node_type: Type[Node] | tuple[Type[Node], ...] | None = None) -> list[Node]:
    """Extract all nodes of a specific type from a tree.

    Parameters
    ----------
    doc : Node
        Root node to search (usually a Document)
    node_type : type, tuple of types, or None, default = None
        Type(s) of nodes to extract. None extracts all nodes.

    Returns
    -------
    list of Node
        Matching nodes in document (pre-)order

    Examples
    --------
    >>> tags = extract_nodes(doc, Tag)

    """
    if node_type is None:
        collector = NodeCollector()
    else:
        collector = NodeCollector(predicate=lambda n: isinstance(n, node_type))
    doc.accept(collector)
    return collector.collected
