#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/block_refs.py
"""Block reference ids.

A block ends with a ``^block-id`` marker so other notes can link to it with
``[[note#^block-id]]``::

    A claim worth linking ^claim-1

    - a list item ^item-1

    | a | table |

    ^table-1

The marker is removed from the text and the id becomes the element's ``id``
render attribute. A paragraph holding nothing but the marker assigns the id
to the block right before it and disappears. Every id is recorded in
:attr:`DocumentContext.blocks`.

"""

from __future__ import annotations

import logging
from typing import Optional

from ofmark.ast.nodes import BlockQuote, Document, ListItem, Node, Paragraph, Text
from ofmark.ast.utils import RENDER_ATTRS_KEY, get_render_attrs, with_render_attrs
from ofmark.grammar import parse_block_reference
from ofmark.transforms.base import ObsidianTransform

logger = logging.getLogger(__name__)

_STANDALONE_KEY = "block_reference"


class BlockReferenceTransform(ObsidianTransform):
    """Attach trailing ``^block-id`` markers to their blocks as ``id`` attributes."""

    def _register(self, node: Node, block_id: str) -> Node:
        if block_id in self.context.blocks:
            logger.debug("Duplicate block id '%s' in %s, last one wins", block_id, self.context.slug)
        self.context.blocks[block_id] = node
        return with_render_attrs(node, {"id": block_id})

    def visit_paragraph(self, node: Paragraph) -> Node:
        """Strip a trailing block reference marker from a Paragraph node."""
        paragraph = super().visit_paragraph(node)
        if not paragraph.content or not isinstance(paragraph.content[-1], Text):
            return paragraph

        reference = parse_block_reference(paragraph.content[-1].content)
        if reference is None:
            return paragraph

        if not reference.text and len(paragraph.content) == 1:
            paragraph.metadata[_STANDALONE_KEY] = reference.block_id
            return paragraph

        content = paragraph.content[:-1]
        if reference.text:
            content.append(Text(content=reference.text))
        return self._register(Paragraph(content=content, metadata=paragraph.metadata), reference.block_id)

    def _attach_standalone(self, children: list[Node]) -> list[Node]:
        """Move ids of marker-only paragraphs onto the preceding sibling."""
        result: list[Node] = []
        for child in children:
            block_id: Optional[str] = child.metadata.pop(_STANDALONE_KEY, None)
            if block_id is None:
                result.append(child)
            elif result:
                result[-1] = self._register(result[-1], block_id)
            else:
                # Nothing to attach to; keep the marker as a plain paragraph
                result.append(child)
        return result

    def visit_document(self, node: Document) -> Document:
        """Resolve standalone markers among the document's top-level blocks."""
        children = self._attach_standalone(self._transform_children(node.children))
        return Document(children=children, metadata=node.metadata.copy())

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Resolve standalone markers inside a BlockQuote node."""
        children = self._attach_standalone(self._transform_children(node.children))
        return BlockQuote(children=children, metadata=node.metadata.copy())

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Move a block id from the item's leading paragraph onto the ListItem."""
        children = self._attach_standalone(self._transform_children(node.children))
        item = ListItem(children=children, task_status=node.task_status, metadata=node.metadata.copy())

        first = children[0] if children else None
        if not isinstance(first, Paragraph):
            return item
        attrs = get_render_attrs(first)
        block_id = attrs.pop("id", None)
        if block_id is None:
            return item

        first.metadata[RENDER_ATTRS_KEY] = attrs
        self.context.blocks.pop(block_id, None)
        return self._register(item, block_id)  # type: ignore[return-value]
