#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/ast/utils.py
"""Utility functions for working with AST nodes.

This module provides text extraction plus the helpers that read and write the
render-attribute bag stored in ``node.metadata``.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
get_render_attrs : Read a node's render attributes
update_render_attrs : Merge new render attributes into a node
with_render_attrs : Set render attributes and return the node

Examples
--------
    >>> from ofmark.ast import CodeBlock
    >>> from ofmark.ast.utils import get_render_attrs, update_render_attrs
    >>> block = CodeBlock(content="graph TD", language="mermaid")
    >>> update_render_attrs(block, {"class": ["mermaid"]})
    >>> get_render_attrs(block)
    {'class': ['mermaid']}

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, TypeVar, Union

from ofmark.ast.nodes import Text, get_node_children

if TYPE_CHECKING:
    from ofmark.ast.nodes import Node

NodeT = TypeVar("NodeT", bound="Node")

RENDER_ATTRS_KEY = "render_attrs"
HTML_TAG_KEY = "html_tag"
GENERATED_KEY = "generated"


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Recursively concatenates the content of all Text nodes, joining the parts
    found at each level with ``joiner``.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join text parts; use "" to keep the exact text

    Returns
    -------
    str
        Concatenated text content from all Text nodes

    """
    if isinstance(node_or_nodes, list):
        text_parts = []
        for node in node_or_nodes:
            extracted = extract_text(node, joiner=joiner)
            if extracted:
                text_parts.append(extracted)
        return joiner.join(text_parts)

    node = node_or_nodes
    if isinstance(node, Text):
        return node.content

    text_parts = []
    for child in get_node_children(node):
        extracted = extract_text(child, joiner=joiner)
        if extracted:
            text_parts.append(extracted)
    return joiner.join(text_parts)


def get_render_attrs(node: Node) -> dict[str, Any]:
    """Return a copy of the node's render attributes (empty when unset)."""
    return dict(node.metadata.get(RENDER_ATTRS_KEY, {}))


def update_render_attrs(node: Node, attrs: Mapping[str, Any]) -> None:
    """Merge render attributes into a node.

    The bag is replaced rather than mutated, since transformed nodes share
    nested metadata values with the nodes they were copied from.
    """
    node.metadata[RENDER_ATTRS_KEY] = {**node.metadata.get(RENDER_ATTRS_KEY, {}), **attrs}


def with_render_attrs(node: NodeT, attrs: Mapping[str, Any], html_tag: str | None = None) -> NodeT:
    """Merge render attributes (and optionally an element name) and return the node."""
    update_render_attrs(node, attrs)
    if html_tag is not None:
        node.metadata[HTML_TAG_KEY] = html_tag
    return node


def is_generated(node: Node) -> bool:
    """Return True for raw markup nodes produced by a transform stage rather than the tokenizer."""
    return bool(node.metadata.get(GENERATED_KEY))
