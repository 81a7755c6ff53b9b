#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/mermaid.py
"""Diagram code fence tagging."""

from __future__ import annotations

import json
import logging

from ofmark.ast.nodes import CodeBlock, Node
from ofmark.ast.utils import with_render_attrs
from ofmark.constants import MERMAID_LANGUAGE
from ofmark.transforms.base import ObsidianTransform

logger = logging.getLogger(__name__)


class MermaidTransform(ObsidianTransform):
    """Tag mermaid code blocks for client-side rendering.

    The diagram source stays as code; the block gains class ``mermaid`` and a
    ``data-clipboard`` attribute holding the JSON-encoded source for the copy
    button, and the document is flagged so the mermaid assets get loaded.

    Examples
    --------
    >>> context = DocumentContext()
    >>> doc = Document(children=[CodeBlock(content="graph TD; A-->B", language="mermaid")])
    >>> result = MermaidTransform(context).transform(doc)
    >>> context.has_mermaid_diagram
    True

    """

    def visit_code_block(self, node: CodeBlock) -> Node:
        """Tag a CodeBlock node when its language is mermaid."""
        block = super().visit_code_block(node)
        if node.language != MERMAID_LANGUAGE:
            return block

        self.context.has_mermaid_diagram = True
        logger.debug("Mermaid diagram found in %s", self.context.slug)
        return with_render_attrs(block, {"class": ["mermaid"], "data-clipboard": json.dumps(node.content)})
