#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/base.py
"""Base class for the dialect transform stages."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ofmark.ast.nodes import HTMLBlock, HTMLInline
from ofmark.ast.transforms import NodeTransformer
from ofmark.ast.utils import GENERATED_KEY
from ofmark.exceptions import InvalidOptionsError
from ofmark.options import ObsidianOptions
from ofmark.transforms.context import DocumentContext

logger = logging.getLogger(__name__)


class ObsidianTransform(NodeTransformer):
    """NodeTransformer bound to one document's context and the shared options.

    Stage instances are created per document, so a stage may keep per-document
    state on ``self.context`` without synchronization.

    Parameters
    ----------
    context : DocumentContext, optional
        Per-document state; a fresh context is created when omitted
    options : ObsidianOptions, optional
        Feature toggles; defaults are used when omitted

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an ObsidianOptions instance

    """

    def __init__(self, context: Optional[DocumentContext] = None, options: Optional[ObsidianOptions] = None):
        """Initialize the stage with its document context and options."""
        if options is not None and not isinstance(options, ObsidianOptions):
            raise InvalidOptionsError(type(self).__name__, ObsidianOptions, type(options))
        self.context = context if context is not None else DocumentContext()
        self.options = options if options is not None else ObsidianOptions()


def generated_inline(content: str, **metadata: Any) -> HTMLInline:
    """Create an inline raw markup node marked as stage output."""
    return HTMLInline(content=content, metadata={GENERATED_KEY: True, **metadata})


def generated_block(content: str, **metadata: Any) -> HTMLBlock:
    """Create a block raw markup node marked as stage output."""
    return HTMLBlock(content=content, metadata={GENERATED_KEY: True, **metadata})
