#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers for finished note trees."""

from ofmark.renderers.base import BaseRenderer, InlineContentMixin
from ofmark.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin"]
