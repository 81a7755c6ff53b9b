#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/__init__.py
"""Dialect transform stages.

Each stage is a :class:`~ofmark.ast.transforms.NodeTransformer` bound to one
document's :class:`DocumentContext`. Stages are registered with the stage
registry together with the option flag that enables them and their position
in the stage order; :class:`Pipeline` runs the enabled ones.

Examples
--------
Run one stage by hand:

    >>> from ofmark.transforms import DocumentContext, TagTransform
    >>> context = DocumentContext(slug="notes/today")
    >>> doc = TagTransform(context).transform(doc)
    >>> context.tags
    ['project/alpha']

Register a custom stage:

    >>> from ofmark.transforms import ObsidianTransform, StageMetadata, stage_registry
    >>>
    >>> class ShoutTransform(ObsidianTransform):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> stage_registry.register(StageMetadata(
    ...     name="shout",
    ...     description="Upper-case all text",
    ...     transformer_class=ShoutTransform,
    ...     priority=200,
    ... ))

"""

from __future__ import annotations

from ._builtin_metadata import (
    BLOCK_REFERENCES_METADATA,
    BUILTIN_STAGES,
    CALLOUTS_METADATA,
    CHECKBOX_METADATA,
    HIGHLIGHTS_METADATA,
    INLINE_HTML_METADATA,
    MERMAID_METADATA,
    OBSIDIAN_URI_METADATA,
    TAGS_METADATA,
    TWEET_EMBEDS_METADATA,
    VIDEO_EMBEDS_METADATA,
    WIKILINKS_METADATA,
    YOUTUBE_EMBEDS_METADATA,
)
from .base import ObsidianTransform
from .block_refs import BlockReferenceTransform
from .callouts import CalloutTransform
from .checkbox import CheckboxTransform
from .context import DocumentContext
from .embeds import TweetEmbedTransform, YouTubeEmbedTransform
from .highlights import HighlightTransform
from .inline_html import InlineHtmlTransform
from .mermaid import MermaidTransform
from .metadata import StageMetadata
from .obsidian_uri import ObsidianUriTransform
from .pipeline import Pipeline, ProcessedDocument, merge_tags
from .registry import StageRegistry, stage_registry
from .tags import TagTransform
from .text import normalize_callout_lines
from .video import VideoEmbedTransform
from .wikilinks import LinkResolution, WikilinkTransform, resolve_link

__all__ = [
    # Core classes
    "DocumentContext",
    "ObsidianTransform",
    "StageMetadata",
    "StageRegistry",
    "stage_registry",
    # Pipeline
    "Pipeline",
    "ProcessedDocument",
    "merge_tags",
    "normalize_callout_lines",
    # Stages
    "WikilinkTransform",
    "HighlightTransform",
    "TagTransform",
    "InlineHtmlTransform",
    "VideoEmbedTransform",
    "CalloutTransform",
    "MermaidTransform",
    "BlockReferenceTransform",
    "YouTubeEmbedTransform",
    "TweetEmbedTransform",
    "CheckboxTransform",
    "ObsidianUriTransform",
    "LinkResolution",
    "resolve_link",
    # Stage metadata
    "BUILTIN_STAGES",
    "WIKILINKS_METADATA",
    "HIGHLIGHTS_METADATA",
    "TAGS_METADATA",
    "INLINE_HTML_METADATA",
    "VIDEO_EMBEDS_METADATA",
    "CALLOUTS_METADATA",
    "MERMAID_METADATA",
    "BLOCK_REFERENCES_METADATA",
    "YOUTUBE_EMBEDS_METADATA",
    "TWEET_EMBEDS_METADATA",
    "CHECKBOX_METADATA",
    "OBSIDIAN_URI_METADATA",
]
