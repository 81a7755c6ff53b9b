#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/_builtin_metadata.py
"""Metadata definitions for the built-in dialect stages.

Priorities fix the stage order. The first seven run in the order the dialect
requires (wikilinks first, diagrams last); the remaining stages are the
post-processing stages for block ids, external embeds, checkboxes and
application links.

"""

from __future__ import annotations

from ofmark.transforms.block_refs import BlockReferenceTransform
from ofmark.transforms.callouts import CalloutTransform
from ofmark.transforms.checkbox import CheckboxTransform
from ofmark.transforms.embeds import TweetEmbedTransform, YouTubeEmbedTransform
from ofmark.transforms.highlights import HighlightTransform
from ofmark.transforms.inline_html import InlineHtmlTransform
from ofmark.transforms.mermaid import MermaidTransform
from ofmark.transforms.metadata import StageMetadata
from ofmark.transforms.obsidian_uri import ObsidianUriTransform
from ofmark.transforms.tags import TagTransform
from ofmark.transforms.video import VideoEmbedTransform
from ofmark.transforms.wikilinks import WikilinkTransform

WIKILINKS_METADATA = StageMetadata(
    name="wikilinks",
    description="Resolve wikilinks and embeds into links, images and media markup",
    transformer_class=WikilinkTransform,
    option="wikilinks",
    priority=30,
    tags=["links", "embeds"],
)

HIGHLIGHTS_METADATA = StageMetadata(
    name="highlights",
    description="Rewrite ==highlights== as highlight spans",
    transformer_class=HighlightTransform,
    option="highlight",
    priority=40,
    tags=["inline"],
)

TAGS_METADATA = StageMetadata(
    name="tags",
    description="Turn #tags into tag index links and collect them",
    transformer_class=TagTransform,
    option="parse_tags",
    priority=50,
    tags=["links", "metadata"],
)

INLINE_HTML_METADATA = StageMetadata(
    name="inline-html",
    description="Apply wikilink, highlight and tag rewriting inside raw HTML",
    transformer_class=InlineHtmlTransform,
    option="enable_in_html_embed",
    priority=60,
    tags=["html"],
)

VIDEO_EMBEDS_METADATA = StageMetadata(
    name="video-embeds",
    description="Render image references to video files as video elements",
    transformer_class=VideoEmbedTransform,
    option="enable_video_embed",
    priority=70,
    tags=["embeds", "media"],
)

CALLOUTS_METADATA = StageMetadata(
    name="callouts",
    description="Restructure [!kind] block-quotes into collapsible callouts",
    transformer_class=CalloutTransform,
    option="callouts",
    priority=80,
    tags=["blocks"],
)

MERMAID_METADATA = StageMetadata(
    name="mermaid",
    description="Tag mermaid code blocks for client-side diagram rendering",
    transformer_class=MermaidTransform,
    option="mermaid",
    priority=90,
    tags=["blocks", "diagrams"],
)

BLOCK_REFERENCES_METADATA = StageMetadata(
    name="block-references",
    description="Turn trailing ^block-id markers into element ids",
    transformer_class=BlockReferenceTransform,
    option="parse_block_references",
    priority=100,
    tags=["blocks", "links"],
)

YOUTUBE_EMBEDS_METADATA = StageMetadata(
    name="youtube-embeds",
    description="Embed YouTube videos and playlists referenced with image syntax",
    transformer_class=YouTubeEmbedTransform,
    option="enable_youtube_embed",
    priority=110,
    tags=["embeds", "media"],
)

TWEET_EMBEDS_METADATA = StageMetadata(
    name="tweet-embeds",
    description="Embed tweets referenced with image syntax",
    transformer_class=TweetEmbedTransform,
    option="enable_tweet_embed",
    priority=120,
    tags=["embeds"],
)

CHECKBOX_METADATA = StageMetadata(
    name="checkbox",
    description="Make task list checkboxes interactive",
    transformer_class=CheckboxTransform,
    option="enable_checkbox",
    priority=130,
    tags=["lists"],
)

OBSIDIAN_URI_METADATA = StageMetadata(
    name="obsidian-uri",
    description="Mark obsidian:// links",
    transformer_class=ObsidianUriTransform,
    option="enable_obsidian_uri",
    priority=140,
    tags=["links"],
)

BUILTIN_STAGES = [
    WIKILINKS_METADATA,
    HIGHLIGHTS_METADATA,
    TAGS_METADATA,
    INLINE_HTML_METADATA,
    VIDEO_EMBEDS_METADATA,
    CALLOUTS_METADATA,
    MERMAID_METADATA,
    BLOCK_REFERENCES_METADATA,
    YOUTUBE_EMBEDS_METADATA,
    TWEET_EMBEDS_METADATA,
    CHECKBOX_METADATA,
    OBSIDIAN_URI_METADATA,
]
