#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/embeds.py
"""External media embeds.

Image syntax pointing at a YouTube video or playlist becomes an embedded
player, and image syntax pointing at a tweet becomes a tweet blockquote for
the platform's widget script:

    ![](https://www.youtube.com/watch?v=dQw4w9WgXcQ)
    ![](https://x.com/someone/status/1234567890)

"""

from __future__ import annotations

import logging

from ofmark.ast.nodes import Image, Node
from ofmark.grammar import is_tweet_url, parse_youtube_url
from ofmark.transforms.base import ObsidianTransform, generated_inline
from ofmark.utils.html_utils import escape_html, format_attributes

logger = logging.getLogger(__name__)

YOUTUBE_EMBED_WIDTH = "600px"


def youtube_markup(embed_url: str) -> str:
    """Render an iframe player for a YouTube embed URL."""
    attrs = {
        "class": ["external-embed", "youtube"],
        "allow": "fullscreen",
        "frameborder": "0",
        "width": YOUTUBE_EMBED_WIDTH,
        "src": embed_url,
    }
    return f"<iframe{format_attributes(attrs)}></iframe>"


def tweet_markup(url: str) -> str:
    """Render the blockquote placeholder picked up by the tweet widget script."""
    url = escape_html(url)
    return f'<blockquote class="twitter-tweet"><a href="{url}">{url}</a></blockquote>'


class YouTubeEmbedTransform(ObsidianTransform):
    """Replace Image nodes pointing at YouTube with an iframe player."""

    def visit_image(self, node: Image) -> Node:
        """Embed a YouTube Image node."""
        embed_url = parse_youtube_url(node.url)
        if embed_url is None:
            return super().visit_image(node)

        logger.debug("YouTube embed for '%s'", node.url)
        return generated_inline(youtube_markup(embed_url))


class TweetEmbedTransform(ObsidianTransform):
    """Replace Image nodes pointing at a tweet with a tweet blockquote."""

    def visit_image(self, node: Image) -> Node:
        """Embed a tweet Image node."""
        if not is_tweet_url(node.url):
            return super().visit_image(node)

        logger.debug("Tweet embed for '%s'", node.url)
        return generated_inline(tweet_markup(node.url))
