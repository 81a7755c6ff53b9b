#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/video.py
"""Video classification for plain image references.

Image syntax pointing at a video file (``![clip](media/intro.mp4)``) is turned
into a ``<video>`` element, giving bare references the same treatment as
``![[intro.mp4]]`` embeds.
"""

from __future__ import annotations

import logging

from ofmark.ast.nodes import Image, Node
from ofmark.grammar import is_video_url
from ofmark.transforms.base import ObsidianTransform, generated_inline
from ofmark.utils.html_utils import escape_html

logger = logging.getLogger(__name__)


def video_markup(url: str) -> str:
    """Render a video element for a media URL."""
    return f'<video controls src="{escape_html(url)}"></video>'


class VideoEmbedTransform(ObsidianTransform):
    """Replace Image nodes whose URL names a video file with raw video markup."""

    def visit_image(self, node: Image) -> Node:
        """Classify an Image node."""
        if not is_video_url(node.url):
            return super().visit_image(node)

        logger.debug("Image '%s' reclassified as video", node.url)
        return generated_inline(video_markup(node.url))
