#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/wikilinks.py
"""Wikilink and embed resolution.

Each WikiLink node is replaced according to a first-match-wins decision table:

1. embedded image (png, jpg, jpeg, gif, bmp, svg, webp): Image with
   ``width``/``height``/``alt`` render attributes parsed from the alias
2. embedded video (mp4, webm, ogv, mov, mkv): ``<video>`` markup
3. embedded audio (mp3, webm, wav, m4a, ogg, 3gp, flac): ``<audio>`` markup
4. embedded pdf: ``<iframe class="pdf">`` markup
5. any other embed: transclude placeholder resolved downstream
6. absolute http(s) target: external Link
7. broken-link suppression on and target unknown: ``<a class="internal broken">``
8. otherwise: internal Link to the target slug plus ``#anchor``

Link resolution for non-embeds (rules 6 to 8) lives in :func:`resolve_link`
so that the raw-HTML text substitution stage produces identical links.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ofmark.ast.nodes import Image, Link, Node, Text, WikiLink
from ofmark.ast.utils import with_render_attrs
from ofmark.constants import (
    AUDIO_EMBED_EXTENSIONS,
    DOCUMENT_EMBED_EXTENSIONS,
    IMAGE_EMBED_EXTENSIONS,
    VIDEO_EMBED_EXTENSIONS,
)
from ofmark.grammar import is_external_url, parse_image_embed_alias
from ofmark.options import ObsidianOptions
from ofmark.transforms.base import ObsidianTransform, generated_inline
from ofmark.transforms.context import DocumentContext
from ofmark.utils.html_utils import escape_html
from ofmark.utils.text import get_file_extension, slugify_file_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkResolution:
    """Outcome of resolving a non-embedded wikilink.

    Parameters
    ----------
    url : str or None
        Link destination; None for broken links
    text : str
        Display text
    external : bool
        True for absolute http(s) targets
    broken : bool
        True when the target is unknown and broken-link suppression is on

    """

    url: Optional[str]
    text: str
    external: bool = False
    broken: bool = False

    def to_html(self) -> str:
        """Render the resolution as an anchor element string."""
        text = escape_html(self.text)
        if self.broken:
            return f'<a class="internal broken">{text}</a>'
        return f'<a href="{escape_html(self.url or "")}">{text}</a>'


def _normalize(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_link(
    target: str,
    anchor: Optional[str],
    alias: Optional[str],
    context: DocumentContext,
    options: ObsidianOptions,
) -> LinkResolution:
    """Resolve a non-embedded wikilink target.

    Parameters
    ----------
    target : str
        Trimmed target path, possibly empty
    anchor : str or None
        Heading or block anchor, absent when None
    alias : str or None
        Display text, absent when None
    context : DocumentContext
        Document context providing the known slugs
    options : ObsidianOptions
        Options; ``disable_broken_wikilinks`` enables broken-link markers

    Returns
    -------
    LinkResolution
        URL and display text for the link

    """
    text = alias or target or anchor or ""

    if is_external_url(target):
        return LinkResolution(url=target, text=alias or target, external=True)

    slug = slugify_file_path(target) if target else ""
    if options.disable_broken_wikilinks and not context.slug_exists(slug):
        logger.debug("Broken wikilink to '%s' in %s", target, context.slug)
        return LinkResolution(url=None, text=text, broken=True)

    anchor_part = f"#{anchor}" if anchor else ""
    return LinkResolution(url=slug + anchor_part, text=text)


def _media_markup(element: str, url: str) -> str:
    return f'<{element} src="{escape_html(url)}" controls></{element}>'


def _transclude_markup(url: str, anchor: Optional[str], alias: Optional[str]) -> str:
    block = f"#{anchor}" if anchor else ""
    url = escape_html(url)
    block = escape_html(block)
    return (
        f'<blockquote class="transclude" data-url="{url}" data-block="{block}" '
        f'data-embed-alias="{escape_html(alias or "")}">'
        f'<a href="{url}{block}" class="transclude-inner">Transclude of {url}{block}</a></blockquote>'
    )


class WikilinkTransform(ObsidianTransform):
    """Replace WikiLink nodes with links, images or raw embed markup.

    Examples
    --------
    >>> doc = Document(children=[Paragraph(content=[WikiLink(target="photo.png", alias="300", embedded=True)])])
    >>> result = WikilinkTransform().transform(doc)
    >>> image = result.children[0].content[0]
    >>> image.url, image.metadata["render_attrs"]
    ('photo.png', {'width': '300', 'height': 'auto', 'alt': ''})

    """

    def visit_wiki_link(self, node: WikiLink) -> Node:
        """Resolve a WikiLink node."""
        target = node.target.strip()
        anchor = _normalize(node.anchor)
        alias = _normalize(node.alias)

        if node.embedded:
            return self._resolve_embed(target, anchor, alias)

        resolution = resolve_link(target, anchor, alias, self.context, self.options)
        if resolution.broken:
            return generated_inline(resolution.to_html())
        return Link(url=resolution.url or "", content=[Text(content=resolution.text)])

    def _resolve_embed(self, target: str, anchor: Optional[str], alias: Optional[str]) -> Node:
        ext = (get_file_extension(target) or "").lower()
        url = slugify_file_path(target)

        if ext in IMAGE_EMBED_EXTENSIONS:
            dims = parse_image_embed_alias(alias)
            return with_render_attrs(
                Image(url=url, alt_text=""),
                {"width": dims.width, "height": dims.height, "alt": dims.alt},
            )
        if ext in VIDEO_EMBED_EXTENSIONS:
            return generated_inline(_media_markup("video", url))
        if ext in AUDIO_EMBED_EXTENSIONS:
            return generated_inline(_media_markup("audio", url))
        if ext in DOCUMENT_EMBED_EXTENSIONS:
            return generated_inline(f'<iframe src="{escape_html(url)}" class="pdf"></iframe>')

        logger.debug("Transclude placeholder for '%s'", target)
        return generated_inline(_transclude_markup(url, anchor, alias), transclude=True)
