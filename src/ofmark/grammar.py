#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/grammar.py
"""Named grammar functions for the note dialect.

Every piece of dialect syntax that the transform stages recognize is matched
here and returned as a small, frozen match record. The tree stages and the
raw-HTML text substitution stage share these functions so that both paths
agree on what a wikilink, callout directive, tag or embed looks like.

Functions
---------
parse_wikilink : Match a complete ``!?[[target#anchor|alias]]`` reference
sub_wikilinks : Substitute wikilinks inside free text
parse_callout_directive : Match a ``[!kind|metadata]fold`` directive line
canonicalize_callout : Map a callout kind through the alias table
parse_image_embed_alias : Extract alt text and dimensions from an embed alias
is_external_url : Test for an absolute http(s) URL
is_numeric_tag : Test for a tag made only of digits and slashes
is_video_url : Test an image URL for a video file extension
parse_block_reference : Split a trailing ``^block-id`` marker off text
parse_youtube_url : Resolve a YouTube video or playlist link to an embed URL
is_tweet_url : Test for a twitter.com / x.com status URL

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from ofmark.constants import (
    CALLOUT_ALIASES,
    IMAGE_EMBED_DIMENSION_DEFAULT,
    VIDEO_URL_EXTENSIONS,
    FoldState,
)

# !? then [[ target ]] with optional #anchor and optional (escaped) |alias
WIKILINK_PATTERN = re.compile(r"!?\[\[([^\[\]\|\#\\]+)?(#+[^\[\]\|\#\\]+)?(\\?\|[^\[\]\#]*)?\]\]")
EXTERNAL_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
CALLOUT_DIRECTIVE_PATTERN = re.compile(r"^\[!(?P<kind>[\w-]+)\|?(?P<metadata>.+?)?\](?P<fold>[+-]?)")
CALLOUT_LINE_PATTERN = re.compile(r"^> *\[!\w+\|?.*?\][+-]?.*$", re.MULTILINE)
IMAGE_EMBED_ALIAS_PATTERN = re.compile(
    r"^(?P<alt>(?!^\d*x?\d*$).*?)?(\|?\s*?(?P<width>\d+)(x(?P<height>\d+)?)?)?$"
)
NUMERIC_TAG_PATTERN = re.compile(r"^[/\d]+$")
TAG_PATTERN = re.compile(r"(?<!\S)#([-\w]+(?:/[-\w]+)*)")
HIGHLIGHT_PATTERN = re.compile(r"==((?!=).+?)==")
VIDEO_URL_PATTERN = re.compile(r"\.(" + "|".join(VIDEO_URL_EXTENSIONS) + r")$")
BLOCK_REFERENCE_PATTERN = re.compile(r"(?:^|\s)\^(?P<id>[-_A-Za-z0-9]+)\s*$")
YOUTUBE_VIDEO_PATTERN = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
YOUTUBE_PLAYLIST_PATTERN = re.compile(r"[?&]list=([^#?&]*)")
YOUTUBE_HOST_PATTERN = re.compile(r"^https?://(www\.|m\.)?(youtube\.com|youtu\.be)/", re.IGNORECASE)
TWEET_URL_PATTERN = re.compile(r"^https?://(www\.)?(twitter\.com|x\.com)/\w+/status/\d+", re.IGNORECASE)
OBSIDIAN_URI_PREFIX = "obsidian://"

_YOUTUBE_VIDEO_ID_LENGTH = 11
_YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"


@dataclass(frozen=True)
class WikilinkMatch:
    """A parsed wikilink reference.

    Parameters
    ----------
    target : str
        Trimmed target path, empty for same-note anchors
    anchor : str or None
        Heading or block anchor without leading ``#`` characters
    alias : str or None
        Trimmed display text
    embedded : bool
        True when the reference starts with ``!``

    """

    target: str
    anchor: Optional[str]
    alias: Optional[str]
    embedded: bool


@dataclass(frozen=True)
class CalloutDirective:
    """A parsed callout directive line.

    Parameters
    ----------
    kind : str
        Canonical callout kind after alias lookup
    raw_kind : str
        Kind exactly as written
    metadata : str or None
        Free text after the ``|`` inside the brackets
    fold : {'', '+', '-'}
        Fold marker following the closing bracket
    title : str
        Trimmed text following the directive on the same line

    """

    kind: str
    raw_kind: str
    metadata: Optional[str]
    fold: FoldState
    title: str

    @property
    def collapsible(self) -> bool:
        """Whether a fold marker was present."""
        return self.fold in ("+", "-")

    @property
    def collapsed(self) -> bool:
        """Whether the callout starts collapsed."""
        return self.fold == "-"


@dataclass(frozen=True)
class ImageDimensions:
    """Display attributes of an image embed."""

    alt: str
    width: str
    height: str


@dataclass(frozen=True)
class BlockReference:
    """Text with its trailing ``^block-id`` marker removed."""

    text: str
    block_id: str


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _wikilink_from_match(match: re.Match[str]) -> WikilinkMatch:
    raw_target, raw_anchor, raw_alias = match.group(1, 2, 3)
    anchor = raw_anchor.lstrip("#") if raw_anchor else None
    alias = re.sub(r"^\\?\|", "", raw_alias) if raw_alias else None
    return WikilinkMatch(
        target=(raw_target or "").strip(),
        anchor=_blank_to_none(anchor),
        alias=_blank_to_none(alias),
        embedded=match.group(0).startswith("!"),
    )


def parse_wikilink(text: str) -> WikilinkMatch | None:
    """Parse text that consists of exactly one wikilink.

    Parameters
    ----------
    text : str
        Candidate text such as ``![[photo.png|300]]``

    Returns
    -------
    WikilinkMatch or None
        The parsed reference, or None when the text is not a single wikilink

    Examples
    --------
    >>> parse_wikilink("[[Some Note#Heading|shown]]")
    WikilinkMatch(target='Some Note', anchor='Heading', alias='shown', embedded=False)

    """
    match = WIKILINK_PATTERN.fullmatch(text)
    if match is None:
        return None
    return _wikilink_from_match(match)


def sub_wikilinks(text: str, replace: Callable[[WikilinkMatch, str], str]) -> str:
    """Replace every wikilink in free text.

    Parameters
    ----------
    text : str
        Text to scan
    replace : callable
        Called with the parsed reference and the literal matched text; returns
        the replacement string

    """
    return WIKILINK_PATTERN.sub(lambda m: replace(_wikilink_from_match(m), m.group(0)), text)


def canonicalize_callout(kind: str) -> str:
    """Map a callout kind to its canonical kind.

    Lookup is case-insensitive. Kinds missing from the alias table are custom
    kinds and map to their own lower-cased name, so the mapping is idempotent.

    Examples
    --------
    >>> canonicalize_callout("TLDR")
    'abstract'
    >>> canonicalize_callout("my-kind")
    'my-kind'

    """
    normalized = kind.lower()
    if normalized in CALLOUT_ALIASES:
        return CALLOUT_ALIASES[normalized]
    return normalized


def parse_callout_directive(line: str) -> CalloutDirective | None:
    """Parse the first line of a callout block-quote.

    Parameters
    ----------
    line : str
        First line of the block-quote's first paragraph, without the ``>`` marker

    Returns
    -------
    CalloutDirective or None
        Parsed directive, or None when the line does not open a callout

    Examples
    --------
    >>> d = parse_callout_directive("[!warning|meta] Custom Title")
    >>> d.kind, d.metadata, d.fold, d.title
    ('warning', 'meta', '', 'Custom Title')

    """
    match = CALLOUT_DIRECTIVE_PATTERN.match(line)
    if match is None:
        return None
    raw_kind = match.group("kind")
    return CalloutDirective(
        kind=canonicalize_callout(raw_kind),
        raw_kind=raw_kind,
        metadata=match.group("metadata"),
        fold=match.group("fold"),  # type: ignore[arg-type]
        title=line[match.end() :].strip(),
    )


def parse_image_embed_alias(alias: str | None) -> ImageDimensions:
    """Extract alt text and dimensions from an image embed alias.

    Accepts ``alt``, ``100``, ``100x200``, ``alt|100``, ``alt|100x200`` and
    ``alt 100x200``. A trailing ``x`` without a height (``alt|100x``) leaves
    the height unset. Anything unparseable yields the defaults.

    Returns
    -------
    ImageDimensions
        Alt defaults to ``""``; width and height default to ``"auto"``

    """
    match = IMAGE_EMBED_ALIAS_PATTERN.match(alias or "")
    if match is None:
        return ImageDimensions(alt="", width=IMAGE_EMBED_DIMENSION_DEFAULT, height=IMAGE_EMBED_DIMENSION_DEFAULT)
    return ImageDimensions(
        alt=match.group("alt") or "",
        width=match.group("width") or IMAGE_EMBED_DIMENSION_DEFAULT,
        height=match.group("height") or IMAGE_EMBED_DIMENSION_DEFAULT,
    )


def is_external_url(target: str) -> bool:
    """Return True for absolute http(s) URLs (case-insensitive scheme)."""
    return EXTERNAL_URL_PATTERN.match(target) is not None


def is_numeric_tag(value: str) -> bool:
    """Return True for tag values made only of digits and slashes, such as ``42/7``."""
    return NUMERIC_TAG_PATTERN.match(value) is not None


def is_video_url(url: str) -> bool:
    """Return True when a URL ends with a recognized video file extension."""
    return VIDEO_URL_PATTERN.search(url) is not None


def is_obsidian_uri(url: str) -> bool:
    """Return True for ``obsidian://`` application links."""
    return url.lower().startswith(OBSIDIAN_URI_PREFIX)


def parse_block_reference(text: str) -> BlockReference | None:
    """Split a trailing block reference marker off text.

    Examples
    --------
    >>> parse_block_reference("A claim worth linking ^claim-1")
    BlockReference(text='A claim worth linking', block_id='claim-1')

    """
    match = BLOCK_REFERENCE_PATTERN.search(text)
    if match is None:
        return None
    return BlockReference(text=text[: match.start()].rstrip(), block_id=match.group("id"))


def parse_youtube_url(url: str) -> str | None:
    """Resolve a YouTube watch, short or playlist link to its embed URL.

    Returns
    -------
    str or None
        ``https://www.youtube.com/embed/...`` URL, or None when the link is
        not a YouTube video or playlist

    """
    if YOUTUBE_HOST_PATTERN.match(url) is None:
        return None

    video_match = YOUTUBE_VIDEO_PATTERN.match(url)
    video_id = video_match.group(2) if video_match else None
    if video_id is not None and len(video_id) != _YOUTUBE_VIDEO_ID_LENGTH:
        video_id = None
    playlist_match = YOUTUBE_PLAYLIST_PATTERN.search(url)
    playlist_id = playlist_match.group(1) if playlist_match else None

    if video_id:
        suffix = f"?list={playlist_id}" if playlist_id else ""
        return f"{_YOUTUBE_EMBED_BASE}{video_id}{suffix}"
    if playlist_id:
        return f"{_YOUTUBE_EMBED_BASE}videoseries?list={playlist_id}"
    return None


def is_tweet_url(url: str) -> bool:
    """Return True for twitter.com and x.com status links."""
    return TWEET_URL_PATTERN.match(url) is not None
