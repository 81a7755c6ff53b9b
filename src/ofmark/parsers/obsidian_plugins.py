#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/parsers/obsidian_plugins.py
"""Mistune inline plugins for the note dialect.

Each plugin registers an inline rule ahead of mistune's ``link`` rule so that
``[[...]]`` is not mistaken for a reference link:

- ``wikilink``: ``!?[[target#anchor|alias]]`` emits a ``wikilink`` token
- ``obsidian_tag``: ``#tag/path`` emits an ``obsidian_tag`` token
- ``obsidian_comment``: ``%%comment%%`` is consumed without output

Highlights (``==text==``) use mistune's built-in ``mark`` plugin.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ofmark.grammar import TAG_PATTERN, parse_wikilink

if TYPE_CHECKING:
    import re

    from mistune import InlineParser, InlineState, Markdown

WIKILINK_TOKEN = "wikilink"
TAG_TOKEN = "obsidian_tag"

_WIKILINK_RULE = r"!?\[\[[^\[\]\n]*\]\]"
_COMMENT_RULE = r"%%[\s\S]*?%%"


def _parse_wikilink(inline: InlineParser, m: re.Match[str], state: InlineState) -> Optional[int]:
    link = parse_wikilink(m.group(0))
    if link is None or not (link.target or link.anchor):
        return None
    attrs: dict[str, Any] = {
        "target": link.target,
        "anchor": link.anchor,
        "alias": link.alias,
        "embedded": link.embedded,
    }
    state.append_token({"type": WIKILINK_TOKEN, "attrs": attrs})
    return m.end()


def _parse_tag(inline: InlineParser, m: re.Match[str], state: InlineState) -> int:
    match = TAG_PATTERN.match(m.group(0))
    value = match.group(1) if match else m.group(0)[1:]
    state.append_token({"type": TAG_TOKEN, "attrs": {"value": value}})
    return m.end()


def _parse_comment(inline: InlineParser, m: re.Match[str], state: InlineState) -> int:
    return m.end()


def wikilinks(md: Markdown) -> None:
    """Register the wikilink inline rule."""
    md.inline.register(WIKILINK_TOKEN, _WIKILINK_RULE, _parse_wikilink, before="link")


def tags(md: Markdown) -> None:
    """Register the tag inline rule."""
    md.inline.register(TAG_TOKEN, TAG_PATTERN.pattern, _parse_tag, before="link")


def comments(md: Markdown) -> None:
    """Register the comment inline rule, which drops ``%%...%%`` spans."""
    md.inline.register("obsidian_comment", _COMMENT_RULE, _parse_comment, before="link")
