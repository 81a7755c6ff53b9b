#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the Obsidian dialect stages.

Each flag enables exactly the correspondingly named transform stage or
tokenizer feature. Options are immutable and shared by every document a
pipeline processes.
"""
# src/ofmark/options/obsidian.py

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from ofmark.constants import (
    DEFAULT_CALLOUTS,
    DEFAULT_COMMENTS,
    DEFAULT_DISABLE_BROKEN_WIKILINKS,
    DEFAULT_ENABLE_CHECKBOX,
    DEFAULT_ENABLE_IN_HTML_EMBED,
    DEFAULT_ENABLE_OBSIDIAN_URI,
    DEFAULT_ENABLE_TWEET_EMBED,
    DEFAULT_ENABLE_VIDEO_EMBED,
    DEFAULT_ENABLE_YOUTUBE_EMBED,
    DEFAULT_HIGHLIGHT,
    DEFAULT_MERMAID,
    DEFAULT_PARSE_BLOCK_REFERENCES,
    DEFAULT_PARSE_TAGS,
    DEFAULT_WIKILINKS,
)
from ofmark.exceptions import ValidationError
from ofmark.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class ObsidianOptions(CloneFrozenMixin):
    """Feature toggles for Obsidian-flavored markdown processing.

    Parameters
    ----------
    comments : bool, default True
        Drop ``%%comment%%`` spans while tokenizing.
    highlight : bool, default True
        Rewrite ``==highlight==`` spans.
    wikilinks : bool, default True
        Resolve ``[[wikilinks]]`` and ``![[embeds]]``.
    callouts : bool, default True
        Normalize and restructure ``> [!kind]`` callouts.
    mermaid : bool, default True
        Tag ``mermaid`` code fences as diagrams.
    parse_tags : bool, default True
        Resolve ``#tags`` into tag index links.
    parse_block_references : bool, default True
        Turn trailing ``^block-id`` markers into element ids.
    enable_in_html_embed : bool, default False
        Apply wikilink, highlight and tag rewriting inside raw HTML.
    enable_youtube_embed : bool, default True
        Embed YouTube links written as images.
    enable_tweet_embed : bool, default True
        Embed tweet links written as images.
    enable_video_embed : bool, default True
        Render images with video file extensions as video elements.
    enable_checkbox : bool, default False
        Make task list checkboxes interactive.
    enable_obsidian_uri : bool, default True
        Mark ``obsidian://`` links.
    disable_broken_wikilinks : bool, default False
        Render wikilinks to unknown notes as broken markers instead of links.

    """

    comments: bool = field(
        default=DEFAULT_COMMENTS,
        metadata={"help": "Drop %%comment%% spans while tokenizing", "alias": "comments"},
    )
    highlight: bool = field(
        default=DEFAULT_HIGHLIGHT,
        metadata={"help": "Rewrite ==highlight== spans", "alias": "highlight"},
    )
    wikilinks: bool = field(
        default=DEFAULT_WIKILINKS,
        metadata={"help": "Resolve [[wikilinks]] and ![[embeds]]", "alias": "wikilinks"},
    )
    callouts: bool = field(
        default=DEFAULT_CALLOUTS,
        metadata={"help": "Restructure > [!kind] callout block quotes", "alias": "callouts"},
    )
    mermaid: bool = field(
        default=DEFAULT_MERMAID,
        metadata={"help": "Tag mermaid code fences as diagrams", "alias": "mermaid"},
    )
    parse_tags: bool = field(
        default=DEFAULT_PARSE_TAGS,
        metadata={"help": "Resolve #tags into tag index links", "alias": "parseTags"},
    )
    parse_block_references: bool = field(
        default=DEFAULT_PARSE_BLOCK_REFERENCES,
        metadata={"help": "Turn trailing ^block-id markers into element ids", "alias": "parseBlockReferences"},
    )
    enable_in_html_embed: bool = field(
        default=DEFAULT_ENABLE_IN_HTML_EMBED,
        metadata={"help": "Rewrite wikilinks, highlights and tags inside raw HTML", "alias": "enableInHtmlEmbed"},
    )
    enable_youtube_embed: bool = field(
        default=DEFAULT_ENABLE_YOUTUBE_EMBED,
        metadata={"help": "Embed YouTube links written as images", "alias": "enableYouTubeEmbed"},
    )
    enable_tweet_embed: bool = field(
        default=DEFAULT_ENABLE_TWEET_EMBED,
        metadata={"help": "Embed tweet links written as images", "alias": "enableTweetEmbed"},
    )
    enable_video_embed: bool = field(
        default=DEFAULT_ENABLE_VIDEO_EMBED,
        metadata={"help": "Render images with video extensions as video elements", "alias": "enableVideoEmbed"},
    )
    enable_checkbox: bool = field(
        default=DEFAULT_ENABLE_CHECKBOX,
        metadata={"help": "Make task list checkboxes interactive", "alias": "enableCheckbox"},
    )
    enable_obsidian_uri: bool = field(
        default=DEFAULT_ENABLE_OBSIDIAN_URI,
        metadata={"help": "Mark obsidian:// links", "alias": "enableObsidianUri"},
    )
    disable_broken_wikilinks: bool = field(
        default=DEFAULT_DISABLE_BROKEN_WIKILINKS,
        metadata={"help": "Render wikilinks to unknown notes as broken markers", "alias": "disableBrokenWikilinks"},
    )

    def __post_init__(self) -> None:
        """Validate that every flag is a boolean.

        Raises
        ------
        ValidationError
            If any field holds a non-boolean value.

        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"Option '{f.name}' must be a boolean, got {type(value).__name__}",
                    parameter_name=f.name,
                    parameter_value=value,
                )

    @classmethod
    def field_names(cls) -> dict[str, str]:
        """Map every accepted key (field name and camelCase alias) to its field name."""
        names: dict[str, str] = {}
        for f in fields(cls):
            names[f.name] = f.name
            alias = f.metadata.get("alias")
            if alias:
                names[alias] = f.name
        return names

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], base: ObsidianOptions | None = None) -> Self:
        """Build options from a configuration mapping.

        Parameters
        ----------
        values : Mapping[str, Any]
            Flag values keyed by snake_case field name or camelCase alias
        base : ObsidianOptions, optional
            Options to start from; defaults are used when omitted

        Returns
        -------
        ObsidianOptions
            New options with the given flags applied

        Raises
        ------
        ValidationError
            If a key is unknown or a value is not a boolean

        Examples
        --------
        >>> ObsidianOptions.from_mapping({"enableCheckbox": True}).enable_checkbox
        True

        """
        accepted = cls.field_names()
        updates: dict[str, bool] = {}
        for key, value in values.items():
            if key not in accepted:
                raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"Option '{key}' must be a boolean, got {type(value).__name__}",
                    parameter_name=key,
                    parameter_value=value,
                )
            updates[accepted[key]] = value

        start = base if base is not None else cls()
        return start.create_updated(**updates)  # type: ignore[return-value]
