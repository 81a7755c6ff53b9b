#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the ofmark library.

Constants are organized by category:
1. Type Definitions
2. Option Defaults
3. Embed Extensions
4. Callouts
5. Client Assets
6. Configuration Discovery
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

FoldState = Literal["", "+", "-"]
LoadTime = Literal["beforeDOMReady", "afterDOMReady"]

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_COMMENTS = True
DEFAULT_HIGHLIGHT = True
DEFAULT_WIKILINKS = True
DEFAULT_CALLOUTS = True
DEFAULT_MERMAID = True
DEFAULT_PARSE_TAGS = True
DEFAULT_PARSE_BLOCK_REFERENCES = True
DEFAULT_ENABLE_IN_HTML_EMBED = False
DEFAULT_ENABLE_YOUTUBE_EMBED = True
DEFAULT_ENABLE_TWEET_EMBED = True
DEFAULT_ENABLE_VIDEO_EMBED = True
DEFAULT_ENABLE_CHECKBOX = False
DEFAULT_ENABLE_OBSIDIAN_URI = True
DEFAULT_DISABLE_BROKEN_WIKILINKS = False

DEFAULT_SLUG = "index"

# =============================================================================
# Embed Extensions
# =============================================================================

# Wikilink embeds, checked in this order (webm is both video and audio; video wins)
IMAGE_EMBED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".svg", ".webp"})
VIDEO_EMBED_EXTENSIONS = frozenset({".mp4", ".webm", ".ogv", ".mov", ".mkv"})
AUDIO_EMBED_EXTENSIONS = frozenset({".mp3", ".webm", ".wav", ".m4a", ".ogg", ".3gp", ".flac"})
DOCUMENT_EMBED_EXTENSIONS = frozenset({".pdf"})

# Plain image nodes reclassified as video by the video stage
VIDEO_URL_EXTENSIONS = (
    "mp4",
    "webm",
    "ogg",
    "avi",
    "mov",
    "flv",
    "wmv",
    "mkv",
    "mpg",
    "mpeg",
    "3gp",
    "m4v",
)

IMAGE_EMBED_DIMENSION_DEFAULT = "auto"

# =============================================================================
# Callouts
# =============================================================================

CALLOUT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "note": "note",
        "abstract": "abstract",
        "summary": "abstract",
        "tldr": "abstract",
        "info": "info",
        "todo": "todo",
        "tip": "tip",
        "hint": "tip",
        "important": "tip",
        "success": "success",
        "check": "success",
        "done": "success",
        "question": "question",
        "help": "question",
        "faq": "question",
        "warning": "warning",
        "attention": "warning",
        "caution": "warning",
        "failure": "failure",
        "missing": "failure",
        "fail": "failure",
        "danger": "danger",
        "error": "danger",
        "bug": "bug",
        "example": "example",
        "quote": "quote",
        "cite": "quote",
    }
)

CANONICAL_CALLOUT_KINDS = frozenset(CALLOUT_ALIASES.values())

MERMAID_LANGUAGE = "mermaid"

# =============================================================================
# Client Assets
# =============================================================================

STATIC_PACKAGE = "ofmark.static"
CALLOUT_SCRIPT = "callout.inline.js"
CHECKBOX_SCRIPT = "checkbox.inline.js"
MERMAID_SCRIPT = "mermaid.inline.js"
MERMAID_STYLESHEET = "mermaid.inline.css"

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILE_NAMES = (".ofmark.toml", ".ofmark.yaml", ".ofmark.yml", ".ofmark.json")
PYPROJECT_FILE_NAME = "pyproject.toml"
PYPROJECT_TOOL_SECTION = "ofmark"
