"""ofmark - Obsidian-flavored markdown rendering.

ofmark tokenizes notes written in the Obsidian dialect and rewrites the
dialect syntax into plain markdown tree nodes and HTML fragments:

- ``[[wikilinks]]`` and ``![[embeds]]`` (images, video, audio, pdf, transclusion)
- ``==highlights==`` and ``#tags``
- ``> [!note]`` callouts, including foldable ones
- mermaid diagram fences
- ``^block-id`` references, YouTube and tweet embeds, task checkboxes

Every feature is a stage of a per-note pipeline and can be switched off
through :class:`ObsidianOptions`.

Examples
--------
    >>> from ofmark import render_note
    >>> render_note("See [[Other Note#Section|there]]")
    '<p>See <a href="Other-Note#Section">there</a></p>\n'

Keep the collected metadata:

    >>> from ofmark import process_note
    >>> processed = process_note("#project/alpha notes", slug="notes/today")
    >>> processed.context.tags
    ['project/alpha']

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from ofmark.api import process_note, render_note
from ofmark.config import discover_config_file, load_config_file, load_options
from ofmark.exceptions import (
    ConfigError,
    FileError,
    InvalidOptionsError,
    OfmarkError,
    ParsingError,
    RenderingError,
    TransformError,
    ValidationError,
)
from ofmark.options import ObsidianOptions
from ofmark.parsers import MarkdownParser, markdown_to_ast
from ofmark.renderers import HtmlRenderer
from ofmark.resources import CSSResource, ExternalResources, JSResource, external_resources
from ofmark.transforms import DocumentContext, Pipeline, ProcessedDocument, stage_registry

__all__ = [
    "__version__",
    # API
    "process_note",
    "render_note",
    # Pipeline
    "Pipeline",
    "ProcessedDocument",
    "DocumentContext",
    "stage_registry",
    "MarkdownParser",
    "markdown_to_ast",
    "HtmlRenderer",
    # Options and configuration
    "ObsidianOptions",
    "load_options",
    "load_config_file",
    "discover_config_file",
    # Resources
    "external_resources",
    "ExternalResources",
    "JSResource",
    "CSSResource",
    # Exceptions
    "OfmarkError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "FileError",
    "ParsingError",
    "TransformError",
    "RenderingError",
]
