#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/api.py
"""Convenience functions for processing single notes."""

from __future__ import annotations

from typing import AbstractSet, Any, Optional

from ofmark.constants import DEFAULT_SLUG
from ofmark.options import ObsidianOptions
from ofmark.transforms.pipeline import Pipeline, ProcessedDocument


def _build_options(options: Optional[ObsidianOptions], flags: dict[str, Any]) -> ObsidianOptions:
    if not flags:
        return options or ObsidianOptions()
    return ObsidianOptions.from_mapping(flags, base=options)


def process_note(
    source: str,
    slug: str = DEFAULT_SLUG,
    *,
    options: Optional[ObsidianOptions] = None,
    all_slugs: Optional[AbstractSet[str]] = None,
    **flags: Any,
) -> ProcessedDocument:
    r"""Parse and transform one note.

    Parameters
    ----------
    source : str
        Note text
    slug : str, default = "index"
        The note's page slug, used for relative tag URLs
    options : ObsidianOptions, optional
        Feature toggles; defaults are used when omitted
    all_slugs : set of str, optional
        Slugs of every known note, for broken-link detection
    flags : bool
        Individual option flags applied on top of ``options``
        (snake_case or camelCase names)

    Returns
    -------
    ProcessedDocument
        The transformed AST and its context (tags, diagram flag, block ids)

    Raises
    ------
    ValidationError
        If a flag name is unknown or its value is not a boolean
    ParsingError
        If the note cannot be tokenized
    TransformError
        If a stage fails

    Examples
    --------
        >>> processed = process_note("> [!tldr] Summary\\n> text", enableCheckbox=True)
        >>> processed.document.children[0].metadata["render_attrs"]["data-callout"]
        'abstract'

    """
    pipeline = Pipeline(options=_build_options(options, flags), all_slugs=all_slugs)
    return pipeline.process(source, slug=slug)


def render_note(
    source: str,
    slug: str = DEFAULT_SLUG,
    *,
    options: Optional[ObsidianOptions] = None,
    all_slugs: Optional[AbstractSet[str]] = None,
    **flags: Any,
) -> str:
    r"""Process one note and render it to an HTML fragment.

    Accepts the same arguments as :func:`process_note`.

    Examples
    --------
        >>> render_note("Some ==marked== text")
        '<p>Some <span class="text-highlight">marked</span> text</p>\n'

    """
    pipeline = Pipeline(options=_build_options(options, flags), all_slugs=all_slugs)
    return pipeline.render(pipeline.process(source, slug=slug).document)
