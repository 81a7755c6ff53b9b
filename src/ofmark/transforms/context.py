#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/context.py
"""Per-document state shared by the transform stages.

A fresh :class:`DocumentContext` is created for every document. Stages write
to it (tags, diagram flag, block ids) and the caller reads it once the
pipeline has finished. Nothing in it is shared between documents.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Optional

from ofmark.ast.nodes import Node
from ofmark.constants import DEFAULT_SLUG
from ofmark.utils.text import path_to_root


@dataclass
class DocumentContext:
    """Side-channel state for one document.

    Parameters
    ----------
    slug : str, default = "index"
        Page slug of the document being processed, used to build relative
        tag index URLs
    all_slugs : set of str or None, default = None
        Slugs of every known note, used for broken-link detection. None is
        treated as an empty set.
    tags : list of str, default = empty list
        Canonical tag slugs in first-seen order, without duplicates
    has_mermaid_diagram : bool, default = False
        True once a mermaid code block has been seen
    blocks : dict, default = empty dict
        Block reference ids mapped to the node that carries them

    Examples
    --------
    >>> context = DocumentContext(slug="notes/today")
    >>> context.add_tag("project/alpha")
    True
    >>> context.add_tag("project/alpha")
    False
    >>> context.tags
    ['project/alpha']

    """

    slug: str = DEFAULT_SLUG
    all_slugs: Optional[AbstractSet[str]] = None
    tags: list[str] = field(default_factory=list)
    has_mermaid_diagram: bool = False
    blocks: dict[str, Node] = field(default_factory=dict)

    @property
    def base_url(self) -> str:
        """Relative path from this document to the site root."""
        return path_to_root(self.slug)

    def add_tag(self, tag: str) -> bool:
        """Record a tag slug, returning False if it was already present."""
        if tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def slug_exists(self, slug: str) -> bool:
        """Return True when the slug belongs to a known note."""
        return self.all_slugs is not None and slug in self.all_slugs
