#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/utils/text.py
"""Slug utilities for note paths and tags.

These helpers turn vault-relative file paths and tag values into the slugs
used for link targets, tag index pages and known-slug lookups.

Functions
---------
slugify_file_path : Convert a note path to its page slug
slug_tag : Convert a tag value to its tag slug
path_to_root : Relative path from a page slug back to the site root
get_file_extension : Extension of a path including the dot
capitalize : Upper-case the first character of a string

Examples
--------
    >>> slugify_file_path("Notes/My Note.md")
    'Notes/My-Note'
    >>> slug_tag("Project/Q&A")
    'project/q-and-a'
    >>> path_to_root("notes/sub/page")
    '../..'

"""

from __future__ import annotations

import re

_EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+$")
_WHITESPACE_PATTERN = re.compile(r"\s")
_STRIPPED_EXTENSIONS = (".md", ".html")


def _sluggify(text: str) -> str:
    segments = []
    for segment in text.split("/"):
        segment = _WHITESPACE_PATTERN.sub("-", segment)
        segment = segment.replace("&", "-and-").replace("%", "-percent")
        segment = segment.replace("?", "").replace("#", "")
        segments.append(segment)
    return "/".join(segments).removesuffix("/")


def strip_slashes(path: str) -> str:
    """Remove one leading and one trailing slash from a path."""
    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    return path


def get_file_extension(path: str) -> str | None:
    """Return the file extension of a path including the dot.

    Parameters
    ----------
    path : str
        File path or URL

    Returns
    -------
    str or None
        Extension such as ``.png`` (case preserved), or None when the last
        path component has no alphanumeric extension

    """
    match = _EXTENSION_PATTERN.search(path)
    return match.group(0) if match else None


def slugify_file_path(path: str, exclude_ext: bool = False) -> str:
    """Convert a vault-relative file path to a page slug.

    Whitespace becomes ``-``, ``&`` becomes ``-and-``, ``%`` becomes
    ``-percent`` and ``?``/``#`` are dropped, per ``/`` separated segment.
    Markdown and HTML extensions are removed, other extensions are kept, and
    a trailing ``_index`` segment maps to ``index``.

    Parameters
    ----------
    path : str
        File path as written in the note
    exclude_ext : bool, default False
        Drop the extension regardless of its type

    Returns
    -------
    str
        Page slug

    """
    path = strip_slashes(path)
    ext = get_file_extension(path)
    without_ext = path[: -len(ext)] if ext else path
    if exclude_ext or ext is None or ext in _STRIPPED_EXTENSIONS:
        ext = ""

    slug = _sluggify(without_ext)
    if slug == "_index" or slug.endswith("/_index"):
        slug = slug[: -len("_index")] + "index"
    return slug + ext


def slug_tag(tag: str) -> str:
    """Convert a tag value to its canonical, lower-cased tag slug.

    Segments separated by ``/`` are slugged independently. The result is
    stable under repeated application, so ``slug_tag(slug_tag(t)) == slug_tag(t)``.
    """
    return "/".join(_sluggify(segment).lower() for segment in tag.split("/"))


def path_to_root(slug: str) -> str:
    """Return the relative path from a page slug to the site root.

    Examples
    --------
    >>> path_to_root("index")
    '.'
    >>> path_to_root("folder/page")
    '..'

    """
    parents = [part for part in slug.split("/") if part][:-1]
    return "/".join(".." for _ in parents) or "."


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest unchanged."""
    return text[:1].upper() + text[1:]
