#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/text.py
"""Raw-text normalization applied before tokenization."""

from __future__ import annotations

from ofmark.grammar import CALLOUT_LINE_PATTERN


def normalize_callout_lines(src: str) -> str:
    """Insert a quoted line break after every callout-opening line.

    The directive line then forms its own line inside the block-quote's first
    paragraph, keeping the title apart from the body text.

    Parameters
    ----------
    src : str
        Raw note text

    Returns
    -------
    str
        Text with ``"\\n> "`` appended to each callout-opening line; text
        without callout lines is returned unchanged

    Examples
    --------
    >>> normalize_callout_lines("> [!note] Title\\n> body")
    '> [!note] Title\\n> \\n> body'

    """
    return CALLOUT_LINE_PATTERN.sub(lambda m: m.group(0) + "\n> ", src)
