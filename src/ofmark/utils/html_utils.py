"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Any, Mapping


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def format_attribute_value(value: Any) -> str:
    """Format a single attribute value, joining class lists with spaces."""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def format_attributes(attrs: Mapping[str, Any]) -> str:
    """Serialize a render-attribute mapping to an HTML attribute string.

    Booleans render as bare attributes when true and are omitted when false;
    None values and empty class lists are omitted. The result starts with a
    space when non-empty so it can be appended directly to a tag name.

    Examples
    --------
    >>> format_attributes({"class": ["callout", "note"], "data-callout-fold": False, "id": None})
    ' class="callout note"'

    """
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, (list, tuple)) and not value:
            continue
        parts.append(f' {name}="{escape_html(format_attribute_value(value))}"')
    return "".join(parts)
