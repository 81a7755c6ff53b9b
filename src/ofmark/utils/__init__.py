#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/utils/__init__.py
"""Utility modules for the ofmark package.

This package contains the slug helpers used to build link targets and the
HTML escaping helpers shared by the transform stages and the renderer.
"""

from ofmark.utils.html_utils import escape_html, format_attributes
from ofmark.utils.text import capitalize, get_file_extension, path_to_root, slug_tag, slugify_file_path

__all__ = [
    "capitalize",
    "escape_html",
    "format_attributes",
    "get_file_extension",
    "path_to_root",
    "slug_tag",
    "slugify_file_path",
]
