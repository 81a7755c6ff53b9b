#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for ofmark.

Options are frozen dataclasses; use ``create_updated`` or
``ObsidianOptions.from_mapping`` to derive modified copies.
"""

from __future__ import annotations

from ofmark.options.base import CloneFrozenMixin
from ofmark.options.obsidian import ObsidianOptions

__all__ = ["CloneFrozenMixin", "ObsidianOptions"]
