#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/metadata.py
"""Metadata classes for transform stage registration.

Each stage is described by a :class:`StageMetadata` record naming the option
flag that enables it and its position in the fixed stage order.

Examples
--------
    >>> from ofmark.transforms import StageMetadata, stage_registry
    >>> stage_registry.register(StageMetadata(
    ...     name="strip-comments",
    ...     description="Remove leftover comment markers",
    ...     transformer_class=StripCommentsTransform,
    ...     priority=150,
    ... ))

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Type

from ofmark.options import ObsidianOptions
from ofmark.transforms.base import ObsidianTransform
from ofmark.transforms.context import DocumentContext

logger = logging.getLogger(__name__)


@dataclass
class StageMetadata:
    """Metadata for a transform stage.

    Parameters
    ----------
    name : str
        Unique identifier for the stage (e.g., "wikilinks")
    description : str
        Human-readable description of what the stage does
    transformer_class : type[ObsidianTransform]
        The stage class
    option : str or None, default = None
        Name of the ObsidianOptions flag that enables the stage. None means
        the stage always runs.
    priority : int, default = 100
        Execution order (lower runs first)
    tags : list[str], default = empty list
        Tags for categorization

    """

    name: str
    description: str
    transformer_class: Type[ObsidianTransform]
    option: Optional[str] = None
    priority: int = 100
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate metadata after initialization."""
        if not self.name:
            raise ValueError("Stage name cannot be empty")

        if not issubclass(self.transformer_class, ObsidianTransform):
            raise ValueError(
                f"transformer_class must inherit from ObsidianTransform, got {self.transformer_class.__name__}"
            )

        if self.priority < 0:
            raise ValueError(f"Priority must be non-negative, got {self.priority}")

        if self.option is not None and self.option not in ObsidianOptions.__dataclass_fields__:
            raise ValueError(f"Unknown option flag for stage '{self.name}': {self.option}")

    def is_enabled(self, options: ObsidianOptions) -> bool:
        """Return True when the stage's option flag is set (or it has none)."""
        return self.option is None or bool(getattr(options, self.option))

    def create_instance(self, context: DocumentContext, options: ObsidianOptions) -> ObsidianTransform:
        """Create a stage instance bound to one document."""
        return self.transformer_class(context=context, options=options)


__all__ = ["StageMetadata"]
