#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/options/base.py
"""Immutable options support.

Options objects are frozen so one instance can be shared by every document a
pipeline processes. Changes are made by copying.
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from ofmark.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance; ``self`` is unchanged

        Raises
        ------
        ValidationError
            If a keyword does not name a field

        """
        known = {f.name for f in fields(self)}
        for name, value in kwargs.items():
            if name not in known:
                raise ValidationError(
                    f"{type(self).__name__} has no option '{name}'",
                    parameter_name=name,
                    parameter_value=value,
                )
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the field values keyed by field name."""
        return asdict(self)
