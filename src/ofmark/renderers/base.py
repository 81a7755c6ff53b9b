#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/renderers/base.py
"""Base classes for AST renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from ofmark.ast.nodes import Document, Node


class BaseRenderer(ABC):
    """Abstract base class for renderers of finished note trees."""

    @abstractmethod
    def render_to_string(self, document: Document) -> str:
        """Render a document to a string."""

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a path or stream."""
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Binary streams receive UTF-8 encoded bytes; text streams receive the
        string unchanged.

        Raises
        ------
        TypeError
            If output type is not supported

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif hasattr(output, "mode") and "b" in output.mode:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        elif hasattr(output, "write"):
            try:
                output.write(text)  # type: ignore[arg-type]
            except TypeError:
                output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")


class InlineContentMixin:
    """Mixin providing the inline content rendering pattern.

    The implementing class must have an ``_output`` list and visitor methods
    that append to it.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text by temporarily capturing output."""
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
