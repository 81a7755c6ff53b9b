#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/parsers/__init__.py
"""Reference tokenizer producing the dialect AST."""

from ofmark.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["MarkdownParser", "markdown_to_ast"]
